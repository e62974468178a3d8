"""Mini README: Centralised configuration models and helpers for the tracker.

Structure:
    * TrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``FINTRACKER_*`` environment variables (or a
    local ``.env`` file). The category labels offered by the form and the
    filters live here rather than in the ledger so deployments can change them
    without touching code. Settings are cached, which also keeps the category
    set fixed for the lifetime of the process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Tuple, Union

from pydantic import Field, validator
from pydantic_settings import BaseSettings

DEFAULT_CATEGORIES: Tuple[str, ...] = (
    "Groceries",
    "Bills",
    "Salary",
    "Entertainment",
    "Misc",
)


class TrackerSettings(BaseSettings):
    """Runtime configuration for the financial tracker."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web page to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the web page exposes.",
        ge=1,
        le=65535,
    )
    categories: Tuple[str, ...] = Field(
        DEFAULT_CATEGORIES,
        description=(
            "Category labels accepted by the form and offered by the filters."
            " Provide a JSON list through the environment."
        ),
    )
    currency_symbol: str = Field("$", description="Prefix used when displaying amounts.")
    export_filename: str = Field(
        "transactions.json",
        description="File name suggested to browsers when downloading the ledger.",
    )
    seed_demo_transactions: bool = Field(
        True,
        description="Start the ledger with the two demonstration transactions.",
    )
    strict_remove: bool = Field(
        False,
        description="Raise instead of ignoring deletes that target unknown ids.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")

    class Config:
        env_prefix = "FINTRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("categories", pre=True)
    def _normalise_categories(cls, value: Union[str, Iterable[str]]) -> Tuple[str, ...]:
        """Accept comma separated strings, strip labels and drop duplicates."""

        if isinstance(value, str):
            value = value.split(",")
        labels: list[str] = []
        for raw in value:
            label = str(raw).strip()
            if not label:
                raise ValueError("Category labels must not be blank.")
            if label not in labels:
                labels.append(label)
        if not labels:
            raise ValueError("At least one category label is required.")
        return tuple(labels)


@lru_cache()
def get_settings() -> TrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return TrackerSettings()
