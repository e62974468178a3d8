"""Mini README: FastAPI-powered tracker page and JSON API.

Structure:
    * create_application - application factory wiring routes and templates.
    * Page routes - render the form, filters, balance and table; handle posts.
    * API routes - JSON access to the same ledger for scripts and tests.

The page mirrors a single-screen workflow: submitting the form adds a
transaction, or updates the one picked for editing; filters narrow the table
without affecting the balance; the export button downloads the whole ledger.
Notices raised by an action are shown once on the next render.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from fastapi import Body, FastAPI, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import TrackerSettings, get_settings
from ..export import LedgerExporter
from ..finance import (
    FilterSpec,
    InvalidTransactionInput,
    LedgerStore,
    TransactionDraft,
    TransactionNotFound,
    TransactionType,
    filter_transactions,
    format_amount,
    total_balance,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def _build_store(settings: TrackerSettings) -> LedgerStore:
    return LedgerStore(
        None if settings.seed_demo_transactions else [],
        categories=settings.categories,
        strict_remove=settings.strict_remove,
    )


def _redirect_home(next_query: str = "") -> RedirectResponse:
    """Send the browser back to the page, keeping the active filters."""

    target = "/" + (f"?{next_query}" if next_query else "")
    return RedirectResponse(target, status_code=303)


def create_application(
    settings: Optional[TrackerSettings] = None,
    store: Optional[LedgerStore] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    store = store if store is not None else _build_store(settings)
    exporter = LedgerExporter(filename=settings.export_filename)

    app = FastAPI(title="Financial Tracker", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")
    app.state.store = store
    app.state.settings = settings

    notices: List[Dict[str, str]] = []

    def notify(title: str, status: str) -> None:
        notices.append({"title": title, "status": status})

    def parse_filters(
        transaction_type: Optional[str],
        category: Optional[str],
        date_from: Optional[str],
        date_to: Optional[str],
    ) -> FilterSpec:
        try:
            return FilterSpec.from_query(transaction_type, category, date_from, date_to)
        except InvalidTransactionInput as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

    def money(value: Decimal) -> str:
        return format_amount(value, settings.currency_symbol)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(
        request: Request,
        transaction_type: str = Query("", alias="type"),
        category: str = Query(""),
        date_from: str = Query(""),
        date_to: str = Query(""),
    ) -> HTMLResponse:
        """Render the form, filters, balance summary and filtered table."""

        try:
            spec = FilterSpec.from_query(transaction_type, category, date_from, date_to)
        except InvalidTransactionInput as error:
            LOGGER.warning("Ignoring invalid filter: %s", error)
            notify(str(error), "error")
            spec = FilterSpec()
        snapshot = store.snapshot()
        visible = filter_transactions(snapshot, spec)
        pending = list(notices)
        notices.clear()
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "editing": store.editing,
                "categories": settings.categories,
                "transaction_types": [member.value for member in TransactionType],
                "filters": spec.as_query(),
                "next_query": urlencode(spec.as_query()) if not spec.is_empty else "",
                "balance": money(total_balance(snapshot)),
                "transactions": visible,
                "money": money,
                "notices": pending,
            },
        )

    @app.post("/transactions")
    async def submit_transaction(
        occurred_on: Optional[str] = Form(None, alias="date"),
        amount: Optional[str] = Form(None),
        transaction_type: Optional[str] = Form(None, alias="type"),
        category: Optional[str] = Form(None),
        next_query: str = Form(""),
    ) -> RedirectResponse:
        """Add a transaction, or update the one under edit."""

        form = {
            "date": occurred_on,
            "amount": amount,
            "type": transaction_type,
            "category": category,
        }
        try:
            draft = TransactionDraft.from_form(form, settings.categories)
            transaction, created = store.submit(draft)
        except InvalidTransactionInput as error:
            LOGGER.warning("Rejected submission: %s", error)
            notify(str(error), "error")
        except TransactionNotFound as error:
            LOGGER.warning("Edit target vanished: %s", error)
            store.clear_edit_cursor()
            notify(str(error), "error")
        else:
            notify("Transaction added" if created else "Transaction updated", "success")
            LOGGER.debug("Submission stored transaction %s", transaction.transaction_id)
        return _redirect_home(next_query)

    @app.post("/transactions/cancel-edit")
    async def cancel_edit(next_query: str = Form("")) -> RedirectResponse:
        """Leave edit mode without touching the ledger."""

        store.clear_edit_cursor()
        return _redirect_home(next_query)

    @app.post("/transactions/{transaction_id}/edit")
    async def edit_transaction(
        transaction_id: int, next_query: str = Form("")
    ) -> RedirectResponse:
        """Load a transaction into the form for editing."""

        try:
            store.set_edit_cursor(transaction_id)
        except TransactionNotFound as error:
            notify(str(error), "error")
        return _redirect_home(next_query)

    @app.post("/transactions/{transaction_id}/delete")
    async def delete_transaction(
        transaction_id: int, next_query: str = Form("")
    ) -> RedirectResponse:
        """Remove a transaction from the ledger."""

        try:
            store.remove(transaction_id)
        except TransactionNotFound as error:
            notify(str(error), "error")
        else:
            notify("Transaction deleted", "error")
        return _redirect_home(next_query)

    @app.get("/export")
    async def export_ledger() -> Response:
        """Download the full, unfiltered ledger."""

        return Response(
            content=exporter.export(store.snapshot()),
            media_type=exporter.media_type,
            headers={"Content-Disposition": f'attachment; filename="{exporter.filename}"'},
        )

    @app.get("/api/transactions")
    async def list_transactions(
        transaction_type: Optional[str] = Query(None, alias="type"),
        category: Optional[str] = Query(None),
        date_from: Optional[str] = Query(None),
        date_to: Optional[str] = Query(None),
    ) -> JSONResponse:
        """Return the filtered transactions and the balance of the full ledger."""

        spec = parse_filters(transaction_type, category, date_from, date_to)
        snapshot = store.snapshot()
        visible = filter_transactions(snapshot, spec)
        return JSONResponse(
            {
                "transactions": [transaction.as_dict() for transaction in visible],
                "count": len(visible),
                "balance": format_amount(total_balance(snapshot)),
            }
        )

    @app.post("/api/transactions", status_code=201)
    async def create_transaction(payload: Dict[str, Any] = Body(...)) -> JSONResponse:
        """Create a transaction from a JSON body."""

        try:
            draft = TransactionDraft.from_form(payload, settings.categories)
            transaction = store.add(draft)
        except InvalidTransactionInput as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(transaction.as_dict(), status_code=201)

    @app.patch("/api/transactions/{transaction_id}")
    async def patch_transaction(
        transaction_id: int, payload: Dict[str, Any] = Body(...)
    ) -> JSONResponse:
        """Update selected fields of a transaction."""

        try:
            transaction = store.update(transaction_id, payload)
        except TransactionNotFound as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except InvalidTransactionInput as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(transaction.as_dict())

    @app.delete("/api/transactions/{transaction_id}")
    async def remove_transaction(transaction_id: int) -> JSONResponse:
        """Delete a transaction; unknown ids are ignored unless strict mode is on."""

        try:
            removed = store.remove(transaction_id)
        except TransactionNotFound as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse({"removed": removed is not None})

    @app.get("/api/categories")
    async def list_categories() -> JSONResponse:
        return JSONResponse(
            {
                "categories": list(settings.categories),
                "types": [member.value for member in TransactionType],
            }
        )

    return app
