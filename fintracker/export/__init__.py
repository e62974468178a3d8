"""Mini README: Export utilities for the tracker.

Exposes the JSON exporter used by the download button and the CLI.
"""

from .json_exporter import LedgerExporter

__all__ = ["LedgerExporter"]
