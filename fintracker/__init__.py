"""Mini README: Core package initializer for the financial tracker.

This module exposes convenience imports so callers can reach logging helpers
without knowing the module layout. It stays lightweight: importing the
package does not pull in the web framework.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
