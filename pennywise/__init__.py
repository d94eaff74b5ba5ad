"""Mini README: Core package initializer for the Pennywise finance tracker.

Exposes the logging helper at package level. The ledger lives in
``pennywise.finance``, persistence in ``pennywise.storage`` and the web
surface in ``pennywise.interface``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
