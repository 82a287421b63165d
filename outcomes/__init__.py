"""
outcomes - Named outcome dispatch

Declare the closed set of outcomes an operation can produce, dispatch exactly
one of them, and let callers handle each outcome with per-name probes.
"""

__version__ = "0.1.0"


__all__ = [
    "Dispatcher",
    "Resolution",
    "OutcomeRecord",
    "OutcomeNameSet",
    "NOT_INVOKED",
    "OutcomeError",
    "EmptyOutcomeSet",
    "InvalidOutcome",
    "DuplicateHandler",
    "MissingHandler",
    "AlreadyResolved",
    "ConfigError",
    "OutcomeCatalog",
    "load_catalog",
]

from .errors import (
    OutcomeError,
    EmptyOutcomeSet,
    InvalidOutcome,
    DuplicateHandler,
    MissingHandler,
    AlreadyResolved,
    ConfigError,
)
from .names import OutcomeNameSet
from .resolution import NOT_INVOKED, OutcomeRecord, Resolution
from .dispatcher import Dispatcher
from .config import OutcomeCatalog, load_catalog
