"""
Dispatcher - declares outcome names and dispatches exactly one of them.

Typical producer:

    def tweet(message, handler):
        outcome = Dispatcher("success", "failure", handler=handler)
        try:
            client.post(message)
        except ClientError as e:
            return outcome.dispatch("failure", str(e))
        return outcome.dispatch("success")

Typical consumer:

    tweet("hello", lambda r: (
        r.probe("success", lambda: print("sent")),
        r.probe("failure", lambda msg: print("failed:", msg)),
    ))

The handler may be given at construction or at dispatch, never both. A
Dispatcher owns at most one Resolution and dispatches once; a second
dispatch raises AlreadyResolved. Dispatch is synchronous: the handler runs
on the caller's stack and its exceptions propagate unchanged.

Not thread-safe. Callers sharing a Dispatcher across threads must lock.
"""

import logging
from enum import Enum
from typing import Any, Hashable

from outcomes.errors import AlreadyResolved, DuplicateHandler, MissingHandler
from outcomes.names import OutcomeNameSet
from outcomes.resolution import Resolution, ResolutionHandler

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Producer-side entry point.

    Args:
        *names: Declared outcome names. A single OutcomeNameSet or Enum class
            may be passed instead, in which case it is shared as-is.
        handler: Optional resolution handler; creates the Resolution eagerly
        resolution_cls: Resolution type to instantiate

    Raises:
        EmptyOutcomeSet: If no names are given
    """

    def __init__(
        self,
        *names: Hashable,
        handler: ResolutionHandler | None = None,
        resolution_cls: type[Resolution] = Resolution,
    ):
        if len(names) == 1 and _is_name_collection(names[0]):
            self._names = OutcomeNameSet.coerce(names[0])
        else:
            self._names = OutcomeNameSet(*names)
        self._resolution_cls = resolution_cls
        self._resolution: Resolution | None = None
        if handler is not None:
            self._resolution = resolution_cls(self._names, handler)

    @classmethod
    def from_catalog(cls, catalog, set_name: str, handler: ResolutionHandler | None = None) -> "Dispatcher":
        """Build a Dispatcher for a named set of an OutcomeCatalog."""
        return cls(catalog.get(set_name), handler=handler)

    @property
    def outcome_names(self) -> list:
        """Declared outcome names, in declaration order."""
        return self._names.to_list()

    @property
    def name_set(self) -> OutcomeNameSet:
        return self._names

    @property
    def resolution(self) -> Resolution | None:
        return self._resolution

    @property
    def active_handler(self) -> ResolutionHandler | None:
        """The associated handler, or None. Never creates a Resolution."""
        if self._resolution is None:
            return None
        return self._resolution.handler

    def dispatch(self, name: Hashable, *args: Any, handler: ResolutionHandler | None = None) -> Any:
        """
        Dispatch outcome ``name`` with ``args``.

        Returns:
            Whatever the resolution handler returns

        Raises:
            InvalidOutcome: If name is not declared (no handler runs)
            AlreadyResolved: If this Dispatcher already dispatched
            DuplicateHandler: If a handler was also given at construction
            MissingHandler: If no handler is available
        """
        self._names.validate(name)

        resolution = self._resolution
        if resolution is not None and resolution.resolved:
            raise AlreadyResolved(resolution.outcome.name)

        if handler is not None:
            if resolution is not None:
                raise DuplicateHandler()
            resolution = self._resolution_cls(self._names, handler)
            self._resolution = resolution
        elif resolution is None:
            raise MissingHandler()

        logger.debug(f"Dispatching outcome {name!r}")
        return resolution.record(name, *args)

    __call__ = dispatch

    def __repr__(self) -> str:
        return f"Dispatcher(names={self.outcome_names!r}, resolution={self._resolution!r})"


def _is_name_collection(value: Any) -> bool:
    if isinstance(value, OutcomeNameSet):
        return True
    return isinstance(value, type) and issubclass(value, Enum)
