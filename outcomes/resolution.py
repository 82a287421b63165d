"""
Resolution - records the single outcome of one dispatch and answers probes.

The producer side calls ``record(name, *args)`` exactly once; the handler
passed at construction is then invoked synchronously with the Resolution.
Inside the handler the consumer calls ``probe(name, fn)`` for each outcome it
cares about. Only the probe matching the recorded outcome runs its ``fn``.

    def handle(result):
        result.probe("success", lambda body: print(body))
        result.probe("failure", lambda err: log(err))

A Resolution is not thread-safe. Concurrent record/probe on one instance
must be synchronized by the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Hashable

from outcomes.errors import AlreadyResolved
from outcomes.names import OutcomeNameSet

logger = logging.getLogger(__name__)


class _NotInvoked:
    """Returned by ``probe`` when its handler did not run."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_INVOKED"


NOT_INVOKED = _NotInvoked()


@dataclass(frozen=True)
class OutcomeRecord:
    """
    An outcome that occurred.

    Attributes:
        name: Declared outcome name
        args: Positional arguments passed at dispatch, in order
    """
    name: Hashable
    args: tuple = ()


ResolutionHandler = Callable[["Resolution"], Any]


class Resolution:
    """Holds the declared names, the handler, and at most one OutcomeRecord."""

    def __init__(self, names: OutcomeNameSet, handler: ResolutionHandler):
        self._names = names
        self._handler = handler
        self._outcome: OutcomeRecord | None = None

    @property
    def name_set(self) -> OutcomeNameSet:
        return self._names

    @property
    def names(self) -> list:
        """Declared outcome names, in declaration order."""
        return self._names.to_list()

    @property
    def handler(self) -> ResolutionHandler:
        return self._handler

    @property
    def outcome(self) -> OutcomeRecord | None:
        """The recorded outcome, or None before ``record`` is called."""
        return self._outcome

    @property
    def resolved(self) -> bool:
        return self._outcome is not None

    def record(self, name: Hashable, *args: Any) -> Any:
        """
        Record ``name`` with ``args`` and invoke the handler.

        Returns:
            Whatever the handler returns

        Raises:
            InvalidOutcome: If name is not declared
            AlreadyResolved: If an outcome was already recorded
            Exception: Anything the handler raises, unchanged
        """
        self._names.validate(name)
        if self._outcome is not None:
            raise AlreadyResolved(self._outcome.name)

        self._outcome = OutcomeRecord(name, tuple(args))
        logger.debug(f"Recorded outcome {name!r} with {len(args)} arg(s)", extra={"outcome": name})

        return self._handler(self)

    def probe(self, name: Hashable, handler: Callable[..., Any]) -> Any:
        """
        Run ``handler`` with the recorded args if ``name`` is the outcome.

        The name is validated even before anything is recorded.

        Returns:
            The handler's result, or NOT_INVOKED if it did not run
        """
        self._names.validate(name)
        if self._outcome is None or self._outcome.name != name:
            return NOT_INVOKED

        logger.debug(f"Probe matched outcome {name!r}")
        return handler(*self._outcome.args)

    # result.on("success", ...)
    on = probe

    def __repr__(self) -> str:
        state = self._outcome.name if self._outcome is not None else None
        return f"Resolution(names={self.names!r}, outcome={state!r})"
