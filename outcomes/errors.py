"""
Error classes for outcomes.

Every error here is a usage contract violation raised at the call site:
- EmptyOutcomeSet: no outcome names declared
- InvalidOutcome: dispatch or probe with an undeclared name
- DuplicateHandler: handler supplied at construction and at dispatch
- MissingHandler: handler supplied at neither
- AlreadyResolved: a Dispatcher/Resolution dispatched twice

None of these are transient. Nothing in the core catches them; handler
exceptions raised during dispatch propagate to the dispatch caller unchanged.
"""


class OutcomeError(Exception):
    """Base exception for outcomes."""
    pass


class EmptyOutcomeSet(OutcomeError):
    """Raised when an outcome set is constructed with no names."""

    def __init__(self, message: str = "please provide at least one outcome name"):
        super().__init__(message)


class InvalidOutcome(OutcomeError):
    """
    Outcome name is not in the declared set.

    Raised by dispatch, record and probe alike. The offending name is kept
    on ``.name`` for diagnostics.
    """

    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid outcome {name!r}")


class DuplicateHandler(OutcomeError):
    """Handler supplied both at construction and at dispatch."""

    def __init__(self, message: str = "cannot provide a handler to both construction and dispatch"):
        super().__init__(message)


class MissingHandler(OutcomeError):
    """No handler supplied at construction or at dispatch."""

    def __init__(self, message: str = "handler not provided at construction or at dispatch"):
        super().__init__(message)


class AlreadyResolved(OutcomeError):
    """
    Outcome was already recorded.

    A Resolution records exactly one outcome. ``.name`` holds the outcome
    that was recorded first.
    """

    def __init__(self, name):
        self.name = name
        super().__init__(f"Already resolved with outcome {name!r}")


class ConfigError(OutcomeError):
    """Outcome catalog validation error."""
    pass
