"""Errors raised by bags and by the code that constructs them."""


class BagError(Exception):
    """Base class for all bag related errors."""

    def __init__(self, message: str = "Bag error") -> None:
        super().__init__(message)


class InvalidCapacityError(BagError, ValueError):
    """A bag was requested with a maximum size outside `[1, MAX_SIZE]`."""


class CapacityExceededError(BagError):
    """Adding a new distinct value would take a bag past its maximum size.

    Any occurrences added before the failing one are kept, so the bag is still valid but full.
    """


class UnknownImplementationError(BagError, ValueError):
    """The requested bag class is not one of the supported implementations."""
