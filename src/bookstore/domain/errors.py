"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class BookstoreError(Exception):
    """Base class for bookstore errors."""


class NullArgumentError(BookstoreError, ValueError):
    """Raised when a required argument is None.

    This signals a programming error in the caller, not a recoverable
    condition; the services never catch it.
    """

    def __init__(self, operation: str, argument: str) -> None:
        super().__init__(f"{operation}() requires '{argument}', got None.")
        self.operation = operation
        self.argument = argument


# ============================================================================
#                           Book related errors
# ============================================================================


class InvalidBookError(BookstoreError, ValueError):
    """Raised when a book record is constructed with an invalid field value."""

    def __init__(self, title: str, reason: str) -> None:
        super().__init__(f"Invalid book '{title}': {reason}")
        self.title = title
        self.reason = reason
