"""Domain errors raised for invalid ledger input."""


class ValidationError(ValueError):
    """Raised when ledger input cannot be turned into an account tree.

    Attributes:
        row_index: Position of the offending row in the input, when known.
    """

    def __init__(self, message: str, row_index: int | None = None) -> None:
        super().__init__(message)
        self.row_index = row_index


__all__ = ["ValidationError"]
