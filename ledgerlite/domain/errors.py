"""Exception taxonomy for journal loading and amount arithmetic."""


class LedgerError(Exception):
    """Base class for every error raised by ledgerlite."""


class JournalParseError(LedgerError):
    """A journal could not be loaded.

    Attributes:
        line_number: 1-based line where the offending construct starts.
        message: Human readable reason without the line prefix.
    """

    def __init__(self, line_number: int, message: str) -> None:
        self.line_number = line_number
        self.message = message
        super().__init__(f"line {line_number}: {message}")


class AmountParseError(LedgerError, ValueError):
    """An amount literal is malformed."""


class ElisionError(LedgerError):
    """The elided posting amount cannot be inferred."""


class UnbalancedTransactionError(LedgerError):
    """A transaction's posting weights do not sum to zero."""


class BalanceAssertionError(LedgerError):
    """A balance assertion does not hold after its transaction."""


class CommodityMismatchError(LedgerError):
    """Arithmetic was attempted between amounts of different commodities."""

    def __init__(self, operation: str, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"cannot {operation} different commodities: {left} and {right}"
        )


class JournalSourceError(LedgerError):
    """The journal source could not be read."""

    def __init__(self, path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot read journal file {path}: {cause}")


__all__ = [
    "LedgerError",
    "JournalParseError",
    "AmountParseError",
    "ElisionError",
    "UnbalancedTransactionError",
    "BalanceAssertionError",
    "CommodityMismatchError",
    "JournalSourceError",
]
