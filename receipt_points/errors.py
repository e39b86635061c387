"""Errors raised by the receipt service."""


class ReceiptError(Exception):
    """Base class for receipt service errors."""


class InvalidPayload(ReceiptError):
    """Submitted body is not a well-formed receipt."""


class ReceiptNotFound(ReceiptError, KeyError):
    """No receipt is stored under the requested id."""

    def __init__(self, receipt_id: str):
        super().__init__(receipt_id)
        self.receipt_id = receipt_id

    def __str__(self) -> str:
        return f"Receipt not found: {self.receipt_id}"


class FieldParseFailure(ReceiptError, ValueError):
    """A numeric, date or time field could not be parsed during scoring."""

    def __init__(self, field: str, value: str, fallback: float = 0.0):
        super().__init__(f"Cannot parse {field}: {value!r}")
        self.field = field
        self.value = value
        # value the parser yields alongside the error: 0.0, or +-inf on overflow
        self.fallback = fallback
