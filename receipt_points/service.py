"""Receipt submission and points lookup."""
import logging
from typing import Dict, Union

import orjson
from pydantic import ValidationError

from receipt_points.errors import InvalidPayload
from receipt_points.parse.models import Receipt
from receipt_points.scoring.rules import calculate_points, score_breakdown
from receipt_points.store.receipt_store import ReceiptStore

logger = logging.getLogger(__name__)


def decode_receipt(raw_payload: Union[bytes, str]) -> Receipt:
    """Decode a JSON payload into a Receipt. Raises InvalidPayload."""
    try:
        data = orjson.loads(raw_payload)
    except orjson.JSONDecodeError as e:
        raise InvalidPayload(f"Invalid JSON payload: {e}") from e

    if not isinstance(data, dict):
        raise InvalidPayload("Receipt payload must be a JSON object")

    try:
        return Receipt.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise InvalidPayload(f"Invalid receipt: {fields}") from e


class ReceiptService:
    """Stores submitted receipts and scores them on request."""

    def __init__(self, store: ReceiptStore | None = None, strict_total: bool = False):
        self.store = store if store is not None else ReceiptStore()
        self.strict_total = strict_total

    def submit(self, raw_payload: Union[bytes, str]) -> str:
        """Decode and store a receipt, returning its id."""
        receipt = decode_receipt(raw_payload)
        receipt_id = self.store.put(receipt)
        logger.info(f"Processed receipt {receipt_id} from {receipt.retailer!r} ({len(receipt.items)} items)")
        return receipt_id

    def get_points(self, receipt_id: str) -> int:
        """Points for a stored receipt. Raises ReceiptNotFound."""
        receipt = self.store.get(receipt_id)
        return calculate_points(receipt, strict_total=self.strict_total)

    def get_breakdown(self, receipt_id: str) -> Dict[str, int]:
        """Per-rule points for a stored receipt. Raises ReceiptNotFound."""
        receipt = self.store.get(receipt_id)
        return score_breakdown(receipt, strict_total=self.strict_total)
