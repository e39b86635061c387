"""In-memory receipt storage."""
import logging
import threading
import uuid
from typing import Dict

from receipt_points.errors import ReceiptNotFound
from receipt_points.parse.models import Receipt

logger = logging.getLogger(__name__)


class ReceiptStore:
    """Write-once mapping from generated id to receipt, kept for the process lifetime."""

    def __init__(self):
        self._receipts: Dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt: Receipt) -> str:
        """Store a receipt under a fresh id and return the id."""
        receipt_id = str(uuid.uuid4())
        with self._lock:
            self._receipts[receipt_id] = receipt
        logger.debug(f"Stored receipt {receipt_id}")
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        """Get a stored receipt. Raises ReceiptNotFound for unknown ids."""
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFound(receipt_id)
        return receipt

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
