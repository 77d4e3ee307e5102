# receipt_processor/store/repository.py
import threading
import uuid
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from ..schemas import Receipt
from ..utils.logging import logger

@dataclass(frozen=True)
class ScoredReceipt:
    id: str
    receipt: Receipt
    points: int

class ReceiptStore(Protocol):
    def put(self, receipt: Receipt, points: int) -> str: ...
    def get(self, receipt_id: str) -> Optional[ScoredReceipt]: ...
    def __len__(self) -> int: ...
class InMemoryReceiptStore:
    """
    Process-lifetime map of id -> ScoredReceipt.
    Entries are written once and never updated or removed; every access
    goes through a single lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: Dict[str, ScoredReceipt] = {}

    def put(self, receipt: Receipt, points: int) -> str:
        receipt_id = str(uuid.uuid4())
        row = ScoredReceipt(id=receipt_id, receipt=receipt, points=points)
        with self._lock:
            self._rows[receipt_id] = row
        logger.debug("Stored receipt %s (%d points)", receipt_id, points)
        return receipt_id

    def get(self, receipt_id: str) -> Optional[ScoredReceipt]:
        with self._lock:
            return self._rows.get(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

_store = InMemoryReceiptStore()

def get_store() -> ReceiptStore:
    return _store
