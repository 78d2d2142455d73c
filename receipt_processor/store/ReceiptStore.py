import logging
import uuid
from typing import Callable, Dict, Optional, Tuple

from receipt_processor.model.ReceiptModel import Receipt
from receipt_processor.model.ScoreRecordModel import ScoreRecord
from receipt_processor.points.calculator import calculate_points
from receipt_processor.store.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class DuplicateIdentifierError(RuntimeError):
    pass


class ReceiptStore:
    """
    In-memory store of scored receipts, safe to share between threads.

    Each identifier maps to one ScoreRecord holding both the receipt and its
    points, so a reader sees either the whole record or nothing. Records are
    never updated or removed.
    """

    def __init__(self, id_factory: Callable[[], str] = new_receipt_id,
                 calculator: Callable[[Receipt], int] = calculate_points):
        self._id_factory = id_factory
        self._calculator = calculator
        self._records: Dict[str, ScoreRecord] = {}
        self._lock = ReadWriteLock()

    def submit(self, receipt: Receipt) -> str:
        # Scoring is CPU only, keep it out of the critical section
        points = self._calculator(receipt)

        with self._lock.write_locked():
            receipt_id = self._id_factory()
            if receipt_id in self._records:
                raise DuplicateIdentifierError(f"Identifier already issued - {receipt_id}")
            self._records[receipt_id] = ScoreRecord(id=receipt_id, receipt=receipt, points=points)

        logger.info("Stored receipt %s from %r worth %d points", receipt_id, receipt.retailer, points)
        return receipt_id

    def lookup(self, receipt_id: str) -> Tuple[Optional[int], bool]:
        record = self.get(receipt_id)
        if record is None:
            logger.debug("No receipt stored for id %r", receipt_id)
            return None, False
        return record.points, True

    def get(self, receipt_id: str) -> Optional[ScoreRecord]:
        with self._lock.read_locked():
            return self._records.get(receipt_id)

    def __contains__(self, receipt_id) -> bool:
        return self.get(receipt_id) is not None

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._records)
