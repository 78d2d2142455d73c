from dataclasses import dataclass

from receipt_processor.model.ReceiptModel import Receipt


@dataclass(frozen=True)
class ScoreRecord:
    id: str
    receipt: Receipt
    points: int
