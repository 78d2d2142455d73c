from dataclasses import dataclass


@dataclass(frozen=True)
class ReceiptItem:
    description: str
    price: str
