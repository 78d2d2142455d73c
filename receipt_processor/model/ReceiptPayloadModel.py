from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from receipt_processor.model.ReceiptItemModel import ReceiptItem
from receipt_processor.model.ReceiptModel import Receipt

# Plain non-negative decimal, no sign or exponent
AMOUNT_PATTERN = r'^[0-9]+(\.[0-9]+)?$'
MAX_AMOUNT_LENGTH = 32


class ItemPayload(BaseModel):
    """One line of a posted receipt, as clients send it."""
    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str = Field(pattern=AMOUNT_PATTERN, max_length=MAX_AMOUNT_LENGTH)

    def to_item(self) -> ReceiptItem:
        return ReceiptItem(description=self.short_description, price=self.price)


class ReceiptPayload(BaseModel):
    """
    Request body for POST /receipts/process.

    Field names follow the public API (camelCase aliases). Everything the
    scoring rules parse is checked here, so a validated payload always
    converts to a well formed Receipt.
    """
    model_config = ConfigDict(populate_by_name=True)

    retailer: str = Field(min_length=1)
    purchase_date: str = Field(alias="purchaseDate", pattern=r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')
    purchase_time: str = Field(alias="purchaseTime", pattern=r'^[0-9]{2}:[0-9]{2}$')
    total: str = Field(pattern=AMOUNT_PATTERN, max_length=MAX_AMOUNT_LENGTH)
    items: List[ItemPayload]

    @field_validator('retailer')
    @classmethod
    def retailer_not_blank(cls, v):
        if not v.strip():
            raise ValueError("retailer must not be blank")
        return v

    @field_validator('purchase_date')
    @classmethod
    def real_calendar_date(cls, v):
        try:
            datetime.strptime(v, "%Y-%m-%d")
        except ValueError:
            raise ValueError(f"{v} is not a calendar date") from None
        return v

    @field_validator('purchase_time')
    @classmethod
    def real_24_hour_time(cls, v):
        try:
            datetime.strptime(v, "%H:%M")
        except ValueError:
            raise ValueError(f"{v} is not a 24-hour time") from None
        return v

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            total=self.total,
            items=tuple(item.to_item() for item in self.items)
        )
