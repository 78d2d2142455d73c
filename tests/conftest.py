"""Shared fixtures for receipt processor tests."""

import itertools

import pytest

from receipt_processor.model.ReceiptItemModel import ReceiptItem
from receipt_processor.model.ReceiptModel import Receipt


@pytest.fixture
def target_receipt():
    """Five item Target receipt from the service README."""
    return Receipt(
        retailer="Target",
        purchase_date="2022-01-01",
        purchase_time="13:01",
        total="35.35",
        items=(
            ReceiptItem(description="Mountain Dew 12PK", price="6.49"),
            ReceiptItem(description="Emils Cheese Pizza", price="12.25"),
            ReceiptItem(description="Knorr Creamy Chicken", price="1.26"),
            ReceiptItem(description="Doritos Nacho Cheese", price="3.35"),
            ReceiptItem(description="   Klarbrunn 12-PK 12 FL OZ  ", price="12.00"),
        ),
    )


@pytest.fixture
def corner_market_receipt():
    """Four Gatorades bought in the afternoon for a round total."""
    return Receipt(
        retailer="M&M Corner Market",
        purchase_date="2022-03-20",
        purchase_time="14:33",
        total="9.00",
        items=tuple(ReceiptItem(description="Gatorade", price="2.25") for _ in range(4)),
    )


@pytest.fixture
def target_payload():
    """JSON form of target_receipt as posted by clients."""
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
        "total": "35.35",
    }


@pytest.fixture
def sequential_ids():
    """Deterministic identifier factory: receipt-1, receipt-2, ..."""
    counter = itertools.count(1)
    return lambda: f"receipt-{next(counter)}"
