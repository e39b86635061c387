"""Data models for submitted receipts."""
from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Item(BaseModel):
    """A single line item on a receipt."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: StrictStr = Field(..., alias="shortDescription")
    price: StrictStr = Field(..., description="Decimal string, e.g. '6.49'")


class Receipt(BaseModel):
    """Purchase receipt as submitted by the client."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: StrictStr
    purchase_date: StrictStr = Field(..., alias="purchaseDate", description="YYYY-MM-DD")
    purchase_time: StrictStr = Field(..., alias="purchaseTime", description="HH:MM, 24-hour")
    total: StrictStr = Field(..., description="Decimal string, e.g. '35.35'")
    items: tuple[Item, ...]


class ReceiptIdResponse(BaseModel):
    """Response for a processed receipt."""
    id: str


class PointsResponse(BaseModel):
    """Response for a points query."""
    points: int
