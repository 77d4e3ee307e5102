from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List

# Raw text is kept as sent; the rules do their own (lenient) parsing.
# JSON null decodes to the field's zero value.
class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field("", alias="shortDescription")
    price: str = ""

    @field_validator("short_description", "price", mode="before")
    @classmethod
    def null_text(cls, value: Any) -> Any:
        return "" if value is None else value

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str = ""
    purchase_date: str = Field("", alias="purchaseDate")
    purchase_time: str = Field("", alias="purchaseTime")
    items: List[Item] = Field(default_factory=list)
    total: str = ""

    @field_validator("retailer", "purchase_date", "purchase_time", "total", mode="before")
    @classmethod
    def null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def null_items(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [{} if item is None else item for item in value]
        return value

class IdResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
