"""Pydantic models for tool inputs and CRM payloads.

Input models reject bad arguments before any request is made. Payload models
mirror the JSON returned by Nocobase: every field is optional and unknown
fields are ignored.
"""

import logging
from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class ToolInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        return cls.model_json_schema()


class CatalogQuery(ToolInput):
    cep: str = Field(..., description="CEP (postal code) used for delivery")


class OrderItem(ToolInput):
    food_id: str = Field(..., description="ID of the food item in the catalog")
    quantity: int = Field(..., ge=1, description="Number of units to buy")


class PurchaseRequest(ToolInput):
    items: list[OrderItem] = Field(..., description="Food items to add to the order")
    total_order: float = Field(..., ge=0, description="Total value of the order")
    cep: str = Field(..., description="Delivery CEP (postal code)")


class TicketLookup(ToolInput):
    protocol: str = Field(..., description="Protocol number of the ticket")


class TicketOpenRequest(ToolInput):
    title: str = Field(..., description="Short title of the ticket")
    description: str = Field(..., description="Description of the problem")


class Record(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


RecordT = TypeVar("RecordT", bound=Record)


class CatalogItem(Record):
    id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    cep: Optional[str] = None


class SalesOrder(Record):
    id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    total_order: Optional[str] = None
    status: Optional[str] = None
    cep: Optional[str] = None


class Ticket(Record):
    protocol: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None


def text(value: Any) -> str:
    return "" if value is None else str(value)


def unwrap(payload: Any) -> Any:
    if isinstance(payload, dict):
        return payload.get("data")
    return None


def parse(model: type[RecordT], raw: Any) -> Optional[RecordT]:
    """Validate one CRM record, returning None when the backend sent something unusable."""
    if not isinstance(raw, dict):
        return None
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        logger.error(f"Unexpected {model.__name__} payload from CRM: {e.error_count()} errors")
        return None
