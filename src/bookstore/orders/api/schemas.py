"""Pydantic request/response schemas for the order API."""

from datetime import datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from pydantic import BaseModel, Field

from bookstore.orders.shipping_address import ShippingAddress


class AddressSchema(BaseModel):
    street: str
    city: str
    state: str | None = None
    zip_code: str
    phone: str | None = None


class OrderLineSchema(BaseModel):
    """One requested line. Title and price may be sent but are ignored."""

    book_id: str
    quantity: int = Field(ge=1)
    title: str | None = None
    price: float | None = None


class PlaceOrderRequest(BaseModel):
    customer_name: str | None = None
    shipping_address: AddressSchema
    items: list[OrderLineSchema]
    total: float | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "Ada Reader",
                    "shipping_address": {
                        "street": "12 Quay Street",
                        "city": "Dublin",
                        "zip_code": "D02",
                    },
                    "items": [{"book_id": "book-001", "quantity": 2}],
                }
            ]
        }
    }


class UpdateOrderStatusRequest(BaseModel):
    status: str


class OrderItemResponse(BaseModel):
    id: str
    book_id: str
    title: str
    price: float
    quantity: int

    model_config = {"from_attributes": True}


class AddressResponse(AddressSchema):
    id: str

    model_config = {"from_attributes": True}


class OrderResponse(BaseModel):
    id: str
    user_id: str
    customer_name: str | None = None
    total: float
    status: str
    shipping_address_id: str
    shipping_address: AddressResponse | None = None
    items: list[OrderItemResponse] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def for_order(cls, order) -> "OrderResponse":
        """Render an order together with its items and shipping address."""
        try:
            address = current_domain.repository_for(ShippingAddress).get(order.shipping_address_id)
        except ObjectNotFoundError:
            address = None

        return cls(
            id=str(order.id),
            user_id=str(order.user_id),
            customer_name=order.customer_name,
            total=order.total,
            status=order.status,
            shipping_address_id=str(order.shipping_address_id),
            shipping_address=AddressResponse.model_validate(address) if address else None,
            items=[OrderItemResponse.model_validate(item) for item in order.items],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class PageMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class OrderPageResponse(BaseModel):
    data: list[OrderResponse]
    meta: PageMeta


class StatusResponse(BaseModel):
    status: str = "ok"
