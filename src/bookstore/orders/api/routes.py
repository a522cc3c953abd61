"""FastAPI routes for orders."""

import json
from datetime import date

from fastapi import APIRouter, Depends
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from bookstore.identity.api.dependencies import current_user, requires
from bookstore.identity.authorization import AuthContext, Capability, authorize_owner
from bookstore.orders.api.schemas import (
    OrderPageResponse,
    OrderResponse,
    PageMeta,
    PlaceOrderRequest,
    StatusResponse,
    UpdateOrderStatusRequest,
)
from bookstore.orders.deletion import DeleteOrder
from bookstore.orders.order import Order, OrderStatus
from bookstore.orders.placement import PlaceOrder
from bookstore.orders.status import UpdateOrderStatus

order_router = APIRouter(prefix="/orders", tags=["orders"])


def _orders(records) -> list[OrderResponse]:
    return [OrderResponse.for_order(order) for order in records]


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, context: AuthContext = Depends(current_user)) -> OrderResponse:
    if not body.items:
        raise ValidationError({"items": ["An order needs at least one item"]})

    address = body.shipping_address
    order_id = current_domain.process(
        PlaceOrder(
            user_id=context.user_id,
            customer_name=body.customer_name or context.name,
            items=json.dumps([{"book_id": line.book_id, "quantity": line.quantity} for line in body.items]),
            street=address.street,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            phone=address.phone,
        ),
        asynchronous=False,
    )
    return OrderResponse.for_order(current_domain.repository_for(Order).get(order_id))


@order_router.get("/my", response_model=list[OrderResponse])
async def my_orders(context: AuthContext = Depends(current_user)) -> list[OrderResponse]:
    return _orders(current_domain.repository_for(Order).for_user(context.user_id))


@order_router.get("", response_model=OrderPageResponse)
async def list_orders(
    page: int = 1,
    limit: int = 20,
    context: AuthContext = Depends(requires(Capability.MANAGE_ORDERS)),
) -> OrderPageResponse:
    result = current_domain.repository_for(Order).page(page=page, limit=limit)
    return OrderPageResponse(
        data=_orders(result.items),
        meta=PageMeta(page=result.page, limit=result.limit, total=result.total, total_pages=result.total_pages),
    )


@order_router.get("/stats", response_model=dict[str, int])
async def order_stats(context: AuthContext = Depends(requires(Capability.MANAGE_ORDERS))) -> dict[str, int]:
    return current_domain.repository_for(Order).stats()


@order_router.get("/status/{status}", response_model=list[OrderResponse])
async def orders_with_status(
    status: str,
    context: AuthContext = Depends(requires(Capability.MANAGE_ORDERS)),
) -> list[OrderResponse]:
    wanted = status.upper()
    if wanted not in {s.value for s in OrderStatus}:
        raise ValidationError({"status": [f"Unknown status {status!r}"]})
    return _orders(current_domain.repository_for(Order).with_status(wanted))


@order_router.get("/date-range", response_model=list[OrderResponse])
async def orders_between(
    start: date | None = None,
    end: date | None = None,
    context: AuthContext = Depends(requires(Capability.MANAGE_ORDERS)),
) -> list[OrderResponse]:
    if start is None or end is None:
        raise ValidationError({"date_range": ["Both start and end dates are required"]})
    if start > end:
        raise ValidationError({"date_range": ["start must not be after end"]})
    return _orders(current_domain.repository_for(Order).between(start, end))


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, context: AuthContext = Depends(current_user)) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    authorize_owner(context, order.user_id, Capability.MANAGE_ORDERS)
    return OrderResponse.for_order(order)


@order_router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    context: AuthContext = Depends(requires(Capability.MANAGE_ORDERS)),
) -> OrderResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status.upper()), asynchronous=False)
    return OrderResponse.for_order(current_domain.repository_for(Order).get(order_id))


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(
    order_id: str,
    context: AuthContext = Depends(requires(Capability.MANAGE_ORDERS)),
) -> StatusResponse:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return StatusResponse(status="deleted")
