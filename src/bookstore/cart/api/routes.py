"""FastAPI routes for the shopping cart."""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from bookstore.cart.api.schemas import (
    AddToCartRequest,
    CartBookSummary,
    CartItemResponse,
    ClearCartResponse,
    StatusResponse,
    UpdateCartItemRequest,
)
from bookstore.cart.cart_item import CartItem
from bookstore.cart.items import AddToCart, ClearCart, RemoveCartItem, UpdateCartItem
from bookstore.catalogue.book import Book
from bookstore.identity.api.dependencies import current_user, requires
from bookstore.identity.authorization import AuthContext, Capability, authorize_owner

cart_router = APIRouter(prefix="/cart", tags=["cart"])


def _cart_item(item, with_book=False) -> CartItemResponse:
    response = CartItemResponse.model_validate(item)
    if with_book:
        try:
            book = current_domain.repository_for(Book).get(item.book_id)
        except ObjectNotFoundError:
            book = None
        response.book = CartBookSummary.model_validate(book) if book else None
    return response


@cart_router.post("", status_code=201, response_model=CartItemResponse)
async def add_to_cart(body: AddToCartRequest, context: AuthContext = Depends(current_user)) -> CartItemResponse:
    item_id = current_domain.process(
        AddToCart(user_id=context.user_id, book_id=body.book_id, quantity=body.quantity),
        asynchronous=False,
    )
    return _cart_item(current_domain.repository_for(CartItem).get(item_id), with_book=True)


@cart_router.get("", response_model=list[CartItemResponse])
async def list_all_carts(
    context: AuthContext = Depends(requires(Capability.MANAGE_CARTS)),
) -> list[CartItemResponse]:
    return [_cart_item(item) for item in current_domain.repository_for(CartItem).everything()]


@cart_router.get("/my", response_model=list[CartItemResponse])
async def my_cart(context: AuthContext = Depends(current_user)) -> list[CartItemResponse]:
    rows = current_domain.repository_for(CartItem).for_user(context.user_id)
    return [_cart_item(item, with_book=True) for item in rows]


@cart_router.put("/{item_id}", response_model=CartItemResponse | StatusResponse)
async def update_cart_item(
    item_id: str,
    body: UpdateCartItemRequest,
    context: AuthContext = Depends(current_user),
):
    item = current_domain.repository_for(CartItem).get(item_id)
    authorize_owner(context, item.user_id, Capability.MANAGE_CARTS)

    result = current_domain.process(UpdateCartItem(cart_item_id=item_id, quantity=body.quantity), asynchronous=False)
    if result is None:
        return StatusResponse(status="removed")
    return _cart_item(current_domain.repository_for(CartItem).get(result), with_book=True)


@cart_router.delete("/{item_id}", response_model=StatusResponse)
async def remove_cart_item(item_id: str, context: AuthContext = Depends(current_user)) -> StatusResponse:
    item = current_domain.repository_for(CartItem).get(item_id)
    authorize_owner(context, item.user_id, Capability.MANAGE_CARTS)

    current_domain.process(RemoveCartItem(cart_item_id=item_id), asynchronous=False)
    return StatusResponse(status="removed")


@cart_router.delete("/{user_id}/clear", response_model=ClearCartResponse)
async def clear_cart(user_id: str, context: AuthContext = Depends(current_user)) -> ClearCartResponse:
    authorize_owner(context, user_id, Capability.MANAGE_CARTS)
    removed = current_domain.process(ClearCart(user_id=user_id), asynchronous=False)
    return ClearCartResponse(removed=removed or 0)
