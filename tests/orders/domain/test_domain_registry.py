"""Every aggregate, command and handler is discovered by `bookstore.init()`."""

import pytest

ORDER_ELEMENTS = [
    "Order",
    "OrderRepository",
    "ShippingAddress",
    "ShippingAddressRepository",
    "PlaceOrder",
    "PlaceOrderHandler",
    "UpdateOrderStatus",
    "UpdateOrderStatusHandler",
    "DeleteOrder",
    "DeleteOrderHandler",
]

CART_ELEMENTS = [
    "CartItem",
    "CartItemRepository",
    "AddToCart",
    "UpdateCartItem",
    "RemoveCartItem",
    "ClearCart",
    "CartHandler",
]

OTHER_ELEMENTS = ["Book", "CreateBook", "RemoveBook", "User", "RegisterUser", "Comment", "PostComment"]


@pytest.mark.parametrize("name", ORDER_ELEMENTS + CART_ELEMENTS + OTHER_ELEMENTS)
def test_element_registered_at_init(registered_at_init, name):
    assert name in registered_at_init
