"""FastAPI routes for sessions and user accounts."""

import structlog
from fastapi import APIRouter, Depends, Response
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from bookstore.identity.administration import RemoveUser, UpdateUser
from bookstore.identity.api.dependencies import current_user, requires
from bookstore.identity.api.schemas import (
    LoginRequest,
    PageMeta,
    RegisterRequest,
    StatusResponse,
    UpdateProfileRequest,
    UpdateUserRequest,
    UserCommentResponse,
    UserPageResponse,
    UserResponse,
)
from bookstore.identity.authentication import authenticate
from bookstore.identity.authorization import AuthContext, Capability
from bookstore.identity.profile import UpdateProfile
from bookstore.identity.registration import RegisterUser
from bookstore.identity.session import COOKIE_NAME, LOGIN_TTL, REGISTRATION_TTL, cookie_settings, issue_token
from bookstore.identity.user import Role, User
from bookstore.orders.api.schemas import OrderResponse
from bookstore.orders.order import Order
from bookstore.reviews.comment import Comment

logger = structlog.get_logger(__name__)


def _start_session(response: Response, user_id, ttl) -> None:
    response.set_cookie(value=issue_token(user_id, ttl), **cookie_settings(ttl))


# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", status_code=201, response_model=UserResponse)
async def register(body: RegisterRequest, response: Response) -> UserResponse:
    user_id = current_domain.process(
        RegisterUser(
            name=body.name,
            email=body.email,
            password=body.password,
            phone=body.phone,
            location=body.location,
        ),
        asynchronous=False,
    )
    _start_session(response, user_id, REGISTRATION_TTL)
    logger.info("User registered", user_id=user_id)
    return UserResponse.model_validate(current_domain.repository_for(User).get(user_id))


@auth_router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest, response: Response) -> UserResponse:
    user = authenticate(body.email, body.password)
    _start_session(response, user.id, LOGIN_TTL)
    logger.info("User logged in", user_id=str(user.id))
    return UserResponse.model_validate(user)


@auth_router.post("/logout", response_model=StatusResponse)
async def logout(response: Response) -> StatusResponse:
    response.delete_cookie(COOKIE_NAME)
    return StatusResponse(status="logged_out")


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])

_admin = requires(Capability.MANAGE_USERS)


@user_router.get("/me", response_model=UserResponse)
async def get_me(context: AuthContext = Depends(current_user)) -> UserResponse:
    return UserResponse.model_validate(current_domain.repository_for(User).get(context.user_id))


@user_router.put("/me", response_model=UserResponse)
async def update_me(body: UpdateProfileRequest, context: AuthContext = Depends(current_user)) -> UserResponse:
    current_domain.process(
        UpdateProfile(user_id=context.user_id, name=body.name, phone=body.phone, location=body.location),
        asynchronous=False,
    )
    return UserResponse.model_validate(current_domain.repository_for(User).get(context.user_id))


@user_router.get("", response_model=UserPageResponse)
async def list_users(page: int = 1, limit: int = 20, context: AuthContext = Depends(_admin)) -> UserPageResponse:
    result = current_domain.repository_for(User).page(page=page, limit=limit)
    return UserPageResponse(
        data=[UserResponse.model_validate(user) for user in result.items],
        meta=PageMeta(page=result.page, limit=result.limit, total=result.total, total_pages=result.total_pages),
    )


@user_router.get("/search", response_model=list[UserResponse])
async def search_users(q: str | None = None, context: AuthContext = Depends(_admin)) -> list[UserResponse]:
    if not q or not q.strip():
        raise ValidationError({"q": ["Search term is required"]})
    return [UserResponse.model_validate(user) for user in current_domain.repository_for(User).search(q.strip())]


@user_router.get("/role/{role}", response_model=list[UserResponse])
async def users_with_role(role: str, context: AuthContext = Depends(_admin)) -> list[UserResponse]:
    wanted = role.upper()
    if wanted not in {r.value for r in Role}:
        raise ValidationError({"role": [f"Unknown role {role!r}"]})
    return [UserResponse.model_validate(user) for user in current_domain.repository_for(User).with_role(wanted)]


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, context: AuthContext = Depends(_admin)) -> UserResponse:
    return UserResponse.model_validate(current_domain.repository_for(User).get(user_id))


@user_router.get("/{user_id}/orders", response_model=list[OrderResponse])
async def orders_of_user(user_id: str, context: AuthContext = Depends(_admin)) -> list[OrderResponse]:
    current_domain.repository_for(User).get(user_id)
    return [OrderResponse.for_order(order) for order in current_domain.repository_for(Order).for_user(user_id)]


@user_router.get("/{user_id}/comments", response_model=list[UserCommentResponse])
async def comments_of_user(user_id: str, context: AuthContext = Depends(_admin)) -> list[UserCommentResponse]:
    current_domain.repository_for(User).get(user_id)
    comments = current_domain.repository_for(Comment).for_user(user_id)
    return [UserCommentResponse.model_validate(comment) for comment in comments]


@user_router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, body: UpdateUserRequest, context: AuthContext = Depends(_admin)) -> UserResponse:
    current_domain.process(
        UpdateUser(
            user_id=user_id,
            name=body.name,
            email=body.email,
            phone=body.phone,
            location=body.location,
            role=body.role.upper() if body.role else None,
        ),
        asynchronous=False,
    )
    return UserResponse.model_validate(current_domain.repository_for(User).get(user_id))


@user_router.delete("/{user_id}", response_model=StatusResponse)
async def delete_user(user_id: str, context: AuthContext = Depends(_admin)) -> StatusResponse:
    current_domain.process(RemoveUser(user_id=user_id), asynchronous=False)
    return StatusResponse(status="deleted")
