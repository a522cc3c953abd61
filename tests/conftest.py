import os
from pathlib import Path

import pytest


# Element names registered with the domain when `init()` returns, before any test module is imported
REGISTERED_AT_INIT = pytest.StashKey[set]()


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Initialize the bookstore domain and push its context. The activated domain can then be referred to elsewhere as `current_domain`
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("SECRET_KEY", "test-secret-key")

    from bookstore.domain import bookstore

    bookstore.init()
    bookstore.domain_context().push()

    registry = bookstore.registry
    session.config.stash[REGISTERED_AT_INIT] = {
        record.name
        for elements in (registry.aggregates, registry.commands, registry.command_handlers, registry.repositories)
        for record in elements.values()
    }


@pytest.fixture()
def registered_at_init(request):
    return request.config.stash[REGISTERED_AT_INIT]


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session", autouse=True)
def setup_db(request):
    from bookstore.domain import bookstore
    from bookstore.utils.db import drop_db, setup_db

    setup_db(bookstore)

    yield

    drop_db(bookstore)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    from bookstore.utils.db import reset_data

    reset_data(current_domain)


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def create_book():
    """Create a book through the command path and return its id."""
    from protean import current_domain

    from bookstore.catalogue.creation import CreateBook

    def _create(**overrides):
        defaults = {"title": "Dune", "author": "Frank Herbert", "price": 10.0, "stock": 5}
        defaults.update(overrides)
        return current_domain.process(CreateBook(**defaults), asynchronous=False)

    return _create


@pytest.fixture()
def register_user():
    """Register an account and return its id. `admin=True` promotes it."""
    from protean import current_domain

    from bookstore.identity.administration import UpdateUser
    from bookstore.identity.registration import RegisterUser
    from bookstore.identity.user import Role

    def _register(admin=False, **overrides):
        defaults = {"name": "Ada Reader", "email": "ada@example.com", "password": "s3cret-pass"}
        defaults.update(overrides)
        user_id = current_domain.process(RegisterUser(**defaults), asynchronous=False)
        if admin:
            current_domain.process(UpdateUser(user_id=user_id, role=Role.ADMIN.value), asynchronous=False)
        return user_id

    return _register


@pytest.fixture()
def address():
    return {"street": "12 Quay Street", "city": "Dublin", "state": "Leinster", "zip_code": "D02", "phone": "555-0100"}


@pytest.fixture()
def app():
    """A fresh FastAPI app carrying every bookstore router, mounted without the /api prefix."""
    from fastapi import FastAPI, Request

    from bookstore.api import register_error_handlers
    from bookstore.cart.api import cart_router
    from bookstore.catalogue.api import book_router
    from bookstore.domain import bookstore
    from bookstore.identity.api import auth_router, user_router
    from bookstore.orders.api import order_router
    from bookstore.reviews.api import comment_router

    app = FastAPI()
    register_error_handlers(app)

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with bookstore.domain_context():
            return await call_next(request)

    for router in (auth_router, user_router, book_router, cart_router, order_router, comment_router):
        app.include_router(router)
    return app


@pytest.fixture()
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def login():
    """Log `client` in; its cookie jar then carries the session token."""

    def _login(client, email="ada@example.com", password="s3cret-pass"):
        response = client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()

    return _login
