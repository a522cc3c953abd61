"""Bookstore load test journeys.

ShopperUser registers, browses, fills a cart and checks out. Many shoppers
compete for the same small stock, so rejected checkouts (400, insufficient
stock) are an expected outcome and are not counted as failures.

CatalogueAdminUser logs in with a seeded administrator account
(see `python src/manage.py seed-admin`) and keeps restocking the shelves.
"""

import os
import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import book_data, comment_data, order_data, registration_data
from loadtests.helpers.response import extract_error_detail

PASSWORD = "load-test-pass"
ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "admin-pass")


class ShopperJourney(SequentialTaskSet):
    """Register -> browse -> add to cart -> checkout -> comment -> clear cart."""

    def on_start(self):
        self.user_id = None
        self.book_ids = []
        self.order_id = None

    @task
    def register(self):
        with self.client.post(
            "/api/auth/register", json=registration_data(PASSWORD), catch_response=True, name="POST /auth/register"
        ) as resp:
            if resp.status_code == 201:
                self.user_id = resp.json()["id"]
            else:
                resp.failure(f"Register failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def browse(self):
        with self.client.get(
            "/api/books/browse", params={"limit": 20}, catch_response=True, name="GET /books/browse"
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Browse failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.book_ids = [book["id"] for book in resp.json()["data"] if book["stock"] > 0]
            if not self.book_ids:
                self.interrupt()

    @task
    def add_to_cart(self):
        with self.client.post(
            "/api/cart",
            json={"book_id": random.choice(self.book_ids), "quantity": 1},
            catch_response=True,
            name="POST /cart",
        ) as resp:
            if resp.status_code in (201, 400):
                resp.success()
            else:
                resp.failure(f"Add to cart failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def checkout(self):
        with self.client.post(
            "/api/orders", json=order_data(self.book_ids), catch_response=True, name="POST /orders"
        ) as resp:
            if resp.status_code == 201:
                self.order_id = resp.json()["id"]
            elif resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def comment(self):
        with self.client.post(
            "/api/comments",
            json=comment_data(random.choice(self.book_ids)),
            catch_response=True,
            name="POST /comments",
        ) as resp:
            if resp.status_code in (201, 404):
                resp.success()
            else:
                resp.failure(f"Comment failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def clear_cart(self):
        self.client.delete(f"/api/cart/{self.user_id}/clear", name="DELETE /cart/{user_id}/clear")
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(0.5, 2)
    tasks = [ShopperJourney]


class CatalogueAdminUser(HttpUser):
    """Adds low-stock titles so shoppers keep colliding on the same books."""

    wait_time = between(2, 5)
    fixed_count = 1

    def on_start(self):
        resp = self.client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        if resp.status_code != 200:
            raise RuntimeError(f"Admin login failed: {resp.status_code} {extract_error_detail(resp)}")

    @task(3)
    def add_book(self):
        with self.client.post("/api/books", json=book_data(stock=3), catch_response=True, name="POST /books") as resp:
            if resp.status_code != 201:
                resp.failure(f"Create book failed: {resp.status_code} {extract_error_detail(resp)}")

    @task(1)
    def order_stats(self):
        self.client.get("/api/orders/stats", name="GET /orders/stats")
