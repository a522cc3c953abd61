"""Faker-based payload generators for the bookstore load tests.

Payloads pass the API's pydantic schemas and the domain's own rules
(well-formed, unique emails; positive prices; whole-number stock).
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["Fiction", "Science Fiction", "Classics", "History", "Poetry", "Children"]


def valid_email() -> str:
    """Unique address with a dotted domain and no consecutive dots."""
    local = fake.user_name()[:20].strip(".")
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}"


def registration_data(password: str) -> dict:
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "password": password,
        "phone": fake.phone_number()[:30],
        "location": fake.city()[:255],
    }


def book_data(stock: int | None = None) -> dict:
    price = round(random.uniform(4.0, 40.0), 2)
    return {
        "title": fake.sentence(nb_words=4).rstrip(".")[:255],
        "author": fake.name()[:255],
        "price": price,
        "original_price": round(price * 1.2, 2),
        "category": random.choice(CATEGORIES),
        "language": "English",
        "stock": stock if stock is not None else random.randint(5, 50),
        "description": fake.paragraph(),
        "featured": random.random() < 0.2,
        "is_new": random.random() < 0.3,
    }


def shipping_address() -> dict:
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state()[:100],
        "zip_code": fake.postcode()[:20],
        "phone": fake.phone_number()[:30],
    }


def order_data(book_ids: list[str], max_lines: int = 3) -> dict:
    picks = random.sample(book_ids, k=min(len(book_ids), random.randint(1, max_lines)))
    return {
        "shipping_address": shipping_address(),
        "items": [{"book_id": book_id, "quantity": random.randint(1, 3)} for book_id in picks],
    }


def comment_data(book_id: str) -> dict:
    return {"book_id": book_id, "rating": random.randint(1, 5), "text": fake.sentence(nb_words=12)}
