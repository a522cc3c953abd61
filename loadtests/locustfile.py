"""Bookstore load testing: Locust entry point.

Usage:
    # Web UI
    locust -f loadtests/locustfile.py --host http://localhost:8000

    # Headless (CI mode)
    locust -f loadtests/locustfile.py --host http://localhost:8000 --headless \
           -u 50 -r 5 -t 120s --csv=results/loadtest
"""

import logging
import time

from locust import events

# Import the user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.shopper import CatalogueAdminUser, ShopperUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log the API error body for every server-side failure."""
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 500:
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, extract_error_detail(response))


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')} against {environment.host}\n")


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    checkouts = environment.stats.get("POST /orders", "POST")
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Checkouts attempted: {checkouts.num_requests}\n")
