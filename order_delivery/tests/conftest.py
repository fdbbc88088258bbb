"""
Centralized Test Configuration.
"""

import logging

import pytest

from order_delivery.app.core.config import Settings
from order_delivery.app.core.observability import logger as package_logger
from order_delivery.app.models.order import Order
from order_delivery.app.schemas.delivery_state import Delivered, Dispatched, ReceivedAtDepot


@pytest.fixture
def knife_order():
    return Order(item="Kitchen Knife Sets")


@pytest.fixture
def at_depot(knife_order):
    return ReceivedAtDepot(depot_name="Stockholm City", order=knife_order)


@pytest.fixture
def dispatched(knife_order):
    return Dispatched(truck_id="JVY-354", driver_name="Peter Parker", order=knife_order)


@pytest.fixture
def delivered(knife_order):
    return Delivered(destination="Arkansas", is_delivered=True, order=knife_order)


@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the driver installs so tests do not leak them."""
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
