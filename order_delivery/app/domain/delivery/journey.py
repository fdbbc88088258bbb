"""
Delivery Journey Builder.

Builds the sequence of delivery snapshots for an order and validates raw
payloads into delivery states. No ordering between states is enforced:
callers may assemble a journey in any order they choose.
"""

from typing import Any, Dict, List, Tuple

from pydantic import TypeAdapter, ValidationError

from order_delivery.app.core.exceptions import InvalidDeliveryStateError
from order_delivery.app.models.delivery_enums import DeliveryStage
from order_delivery.app.models.order import Order
from order_delivery.app.schemas.delivery_state import (
    Delivered,
    Dispatched,
    OrderDeliveryState,
    ReceivedAtDepot,
)

_state_adapter = TypeAdapter(OrderDeliveryState)


def build_journey(
    order: Order,
    depot_name: str,
    truck_id: str,
    driver_name: str,
    destination: str,
    is_delivered: bool = True,
) -> List[OrderDeliveryState]:
    """Build the depot → dispatched → delivered snapshots for one order."""
    return [
        ReceivedAtDepot(depot_name=depot_name, order=order),
        Dispatched(truck_id=truck_id, driver_name=driver_name, order=order),
        Delivered(destination=destination, is_delivered=is_delivered, order=order),
    ]


def parse_state(payload: Dict[str, Any]) -> OrderDeliveryState:
    """
    Validate a raw mapping into the delivery state named by its ``kind``.

    Raises:
        InvalidDeliveryStateError: If ``kind`` is missing or unknown, or a
            field fails validation.
    """
    try:
        return _state_adapter.validate_python(payload)
    except ValidationError as exc:
        raise InvalidDeliveryStateError(
            exc.errors(include_url=False, include_context=False)
        ) from exc


def filter_by_stage(
    states: List[OrderDeliveryState], stage: DeliveryStage
) -> List[OrderDeliveryState]:
    """Keep only the states tagged with ``stage``, preserving order."""
    return [state for state in states if state.stage is stage]


def _sample(item: str, depot: str, truck: str, driver: str, destination: str) -> Tuple[OrderDeliveryState, ...]:
    return tuple(build_journey(Order(item=item), depot, truck, driver, destination))


# Journeys printed by the console driver
SAMPLE_JOURNEYS = (
    _sample("OOP in Kotlin Book", "Stockholm City", "AXV-122", "Logan", "New York City"),
    _sample("Kitchen Knife Sets", "Stockholm City", "JVY-354", "Peter Parker", "Arkansas"),
)
