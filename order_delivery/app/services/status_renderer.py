"""
Status rendering service.

Turns delivery states into the human-readable status lines shown to users.
Formatting is pure; printing lives in thin wrappers so callers and tests can
use the text directly.
"""

import logging
import sys
from typing import Any, Iterable, List, Optional, TextIO, assert_never

from order_delivery.app.core.config import settings
from order_delivery.app.core.exceptions import UnknownDeliveryStateError
from order_delivery.app.schemas.delivery_state import (
    DELIVERY_STATE_TYPES,
    Delivered,
    Dispatched,
    OrderDeliveryState,
    ReceivedAtDepot,
)

logger = logging.getLogger("order_delivery.status")


def format_flag(value: bool) -> str:
    """Render a boolean as ``true`` / ``false``."""
    return "true" if value else "false"


def render_status(state: OrderDeliveryState) -> str:
    """
    Render one delivery state as a status line.

    Every form must have a branch here; a type checker flags a missing one
    at the ``assert_never`` call. Subclasses of a form are not delivery states.

    Raises:
        UnknownDeliveryStateError: If ``state`` is not a delivery state.
    """
    if type(state) not in DELIVERY_STATE_TYPES:
        raise UnknownDeliveryStateError(state)

    if isinstance(state, ReceivedAtDepot):
        return f"{state.order.item} is received at {state.depot_name} depot."
    if isinstance(state, Dispatched):
        return (
            f"{state.order.item} is dispatched, "
            f"Truck ID is {state.truck_id} and driver is {state.driver_name}"
        )
    if isinstance(state, Delivered):
        return (
            f"{state.order.item} delivered at {state.destination}.\n"
            f"Delivery to customer = {format_flag(state.is_delivered)}.\n"
        )
    assert_never(state)


def render_status_or_default(state: Any, fallback: Optional[str] = None) -> str:
    """Render a status line, or ``fallback`` for anything that is not a delivery state."""
    if type(state) in DELIVERY_STATE_TYPES:
        return render_status(state)
    return settings.unknown_state_text if fallback is None else fallback


def render_journey(states: Iterable[OrderDeliveryState]) -> List[str]:
    """Render every state of a journey, keeping its order."""
    return [render_status(state) for state in states]


def print_status(state: OrderDeliveryState, stream: TextIO = None) -> None:
    """Write the status line for ``state`` to ``stream`` (stdout by default)."""
    stream = stream or sys.stdout
    print(render_status(state), file=stream)
    logger.debug("Status Printed", extra={"stage": state.stage.value, "item": state.order.item})


def print_journey(states: Iterable[OrderDeliveryState], stream: TextIO = None) -> None:
    """Print each state of a journey in order."""
    for state in states:
        print_status(state, stream=stream)
