"""
Order delivery state schemas.

Defines the closed set of delivery states. Every state carries the Order it
describes plus its own fields, and is tagged by ``kind`` so raw payloads can
be validated into the matching form.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Literal, Union, final

from order_delivery.app.models.delivery_enums import DeliveryStage
from order_delivery.app.models.order import Order


class DeliveryStateBase(BaseModel):
    """Fields shared by every delivery state."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: str
    order: Order

    @property
    def stage(self) -> DeliveryStage:
        return DeliveryStage(self.kind)


@final
class ReceivedAtDepot(DeliveryStateBase):
    """The order is sitting at a depot."""
    kind: Literal["ReceivedAtDepot"] = "ReceivedAtDepot"
    depot_name: str = Field(..., description="Depot holding the order")


@final
class Dispatched(DeliveryStateBase):
    """The order is on a truck."""
    kind: Literal["Dispatched"] = "Dispatched"
    truck_id: str = Field(..., description="Truck registration")
    driver_name: str = Field(..., description="Driver in charge")


@final
class Delivered(DeliveryStateBase):
    """The order reached its destination."""
    kind: Literal["Delivered"] = "Delivered"
    destination: str = Field(..., description="Delivery destination")
    is_delivered: bool = Field(..., description="Handed over to the customer")


OrderDeliveryState = Annotated[
    Union[ReceivedAtDepot, Dispatched, Delivered],
    Field(discriminator="kind"),
]

# Keep in step with OrderDeliveryState.
DELIVERY_STATE_TYPES = (ReceivedAtDepot, Dispatched, Delivered)
