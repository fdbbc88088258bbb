"""
Delivery stage enumeration.
"""

import enum

from order_delivery.app.core.exceptions import InvalidStageNameError


class DeliveryStage(str, enum.Enum):
    """
    Delivery stage enumeration.

    Each member tags one form of OrderDeliveryState. Values match the
    state class names so raw payloads read naturally.

    Illustrative order (not enforced):
        RECEIVED_AT_DEPOT → DISPATCHED → DELIVERED
    """
    RECEIVED_AT_DEPOT = "ReceivedAtDepot"  # Sitting at a depot
    DISPATCHED = "Dispatched"  # Loaded on a truck with a driver
    DELIVERED = "Delivered"  # Reached its destination

    @property
    def ordinal(self) -> int:
        """Zero-based declaration position."""
        return list(type(self)).index(self)

    @classmethod
    def from_name(cls, name: str) -> "DeliveryStage":
        """
        Look up a member by its name or value.

        Raises:
            InvalidStageNameError: If no member matches exactly.
        """
        for member in cls:
            if name == member.name or name == member.value:
                return member
        raise InvalidStageNameError(name, valid=[member.name for member in cls])
