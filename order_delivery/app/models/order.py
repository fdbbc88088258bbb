"""
Order model.
"""

from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    """A shipped good. Delivery states reference it but never change it."""

    model_config = ConfigDict(frozen=True)

    item: str = Field(..., description="Item name")
