"""
Domain models and value objects.

Contains fundamental domain entities like Item, DrivableItem, Price, TraderState.
"""

from src.core.domain.item import DrivableItem, Item
from src.core.domain.price import Price
from src.core.domain.trader_state import ItemRecord, TraderState

__all__ = [
    # Item models
    "Item",
    "DrivableItem",
    # Price result
    "Price",
    # Snapshot models
    "ItemRecord",
    "TraderState",
]
