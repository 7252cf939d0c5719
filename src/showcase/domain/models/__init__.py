from .core import Item, SelectOption
from .query import FilterState

__all__ = ["FilterState", "Item", "SelectOption"]
