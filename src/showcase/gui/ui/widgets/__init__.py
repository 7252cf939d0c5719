"""Widgets composing the catalog pages."""

from .catalog_page import CatalogPage
from .filter_bar import FilterBar
from .flow_layout import FlowLayout
from .item_card import ItemCard

__all__ = ["CatalogPage", "FilterBar", "FlowLayout", "ItemCard"]
