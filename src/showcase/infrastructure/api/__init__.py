from .client import ApiClient
from .images import ImageFetcher
from .responses import extract_items, extract_total

__all__ = ["ApiClient", "ImageFetcher", "extract_items", "extract_total"]
