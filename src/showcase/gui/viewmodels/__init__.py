from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .fetch_runner import FetchRunner, ImmediateRunner
from .paginated_list_viewmodel import PaginatedListViewModel
from .visibility import Rect, VisibilitySensor, VisibilityTracker, intersection_ratio

__all__ = [
    "BaseViewModel",
    "FetchRunner",
    "ImmediateRunner",
    "ObservableProperty",
    "PaginatedListViewModel",
    "Rect",
    "Signal",
    "VisibilitySensor",
    "VisibilityTracker",
    "intersection_ratio",
]
