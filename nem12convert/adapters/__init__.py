"""Source format adapters."""

from .base import Adapter, convert_to_nem12
from .jemena import JemenaAdapter
from .origin import OriginAdapter
from .powerpal import PowerpalAdapter

__all__ = [
    "Adapter",
    "convert_to_nem12",
    "JemenaAdapter",
    "OriginAdapter",
    "PowerpalAdapter",
]
