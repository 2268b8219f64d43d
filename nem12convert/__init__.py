from . import (
    canon,
    types,
    utils,
    exceptions,
    adapters,
    assemble,
    serialize,
    detect,
)
from .detect import detect_adapter_and_convert
from .serialize import serialize_nem12

__all__ = [
    "canon",
    "types",
    "utils",
    "exceptions",
    "adapters",
    "assemble",
    "serialize",
    "detect",
    "detect_adapter_and_convert",
    "serialize_nem12",
]
