from __future__ import annotations
import logging
from typing import Optional, Sequence

from . import exceptions
from .adapters import (
    Adapter,
    JemenaAdapter,
    OriginAdapter,
    PowerpalAdapter,
    convert_to_nem12,
)
from .types import Nem12File

logger = logging.getLogger(__name__)

# Tried in this order; the first adapter that accepts the file wins.
ADAPTERS: tuple[Adapter, ...] = (JemenaAdapter(), OriginAdapter(), PowerpalAdapter())


def detect_adapter(
    content: bytes, adapters: Optional[Sequence[Adapter]] = None
) -> Adapter:
    """Return the first adapter whose signature check accepts the content."""
    for adapter in adapters if adapters is not None else ADAPTERS:
        logger.debug("Trying %s adapter", adapter.name)
        if adapter.is_valid(content):
            logger.info("Detected %s format", adapter.name)
            return adapter
    logger.warning("No adapter accepted the file")
    raise exceptions.UnsupportedFormatError("Unsupported file format")


def detect_adapter_and_convert(
    content: bytes, adapters: Optional[Sequence[Adapter]] = None
) -> Nem12File:
    adapter = detect_adapter(content, adapters)
    return convert_to_nem12(adapter, content)
