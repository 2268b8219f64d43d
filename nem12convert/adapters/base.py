from __future__ import annotations
import logging
from typing import Protocol

from .. import exceptions
from ..assemble import assemble_nem12_file
from ..types import CanonicalRow, Nem12File

logger = logging.getLogger(__name__)


class Adapter(Protocol):
    """
    Capability set a source format must provide.

      - is_valid: cheap header/row signature check, never raises
      - parse_rows: full extraction into canonical rows
      - get_interval_length: sampling interval in minutes
    """

    name: str

    def is_valid(self, content: bytes) -> bool: ...

    def parse_rows(self, content: bytes) -> list[CanonicalRow]: ...

    def get_interval_length(self, content: bytes) -> int: ...


def convert_to_nem12(adapter: Adapter, content: bytes) -> Nem12File:
    """
    parse_rows -> get_interval_length -> assembly, with any failure re-raised
    as ConversionError carrying the underlying message.
    """
    try:
        rows = adapter.parse_rows(content)
        exceptions.require(
            bool(rows), "No valid data rows found", exceptions.NoDataRowsError
        )
        interval_length = adapter.get_interval_length(content)
        # adapters that cannot signal failure return 0
        exceptions.require(
            interval_length > 0,
            "Unable to determine interval length from file content",
            exceptions.IntervalLengthError,
        )
        logger.debug(
            "%s: %d rows, %d minute intervals", adapter.name, len(rows), interval_length
        )
        return assemble_nem12_file(rows, interval_length)
    except Exception as exc:
        logger.warning("%s conversion failed: %s", adapter.name, exc)
        raise exceptions.ConversionError(
            f"Failed to convert CSV to Nem12File: {exc}"
        ) from exc
