class Nem12Error(Exception): ...


class UnsupportedFormatError(Nem12Error): ...


class NoDataRowsError(Nem12Error): ...


class IntervalLengthError(Nem12Error): ...


class ConversionError(Nem12Error): ...


def require(condition: bool, message: str, exc: type[Nem12Error] = Nem12Error):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
