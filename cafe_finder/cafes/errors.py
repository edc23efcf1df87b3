from __future__ import annotations


class CafeQueryError(Exception):
    """A client input error. ``message`` is sent back verbatim with a 400."""

    message = "bad request"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnknownCityError(CafeQueryError):
    message = "unknown city"


class InvalidCountError(CafeQueryError):
    message = "incorrect count"
