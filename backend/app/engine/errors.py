"""Engine error types."""

from __future__ import annotations

from typing import Any


class InvalidParameter(ValueError):
    """Raised when a curvature or count argument is out of its domain.

    The engine never clamps: the caller is expected to constrain its
    controls before calling in.
    """

    def __init__(self, parameter: str, value: Any, message: str) -> None:
        super().__init__(f"{parameter}={value!r}: {message}")
        self.parameter = parameter
        self.value = value
        self.message = message
