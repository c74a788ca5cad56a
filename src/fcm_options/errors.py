from __future__ import annotations

from typing import Any


class InvalidOptionError(ValueError):
    """
    Raised by a builder setter when a value violates that field's constraint.

    The builder keeps its previous value for the field.
    """

    def __init__(self, message: str, *, field: str, value: Any) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
