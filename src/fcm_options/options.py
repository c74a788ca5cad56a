from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# attribute name -> FCM legacy HTTP JSON key
PAYLOAD_KEYS: dict[str, str] = {
    "collapse_key": "collapse_key",
    "priority": "priority",
    "content_available": "content_available",
    "delay_while_idle": "delay_while_idle",
    "time_to_live": "time_to_live",
    "restricted_package_name": "restricted_package_name",
    "dry_run": "dry_run",
}


@dataclass(frozen=True, slots=True)
class Options:
    """
    Immutable delivery options for one downstream message.

    Built by `OptionsBuilder.build()`; values were validated by the builder.
    Unset optional fields are None.
    """

    collapse_key: str | None = None
    priority: str | None = None
    content_available: bool = False
    delay_while_idle: bool = False
    time_to_live: int | None = None
    restricted_package_name: str | None = None
    dry_run: bool = False

    def to_dict(self) -> dict[str, Any]:
        """
        Payload fragment with only the fields that are set.

        None and False are dropped; time_to_live=0 is kept.
        """
        out: dict[str, Any] = {}
        for attr, key in PAYLOAD_KEYS.items():
            v = getattr(self, attr)
            if v is None or v is False:
                continue
            out[key] = v
        return out

    def is_empty(self) -> bool:
        return not self.to_dict()
