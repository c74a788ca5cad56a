from __future__ import annotations

from enum import Enum
from typing import Any


class OptionsPriority(str, Enum):
    """
    Message priorities accepted by FCM.

    On iOS these correspond to APNs priorities 10 (high) and 5 (normal).
    """

    high = "high"
    normal = "normal"

    @classmethod
    def values(cls) -> frozenset[str]:
        return _PRIORITY_VALUES

    @classmethod
    def is_valid(cls, candidate: Any) -> bool:
        # exact, case-sensitive match; "High" and "" are rejected
        return isinstance(candidate, str) and candidate in _PRIORITY_VALUES


_PRIORITY_VALUES: frozenset[str] = frozenset(p.value for p in OptionsPriority)
