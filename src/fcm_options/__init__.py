"""
Validated delivery options for FCM downstream messages.

    from fcm_options import OptionsBuilder, OptionsPriority

    opts = OptionsBuilder().set_priority(OptionsPriority.high).set_time_to_live(3600).build()
    opts.to_dict()  # {"priority": "high", "time_to_live": 3600}
"""

from __future__ import annotations

from fcm_options.builder import MAX_TIME_TO_LIVE, OptionsBuilder
from fcm_options.errors import InvalidOptionError
from fcm_options.options import Options
from fcm_options.priorities import OptionsPriority

__all__ = [
    "MAX_TIME_TO_LIVE",
    "InvalidOptionError",
    "Options",
    "OptionsBuilder",
    "OptionsPriority",
]
