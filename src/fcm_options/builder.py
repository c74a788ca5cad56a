from __future__ import annotations

from typing import Any

from fcm_options.config import Settings, get_settings
from fcm_options.errors import InvalidOptionError
from fcm_options.options import Options
from fcm_options.priorities import OptionsPriority
from fcm_options.utils.log import logger

# 28 days, in seconds
MAX_TIME_TO_LIVE = 2419200


class OptionsBuilder:
    """
    Mutable accumulator for `Options`.

    Every setter validates its value, stores it and returns the builder, so calls
    can be chained:

        OptionsBuilder().set_priority("high").set_dry_run(True).build()

    A rejected value raises `InvalidOptionError` and leaves the builder as it was.
    A builder is meant for a single owner; it does no locking.

    For the meaning of each option see
    http://firebase.google.com/docs/cloud-messaging/http-server-ref#downstream-http-messages-json
    """

    def __init__(self) -> None:
        self._collapse_key: str | None = None
        self._priority: str | None = None
        self._content_available = False
        self._delay_while_idle = False
        self._time_to_live: int | None = None
        self._restricted_package_name: str | None = None
        self._dry_run = False

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> OptionsBuilder:
        """
        Builder seeded with the configured defaults (FCM_DEFAULT_PRIORITY, ...).

        Defaults go through the regular setters, so a bad value raises
        `InvalidOptionError`.
        """
        s = settings if settings is not None else get_settings()
        b = cls()
        if s.default_priority is not None:
            b.set_priority(s.default_priority)
        if s.default_time_to_live is not None:
            b.set_time_to_live(s.default_time_to_live)
        if s.default_restricted_package_name is not None:
            b.set_restricted_package_name(s.default_restricted_package_name)
        b.set_dry_run(s.default_dry_run)
        return b

    def _reject(self, field: str, value: Any, message: str) -> InvalidOptionError:
        logger.warning("fcm_option_rejected", field=field, value=repr(value))
        return InvalidOptionError(message, field=field, value=value)

    def _flag(self, field: str, value: Any) -> bool:
        # no truthiness coercion: "false" must not become True
        if not isinstance(value, bool):
            raise self._reject(field, value, f"{field} must be a boolean, current value is: {value!r}")
        return value

    # --- setters ---

    def set_collapse_key(self, collapse_key: str | None) -> OptionsBuilder:
        """
        Group of messages that can be collapsed so only the last one is delivered.
        FCM allows at most 4 different collapse keys at a time.
        """
        self._collapse_key = collapse_key
        return self

    def set_priority(self, priority: str) -> OptionsBuilder:
        """Message priority: "normal" (FCM default) or "high"."""
        if not OptionsPriority.is_valid(priority):
            raise self._reject(
                "priority",
                priority,
                f"priority {priority!r} is not valid, use one of the values of OptionsPriority "
                f"({', '.join(sorted(OptionsPriority.values()))})",
            )
        self._priority = OptionsPriority(priority).value
        return self

    def set_content_available(self, content_available: bool) -> OptionsBuilder:
        # iOS: content-available in the APNs payload; Android wakes on data messages anyway
        self._content_available = self._flag("content_available", content_available)
        return self

    def set_delay_while_idle(self, delay_while_idle: bool) -> OptionsBuilder:
        """Hold the message until the device becomes active."""
        self._delay_while_idle = self._flag("delay_while_idle", delay_while_idle)
        return self

    def set_time_to_live(self, time_to_live: int) -> OptionsBuilder:
        """Seconds FCM keeps the message while the device is offline (0..2419200)."""
        if isinstance(time_to_live, bool) or not isinstance(time_to_live, int):
            raise self._reject(
                "time_to_live",
                time_to_live,
                f"time to live must be an integer, current value is: {time_to_live!r}",
            )
        if time_to_live < 0 or time_to_live > MAX_TIME_TO_LIVE:
            raise self._reject(
                "time_to_live",
                time_to_live,
                f"time to live must be between 0 and {MAX_TIME_TO_LIVE}, current value is: {time_to_live}",
            )
        self._time_to_live = int(time_to_live)
        return self

    def set_restricted_package_name(self, restricted_package_name: str | None) -> OptionsBuilder:
        """Package name the registration tokens must match to receive the message."""
        self._restricted_package_name = restricted_package_name
        return self

    def set_dry_run(self, dry_run: bool) -> OptionsBuilder:
        """Validate the request without delivering it. Development only."""
        self._dry_run = self._flag("dry_run", dry_run)
        return self

    # --- getters ---

    @property
    def collapse_key(self) -> str | None:
        return self._collapse_key

    @property
    def priority(self) -> str | None:
        return self._priority

    @property
    def content_available(self) -> bool:
        return self._content_available

    @property
    def delay_while_idle(self) -> bool:
        return self._delay_while_idle

    @property
    def time_to_live(self) -> int | None:
        return self._time_to_live

    @property
    def restricted_package_name(self) -> str | None:
        return self._restricted_package_name

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def build(self) -> Options:
        """Snapshot the current values into a new `Options`."""
        opts = Options(
            collapse_key=self._collapse_key,
            priority=self._priority,
            content_available=self._content_available,
            delay_while_idle=self._delay_while_idle,
            time_to_live=self._time_to_live,
            restricted_package_name=self._restricted_package_name,
            dry_run=self._dry_run,
        )
        logger.debug("fcm_options_built", fields=sorted(opts.to_dict()))
        return opts
