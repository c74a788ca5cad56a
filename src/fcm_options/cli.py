from __future__ import annotations

import json

import click

from fcm_options.builder import OptionsBuilder
from fcm_options.config import ConfigError
from fcm_options.errors import InvalidOptionError
from fcm_options.priorities import OptionsPriority
from fcm_options.utils.log import configure_logging, set_log_level


@click.command(name="fcm-options")
@click.option("--collapse-key", default=None, help="Collapse key grouping related messages.")
@click.option(
    "--priority",
    type=click.Choice(sorted(OptionsPriority.values())),
    default=None,
    help="Message priority.",
)
@click.option("--content-available", is_flag=True, default=False)
@click.option("--delay-while-idle", is_flag=True, default=False)
@click.option(
    "--time-to-live",
    type=int,
    default=None,
    help="Seconds to keep the message while the device is offline (0..2419200).",
)
@click.option("--restricted-package-name", default=None)
@click.option("--dry-run", is_flag=True, default=False, help="Validate without delivering.")
@click.option(
    "--use-settings/--no-settings",
    default=False,
    show_default=True,
    help="Start from the FCM_* defaults in the environment / .env.",
)
@click.option("--json/--text", "as_json", default=True, show_default=True)
@click.option("--log-level", default=None, help="Override LOG_LEVEL for this run.")
def cli(
    collapse_key: str | None,
    priority: str | None,
    content_available: bool,
    delay_while_idle: bool,
    time_to_live: int | None,
    restricted_package_name: str | None,
    dry_run: bool,
    use_settings: bool,
    as_json: bool,
    log_level: str | None,
) -> None:
    """
    Validate delivery options and print the resulting payload fragment.
    """
    try:
        configure_logging()
    except ConfigError as ex:
        raise click.ClickException(str(ex)) from ex
    if log_level:
        set_log_level(log_level)
    try:
        b = OptionsBuilder.from_settings() if use_settings else OptionsBuilder()
        if collapse_key is not None:
            b.set_collapse_key(collapse_key)
        if priority is not None:
            b.set_priority(priority)
        if content_available:
            b.set_content_available(True)
        if delay_while_idle:
            b.set_delay_while_idle(True)
        if time_to_live is not None:
            b.set_time_to_live(time_to_live)
        if restricted_package_name is not None:
            b.set_restricted_package_name(restricted_package_name)
        if dry_run:
            b.set_dry_run(True)
    except InvalidOptionError as ex:
        raise click.UsageError(str(ex)) from ex

    payload = b.build().to_dict()
    if as_json:
        click.echo(json.dumps(payload, sort_keys=True))
        return
    for k in sorted(payload):
        click.echo(f"{k}: {payload[k]}")


if __name__ == "__main__":  # pragma: no cover
    cli()
