"""Defines the command-line interface for fluentcheck.

This module uses the `click` library to expose validation sessions from the
shell. Each `check` invocation builds one session from its options, evaluates
it and exits with status 1 if any check failed, which makes it usable from
shell scripts and CI jobs.
"""
import json
import logging
import re
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .core.config import Config
from .core.exceptions import ValidationError
from .core.session import Strategy, ValidationSession

logger = logging.getLogger(__name__)


class AliasedGroup(click.Group):
    """A custom click Group that supports command aliases and case-insensitivity."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._aliases: Dict[str, str] = {}

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Gets a command by name, checking for aliases and prefixes.

        Args:
            ctx: The click context.
            cmd_name: The command name entered by the user.

        Returns:
            The matched click command, or None.
        """
        cmd_name = cmd_name.lower()
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        if cmd_name in self._aliases:
            return super().get_command(ctx, self._aliases[cmd_name])
        matches = [x for x in self.list_commands(ctx) if x.startswith(cmd_name)]
        if not matches:
            return None
        if len(matches) == 1:
            return super().get_command(ctx, matches[0])
        ctx.fail(f"Ambiguous command: '{cmd_name}'. Matches: {', '.join(sorted(matches))}")
        return None

    def add_alias(self, alias: str, command_name: str) -> None:
        """Adds an alias for a command."""
        self._aliases[alias.lower()] = command_name.lower()


def _make_console(config: Config) -> Console:
    return Console(emoji=True, highlight=False, no_color=not config.get("colors", True))


def parse_number(raw: str) -> Any:
    """Parses command-line text as an int, then as a Decimal.

    Text that is neither is returned unchanged, so the is-numeric check can
    report it.

    Args:
        raw: The text to parse.

    Returns:
        An int, a Decimal, or the original string.
    """
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return Decimal(text)
    except InvalidOperation:
        return raw


def build_session(
    strategy: Strategy,
    not_blank: Tuple[Tuple[str, str], ...] = (),
    numeric: Tuple[Tuple[str, str], ...] = (),
    positive: Tuple[Tuple[str, str], ...] = (),
    negative: Tuple[Tuple[str, str], ...] = (),
    ranges: Tuple[Tuple[str, str, float, float], ...] = (),
    patterns: Tuple[Tuple[str, str, str], ...] = (),
    emails: Tuple[Tuple[str, str], ...] = (),
) -> ValidationSession:
    """Registers one check per command-line option on a new session.

    Options are registered grouped by kind, in the order of the parameters.

    Returns:
        ValidationSession: The populated, not yet evaluated session.
    """
    session = ValidationSession(strategy)
    for name, value in not_blank:
        session.require_not_blank(lambda value=value: value, name)
    for name, value in numeric:
        session.require_numeric(lambda value=parse_number(value): value, name)
    for name, value in positive:
        session.require_positive_or_zero(lambda value=parse_number(value): value, name)
    for name, value in negative:
        session.require_negative_or_zero(lambda value=parse_number(value): value, name)
    for name, value, min_value, max_value in ranges:
        session.require_in_range(lambda value=parse_number(value): value, min_value, max_value, name)
    for name, value, pattern in patterns:
        session.require_matches(lambda value=value: value, pattern, name)
    for name, value in emails:
        session.require_valid_email(lambda value=value: value, name)
    return session


@click.group(cls=AliasedGroup, invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="fluentcheck")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Validate values from the command line with fluent checks.

    Each check registered through `fluentcheck check` runs in order under the
    configured strategy: collect every failure, or stop at the first one.
    """
    log_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug("Debug mode enabled.")

    if ctx.invoked_subcommand is None:
        click.echo("Use 'fluentcheck check --email Email a@b.com' to validate values, or 'fluentcheck --help' for more commands.")


@main.command()
@click.option("--not-blank", "not_blank", nargs=2, multiple=True, metavar="NAME VALUE", help="Require a non-blank value.")
@click.option("--numeric", nargs=2, multiple=True, metavar="NAME VALUE", help="Require a numeric value.")
@click.option("--positive", nargs=2, multiple=True, metavar="NAME VALUE", help="Require a number >= 0.")
@click.option("--negative", nargs=2, multiple=True, metavar="NAME VALUE", help="Require a number <= 0.")
@click.option("--range", "ranges", type=(str, str, float, float), multiple=True, metavar="NAME VALUE MIN MAX", help="Require a number within [MIN, MAX].")
@click.option("--matches", "patterns", nargs=3, multiple=True, metavar="NAME VALUE PATTERN", help="Require the value to match a regular expression.")
@click.option("--email", "emails", nargs=2, multiple=True, metavar="NAME VALUE", help="Require a valid email address.")
@click.option("--strategy", "strategy_name", type=click.Choice(["collect_all", "fail_fast"]), default=None, help="Report every failure, or stop at the first one.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
def check(
    not_blank: Tuple[Tuple[str, str], ...],
    numeric: Tuple[Tuple[str, str], ...],
    positive: Tuple[Tuple[str, str], ...],
    negative: Tuple[Tuple[str, str], ...],
    ranges: Tuple[Tuple[str, str, float, float], ...],
    patterns: Tuple[Tuple[str, str, str], ...],
    emails: Tuple[Tuple[str, str], ...],
    strategy_name: Optional[str],
    json_output: bool,
    config_path: Optional[str],
) -> None:
    """Validate values and report every failing check.

    \b
    Examples:
        fluentcheck check --email Email a@b.com --range Age 42 0 130
        fluentcheck check --strategy fail_fast --not-blank Username "" --numeric Count x
    """
    config_obj = Config(config_path=config_path)
    if strategy_name:
        strategy = Strategy(strategy_name)
    else:
        strategy = Strategy.FAIL_FAST if config_obj.is_fail_fast() else Strategy.COLLECT_ALL
    json_output = json_output or config_obj.wants_json()

    try:
        session = build_session(strategy, not_blank, numeric, positive, negative, ranges, patterns, emails)
    except re.error as e:
        # Invalid regular expressions surface at registration.
        raise click.BadParameter(str(e), param_hint="--matches") from e

    result: Dict[str, Any] = {"valid": True, "strategy": strategy.value, "message": None, "errors": []}
    try:
        session.validate()
    except ValidationError as e:
        result.update(e.to_dict(), valid=False)
    errors: List[str] = result["errors"]
    logger.info(f"Evaluated {len(session)} checks with strategy {strategy.value}: {len(errors)} failure(s).")

    if json_output:
        click.echo(json.dumps(result, indent=2))
    else:
        _display_errors(_make_console(config_obj), errors, len(session), config_obj.get("verbose", False))

    if errors:
        sys.exit(1)


def _display_errors(console: Console, errors: List[str], check_count: int, verbose: bool) -> None:
    """Displays failure messages in a table followed by a summary panel.

    Args:
        console: The console to print to.
        errors: The failure messages, in registration order.
        check_count: How many checks were registered.
        verbose: Whether to mention the number of registered checks.
    """
    if verbose:
        console.print(f"[bold blue]Registered {check_count} check(s).[/bold blue]")

    if not errors:
        console.print(Panel("All checks passed.", style="green", title="Validation Complete"))
        return

    table = Table(title="Failed Checks")
    table.add_column("#", style="cyan")
    table.add_column("Message")
    for position, error in enumerate(errors, start=1):
        table.add_row(str(position), escape(error))
    console.print(table)
    console.print(Panel(f"Found {len(errors)} failure(s).", style="red", title="Validation Complete"))


@main.command()
@click.argument("action", type=click.Choice(['get', 'list']), required=True)
@click.argument("key", type=str, required=False)
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to a custom config file.")
def config(action: str, key: Optional[str], config_path: Optional[str]) -> None:
    """Show the effective fluentcheck configuration.

    \b
    ACTION:
        get <key>       Get a configuration value.
        list            List all current configuration values.
    """
    config_obj = Config(config_path=config_path)
    if action == "list":
        click.echo(json.dumps(config_obj.config, indent=2))
        return
    if not key:
        click.echo("Error: 'get' action requires a key.", err=True)
        sys.exit(1)
    value = config_obj.get(key)
    if value is None:
        click.echo(f"Error: unknown configuration key '{key}'.", err=True)
        sys.exit(1)
    click.echo(json.dumps(value))


main.add_alias('c', 'check')

if __name__ == "__main__":
    main()
