"""Command-line interface for retryable."""

import asyncio
import logging
import shlex
import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from retryable import __version__
from retryable.core.config import get_config, setup_logging
from retryable.core.exceptions import (
    CommandError,
    ConfigurationError,
    MaxRetryAttemptsReached,
    ValidationError,
)
from retryable.core.types import DelayStrategy
from retryable.parsers import parse_policy
from retryable.resilience import clamp_delay, delays, execute, log_failed_attempts

console = Console()
logger = logging.getLogger("retryable.cli")


async def run_command(argv: Tuple[str, ...]) -> int:
    """Run a command once.

    Raises:
        CommandError: If the command exits with a non-zero status
    """
    process = await asyncio.create_subprocess_exec(*argv)
    returncode = await process.wait()
    if returncode != 0:
        raise CommandError(shlex.join(argv), returncode)
    return returncode


@click.group()
@click.version_option(version=__version__, prog_name="retryable")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """retryable - Retry asynchronous operations with backoff."""
    setup_logging(verbose)


@cli.command()
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in DelayStrategy]),
    default=None,
    help="Delay strategy.",
)
@click.option("--delay", "delay_ms", type=float, default=None, help="Base delay in ms.")
@click.option("--max-retries", type=click.IntRange(min=0), default=None)
@click.option("--max-delay", type=click.FloatRange(min=0), default=None, help="Delay bound in ms.")
def schedule(
    strategy: Optional[str],
    delay_ms: Optional[float],
    max_retries: Optional[int],
    max_delay: Optional[float],
) -> None:
    """Show the delays waited before each retry.

    Example:
        retryable schedule --strategy potential --delay 100 --max-retries 5
    """
    defaults = get_config()
    strategy = strategy or defaults.delay_strategy.value
    delay_ms = defaults.delay if delay_ms is None else delay_ms
    max_retries = defaults.max_retries if max_retries is None else max_retries
    max_delay = defaults.max_delay if max_delay is None else max_delay

    delay = delays.from_strategy(DelayStrategy(strategy), delay_ms)

    table = Table(title=f"{strategy} delay schedule")
    table.add_column("Retry", justify="right")
    table.add_column("Delay (ms)", justify="right")
    table.add_column("Elapsed (ms)", justify="right")

    elapsed = 0.0
    for attempts in range(1, max_retries + 1):
        duration = clamp_delay(delay(attempts), max_delay)
        elapsed += duration
        table.add_row(str(attempts), f"{duration:g}", f"{elapsed:g}")

    console.print(table)


@cli.command()
@click.argument("policy_path", type=click.Path(exists=True))
def validate(policy_path: str) -> None:
    """Validate a retry policy YAML definition.

    Example:
        retryable validate policies/http.yaml
    """
    console.print(f"[cyan]Validating policy: {policy_path}[/cyan]")

    try:
        policy = parse_policy(policy_path)
    except (ConfigurationError, ValidationError) as e:
        console.print("[red]✗ Policy is invalid[/red]")
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    console.print("[green]✓ Policy is valid[/green]")
    console.print(f"  Max retries: {policy.max_retries}")
    console.print(f"  Delay: {policy.delay.strategy.value} ({policy.delay.delay:g} ms)")
    if policy.retry_when is not None:
        console.print(f"  Retry when: {policy.retry_when.value}")
    if policy.retry_on:
        console.print(f"  Retry on: {', '.join(policy.retry_on)}")
    sys.exit(0)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("policy_path", type=click.Path(exists=True))
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
def run(policy_path: str, command: Tuple[str, ...]) -> None:
    """Run a command, retrying it according to a policy.

    A non-zero exit status counts as a thrown error.

    Example:
        retryable run policies/flaky.yaml -- curl -fsS https://example.com
    """
    try:
        policy = parse_policy(policy_path)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)

    name = policy.name_of_operation or shlex.join(command)
    options = policy.to_options(on_failed_attempt=log_failed_attempts(logger, name=name))
    if policy.name_of_operation is None:
        options = options.model_copy(update={"name_of_operation": name})

    try:
        asyncio.run(execute(lambda: run_command(command), options))
    except CommandError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(e.returncode)
    except MaxRetryAttemptsReached as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Failed to start command: {escape(str(e))}[/red]")
        sys.exit(127)

    sys.exit(0)


@cli.command()
def version() -> None:
    """Show retryable version."""
    console.print(f"retryable version {__version__}")


if __name__ == "__main__":
    cli()
