"""Typer-based CLI application for nodeboard."""

import logging
from typing import Annotated, NoReturn, Optional

import typer
from pydantic import ValidationError

from nodeboard import __version__
from nodeboard.config import DEFAULT_TIMEOUT, INVALID_TOKEN, ONBOARD_URL, AgentSettings
from nodeboard.core.errors import (
    IdentityNotFoundError,
    InvalidTokenError,
    NetworkQueryError,
    ReportError,
)
from nodeboard.core.info import SystemInfo, build_system_info
from nodeboard.core.token import resolve_token
from nodeboard.metadata.network import get_ip_address, get_mac_address
from nodeboard.metadata.system import get_os_name
from nodeboard.storage.http import send_to_server

app = typer.Typer(
    name="nodeboard",
    help="Register this machine with the node inventory backend",
    add_completion=False,
)

logger = logging.getLogger(__name__)


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        typer.echo(f"nodeboard v{__version__}")
        raise typer.Exit()


def configure_logging(log_level: str) -> None:
    """Configure root logging from a debug/info/warn/error level name.

    Raises:
        typer.Exit: If the level name is not recognised
    """
    log_level_upper = log_level.upper()
    if log_level_upper not in ["DEBUG", "INFO", "WARN", "WARNING", "ERROR"]:
        typer.echo(
            f"❌ Invalid log level: {log_level}. "
            "Must be debug, info, warn, or error.",
            err=True,
        )
        raise typer.Exit(1)

    # Map WARN to WARNING for Python logging
    if log_level_upper == "WARN":
        log_level_upper = "WARNING"

    logging.basicConfig(
        level=getattr(logging, log_level_upper),
        format="%(message)s",
    )


def fail(message: str, error: Exception) -> NoReturn:
    """Report an aborted run on stderr and exit with status 1."""
    typer.echo(f"❌ {message}. Error: {error}", err=True)
    raise typer.Exit(1) from error


def collect_system_info(token: Optional[str]) -> SystemInfo:
    """Resolve every field in order and assemble the record.

    Order is MAC, IP, token, OS; the first failure aborts the run.
    """
    try:
        mac_address = get_mac_address()
    except (NetworkQueryError, IdentityNotFoundError) as e:
        fail("Error getting MAC address", e)

    try:
        ip_address = get_ip_address()
    except (NetworkQueryError, IdentityNotFoundError) as e:
        fail("Error getting IP address", e)

    try:
        token_str = resolve_token(token)
    except InvalidTokenError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    return build_system_info(
        mac_address=mac_address,
        ip_address=ip_address,
        os_name=get_os_name(),
        token=token_str,
    )


@app.command()
def onboard(
    token: Annotated[
        str,
        typer.Option(
            "-token",
            "--token",
            help="Unique token given while adding the new node",
        ),
    ] = INVALID_TOKEN,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Collect and print the payload, do not send"),
    ] = False,
    # Runtime options (hidden from help - for developers)
    url: Annotated[
        str,
        typer.Option(help="Onboarding endpoint URL", hidden=True),
    ] = ONBOARD_URL,
    timeout: Annotated[
        float,
        typer.Option(help="HTTP timeout in seconds", hidden=True),
    ] = DEFAULT_TIMEOUT,
    log_level: Annotated[
        str,
        typer.Option(
            help="Logging level (debug, info, warn, error)",
            case_sensitive=False,
            hidden=True,
        ),
    ] = "info",
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
):
    """Collect network identity and report it to the onboarding server.

    Sends MAC address, IPv4 address, OS name, token and script version in
    a single POST. Any failure aborts the run before anything is sent.
    """
    configure_logging(log_level)

    try:
        settings = AgentSettings(url=url, timeout=timeout, dry_run=dry_run)
    except ValidationError as e:
        typer.echo(f"❌ Invalid settings: {e}", err=True)
        raise typer.Exit(1) from e

    try:
        info = collect_system_info(token)

        if settings.dry_run:
            typer.echo(f"Dry run, not sending to {settings.url}")
            typer.echo(info.to_json())
            return

        status = send_to_server(info, settings.url, timeout=settings.timeout)
    except typer.Exit:
        raise  # Already reported by collect_system_info
    except ReportError as e:
        fail("Error sending system info", e)
    except KeyboardInterrupt:
        typer.echo("\n❌ Operation cancelled by user", err=True)
        raise typer.Exit(130) from None  # 130 is standard exit code for SIGINT
    except Exception as e:
        typer.echo(f"\n❌ Error onboarding system: {e}", err=True)
        logger.exception("Onboarding failed")
        raise typer.Exit(1) from e

    logger.debug("Onboarding request returned HTTP %d", status)
    typer.echo(f"System info {info.model_dump(by_alias=True)}")


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
