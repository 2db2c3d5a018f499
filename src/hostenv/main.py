"""CLI entry point for hostenv."""

import sys
from typing import Annotated

import typer
from py_app_dev.core.exceptions import UserNotificationException
from py_app_dev.core.logging import logger, setup_logger, time_it
from rich.console import Console
from rich.table import Table

from hostenv import __version__
from hostenv.domain import HostEnvironment
from hostenv.humanize import humanize_arch, humanize_environment, humanize_platform, humanize_runtime
from hostenv.platform import get_environment_tuple

package_name = "hostenv"


def _probe() -> tuple[str, str, str]:
    try:
        return get_environment_tuple()
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(1) from e


app = typer.Typer(
    name=package_name,
    help="Report the platform, architecture and runtime ABI of this host.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def version(
    version: bool = typer.Option(None, "--version", "-v", is_eager=True, help="Show version and exit."),
) -> None:
    if version:
        typer.echo(f"{package_name} {__version__}")
        raise typer.Exit()


@app.command(name="tuple", help="Print the environment tuple of this host.")
@time_it("tuple")
def show_tuple(
    as_json: Annotated[bool, typer.Option("--json", help="Print a JSON report instead of platform-arch-abi.")] = False,
) -> None:
    parts = _probe()
    if as_json:
        report = HostEnvironment.from_tuple(parts, description=humanize_environment(parts))
        typer.echo(report.to_json_string())
    else:
        typer.echo("-".join(parts))


@app.command(help="Describe this host, or an explicit PLATFORM ARCH ABI tuple, in plain words.")
@time_it("describe")
def describe(
    parts: Annotated[list[str] | None, typer.Argument(help="Explicit tags: PLATFORM ARCH ABI.")] = None,
) -> None:
    typer.echo(humanize_environment(parts or _probe()))


@app.command(help="Show each environment tag next to its label.")
@time_it("show")
def show() -> None:
    platform, arch, abi = _probe()
    table = Table("Category", "Tag", "Label")
    table.add_row("platform", platform, humanize_platform(platform) or "Unsupported")
    table.add_row("architecture", arch, humanize_arch(arch) or "Unsupported")
    table.add_row("runtime", abi, humanize_runtime(abi) or "Unsupported")
    Console().print(table)


def main() -> int:
    try:
        setup_logger()
        app()
        return 0
    except UserNotificationException as e:
        logger.error(f"{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
