"""
SOLE RESPONSIBILITY: Defines the Typer CLI commands (show, set, reset, check) that
render the server settings screen in a terminal.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.status import Status
from rich.table import Table

from ..core.error_codes import ConfigStoreError
from ..core.app_logger import setup_logger
from ..core.probe import probe_server
from ..core.validation import validate_server_url
from .config import AppConfig
from .settings_screen import ScreenOutcome, ScreenState, ServerSettingsScreen

app = typer.Typer(
    name="happy-config",
    help="""
[bold cyan]Happy Config[/bold cyan] - choose which Happy server the client talks to

[bold yellow]Quick Start[/bold yellow]
  [cyan]# See which server is in use[/cyan]
  $ happy-config server show

  [cyan]# Switch to a self-hosted server[/cyan]
  $ happy-config server set https://happy.example.com

  [cyan]# Go back to the default server[/cyan]
  $ happy-config server reset
""",
    rich_markup_mode="rich",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

server_app = typer.Typer(
    help="""
[bold blue]Server Configuration[/bold blue]

  [green]show[/green]  - Current server and where the setting comes from
  [green]set[/green]   - Validate, probe and save a custom server URL
  [green]reset[/green] - Clear the custom server URL
  [green]check[/green] - Validate and probe a URL without saving it

[dim]Advanced feature: only change this if you run your own Happy server.[/dim]
""",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(server_app, name="server")

# Console for rich output
console = Console()


def version_callback(value: bool):
    """Version callback function for --version flag."""
    if value:
        from happy_config import __version__

        console.print(f"[bold green]Happy Config[/bold green] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Mirror debug logs to the console")] = False,
):
    """
    Configure logging before any command runs.
    """
    config = AppConfig.load()
    setup_logger(config.app_dir, debug=debug or config.debug)


class ProbeSpinner:
    """Shows an in-progress indicator while the screen is probing."""

    def __init__(self):
        self.status: Optional[Status] = None

    def __call__(self, state: ScreenState) -> None:
        if state == ScreenState.PROBING:
            self.status = console.status("[cyan]Validating server...[/cyan]")
            self.status.start()
        elif self.status is not None:
            self.status.stop()
            self.status = None


def make_confirm(assume_yes: bool):
    """Confirmation callback backed by a terminal prompt."""

    async def confirm(title: str, message: str) -> bool:
        if assume_yes:
            return True
        console.print(f"\n[bold]{title}[/bold]")
        return await asyncio.to_thread(typer.confirm, message)

    return confirm


def _build_screen(assume_yes: bool) -> ServerSettingsScreen:
    config = AppConfig.load()
    return ServerSettingsScreen(
        config.server_config_store(),
        confirm=make_confirm(assume_yes),
        prober=probe_server,
        on_state_change=ProbeSpinner(),
    )


def _source_of(config: AppConfig, custom_url: Optional[str]) -> str:
    if custom_url:
        return "custom"
    if config.build_default_url:
        return "environment"
    return "default"


@server_app.command("show", help="Show the server currently in use")
def server_show(
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Show the effective server URL."""
    config = AppConfig.load()
    store = config.server_config_store()

    url = store.get_effective_url()
    info = store.get_resolved_info()
    data = {
        "url": url,
        "hostname": info.hostname,
        "port": info.port,
        "is_custom": info.is_custom,
        "source": _source_of(config, store.get_custom_url()),
    }

    if json_output:
        console.print_json(data=data)
        return

    table = Table(title="Server Configuration", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("URL", url)
    table.add_row("Host", info.hostname)
    table.add_row("Port", str(info.port) if info.port is not None else "[dim]default[/dim]")
    table.add_row("Source", data["source"])
    console.print(table)

    if info.is_custom:
        console.print("[yellow]Currently using custom server[/yellow]")


@server_app.command("set", help="Validate, probe and save a custom server URL")
def server_set(
    url: Annotated[str, typer.Argument(help="Server URL, e.g. https://happy.example.com")],
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
):
    """Save a custom server URL after it answers as a Happy server."""
    screen = _build_screen(yes)
    screen.set_input(url)

    try:
        outcome = asyncio.run(screen.handle_save())
    except ConfigStoreError as e:
        console.print(f"[red]✗ Could not save server URL: {e}[/red]")
        raise typer.Exit(1)

    if outcome == ScreenOutcome.SAVED:
        console.print(f"[green]✓ Server URL saved: {url.strip()}[/green]")
    elif outcome == ScreenOutcome.DECLINED:
        console.print("[yellow]Server change cancelled.[/yellow]")
    else:
        console.print(f"[red]✗ {screen.error}[/red]")
        raise typer.Exit(1)


@server_app.command("reset", help="Go back to the default server")
def server_reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
):
    """Clear the custom server URL."""
    screen = _build_screen(yes)

    try:
        outcome = asyncio.run(screen.handle_reset())
    except ConfigStoreError as e:
        console.print(f"[red]✗ Could not reset server URL: {e}[/red]")
        raise typer.Exit(1)

    if outcome == ScreenOutcome.RESET:
        url = screen.config.get_effective_url()
        console.print(f"[green]✓ Server reset to default: {url}[/green]")
    else:
        console.print("[yellow]Reset cancelled.[/yellow]")


@server_app.command("check", help="Validate and probe a URL without saving it")
def server_check(
    url: Annotated[str, typer.Argument(help="Server URL to test")],
):
    """Run the save checks for a URL, leaving the configuration untouched."""
    validation = validate_server_url(url)
    if not validation.valid:
        console.print(f"[red]✗ {validation.message}[/red]")
        raise typer.Exit(1)

    with console.status("[cyan]Validating server...[/cyan]"):
        result = asyncio.run(probe_server(url.strip()))

    if not result.ok:
        detail = f" (HTTP {result.status_code})" if result.status_code is not None else ""
        console.print(f"[red]✗ {result.message}{detail}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ {url.strip()} is a Happy server[/green] [dim]({result.elapsed_ms}ms)[/dim]")


# Entry point function for setuptools/pip
def cli_entry():
    """Entry point for the CLI executable."""
    app()


if __name__ == "__main__":
    app()
