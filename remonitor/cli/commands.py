"""CLI commands for remonitor."""

from __future__ import annotations

import sys

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from remonitor import __version__
from remonitor.config import Settings, get_settings
from remonitor.store import ConfigStore

app = typer.Typer(
    name="remonitor",
    help="remonitor - remembers which monitor a window was last open on",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"remonitor v{__version__}")
        raise typer.Exit()


def _configure_logging(settings: Settings) -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level.upper())


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """remonitor entrypoint."""
    del version
    _configure_logging(get_settings())


@app.command()
def show() -> None:
    """Show the saved monitor placement."""
    store = ConfigStore(get_settings().config_path)
    console.print(f"Placement file: [cyan]{store.path}[/cyan]")
    config = store.load()
    if config is None:
        console.print("[yellow]No saved placement.[/yellow]")
        return
    monitor = "unknown" if config.monitor_index < 0 else str(config.monitor_index)
    console.print(f"Monitor: {monitor}")
    console.print(f"Fullscreen: {'yes' if config.fullscreen else 'no'}")


@app.command()
def monitors() -> None:
    """List connected monitors in enumeration order."""
    from remonitor.backends.tk_backend import list_monitors

    found = list_monitors()
    if not found:
        console.print("[yellow]No monitors detected.[/yellow]")
        return

    table = Table(title="Monitors")
    table.add_column("Index", justify="right")
    table.add_column("Name")
    table.add_column("Geometry")
    table.add_column("Primary")
    for index, monitor in enumerate(found):
        table.add_row(
            str(index),
            monitor.name or "",
            f"{monitor.width}x{monitor.height}+{monitor.x}+{monitor.y}",
            "yes" if monitor.is_primary else "",
        )
    console.print(table)


@app.command()
def reset() -> None:
    """Forget the saved monitor placement."""
    store = ConfigStore(get_settings().config_path)
    if not store.clear():
        console.print(f"[red]Could not remove {store.path}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]OK[/green] Cleared {store.path}")


@app.command()
def demo(
    width: int = typer.Option(800, "--width", help="Demo window width"),
    height: int = typer.Option(500, "--height", help="Demo window height"),
) -> None:
    """Open a window that reopens on the monitor it was closed on."""
    import customtkinter as ctk

    from remonitor.backends.tk_backend import TkBackend
    from remonitor.lifecycle import STARTED, STOPPING, LifecycleHub, install

    store = ConfigStore(get_settings().config_path)
    hub = LifecycleHub()

    root = ctk.CTk()
    root.title("remonitor demo")
    root.geometry(f"{width}x{height}")
    install(hub, TkBackend(root), store=store)

    label = ctk.CTkLabel(
        root,
        text="Move this window to another monitor, press F11 for fullscreen, then close it.",
        wraplength=max(200, width - 40),
    )
    label.pack(expand=True, fill="both", padx=20, pady=20)

    def toggle_fullscreen(_event: object = None) -> None:
        root.attributes("-fullscreen", not bool(int(root.attributes("-fullscreen"))))

    def handle_close() -> None:
        hub.publish(STOPPING, root)
        try:
            root.quit()
            root.destroy()
        except Exception as exc:
            logger.warning("Error during demo shutdown: {}", exc)

    root.bind("<F11>", toggle_fullscreen)
    root.protocol("WM_DELETE_WINDOW", handle_close)
    root.after(0, lambda: hub.publish(STARTED, root))
    root.mainloop()


if __name__ == "__main__":
    app()
