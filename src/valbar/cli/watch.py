"""Watch command: run the poll loop and print the label as it changes."""

from __future__ import annotations

import asyncio
import signal
import sys

import typer

from valbar.display.sink import DisplaySink, DisplaySummary
from valbar.ingestion.base import create_match_feed
from valbar.ingestion.poller import PollLoop

app = typer.Typer(help="Poll the score feed and print the current summary")


@app.callback(invoke_without_command=True)
def watch(
    ctx: typer.Context,
    interval: float = typer.Option(None, "--interval", "-i", help="Seconds between polls (overrides config)"),
) -> None:
    """Run the poll loop in the foreground (Ctrl+C to stop)."""
    if ctx.invoked_subcommand is not None:
        return
    settings = ctx.obj["settings"]
    sink = DisplaySink(prefix=settings.display_prefix)

    def on_update(summary: DisplaySummary) -> None:
        typer.echo(f"[{summary.updated_at:%H:%M:%S}] {sink.label()}")

    sink.subscribe(on_update)
    poller = PollLoop(
        create_match_feed(settings),
        sink,
        interval_sec=interval or settings.poll_interval_sec,
    )
    stop_event = asyncio.Event()

    def shutdown() -> None:
        stop_event.set()

    loop = asyncio.new_event_loop()
    if sys.platform != "win32":
        loop.add_signal_handler(signal.SIGINT, shutdown)
        loop.add_signal_handler(signal.SIGTERM, shutdown)
    try:
        typer.echo(sink.label())
        loop.run_until_complete(poller.run(stop_event=stop_event))
    except KeyboardInterrupt:
        pass
    finally:
        loop.close()
    typer.echo("Stopped.")
