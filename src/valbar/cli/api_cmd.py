"""API server command."""

import typer

from valbar.api.main import run_api

app = typer.Typer(help="Start API server for the menubar UI")


@app.callback(invoke_without_command=True)
def api(
    ctx: typer.Context,
    host: str = typer.Option("127.0.0.1", "--host", help="Bind host"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
    with_poller: bool = typer.Option(
        True, "--with-poller/--no-poller", help="Run the summary poll loop in the same process",
    ),
) -> None:
    if ctx.invoked_subcommand is not None:
        return
    run_api(host=host, port=port, with_poller=with_poller, profile=ctx.obj["profile"])
