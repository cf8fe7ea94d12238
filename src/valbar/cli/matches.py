"""Matches subcommand: live, odds."""

from __future__ import annotations

import asyncio

import typer

from valbar.display.summary import summarize
from valbar.errors import RequestError
from valbar.facade import RequestFacade

app = typer.Typer(help="Fetch live matches and market odds on demand")


def _fmt_odds(value: float | None) -> str:
    return f"{value * 100:.0f}%" if value is not None else "-"


@app.command("live")
def live(ctx: typer.Context) -> None:
    """Fetch the live score feed once and print one line per match."""
    facade = RequestFacade.from_settings(ctx.obj["settings"])
    try:
        segments = asyncio.run(facade.get_live_matches())
    except RequestError as e:
        typer.echo(e.message, err=True)
        raise typer.Exit(1)
    for seg in segments:
        event = f"  [{seg.match_event}]" if seg.match_event else ""
        typer.echo(f"  {summarize(seg)}{event}")
    typer.echo(f"Total: {len(segments)} matches")


@app.command("odds")
def odds(
    ctx: typer.Context,
    team1: str = typer.Argument(..., help="First team, e.g. 'Sentinels'"),
    team2: str = typer.Argument(..., help="Second team, e.g. '100 Thieves'"),
) -> None:
    """Look up Polymarket odds for a pairing."""
    facade = RequestFacade.from_settings(ctx.obj["settings"])
    result = asyncio.run(facade.get_odds(team1, team2))
    typer.echo(f"{team1}: {_fmt_odds(result.team1_odds)}  {team2}: {_fmt_odds(result.team2_odds)}")
    if not result.found:
        typer.echo("No matching market found.")
    typer.echo(result.market_url)
