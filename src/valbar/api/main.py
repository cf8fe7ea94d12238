"""FastAPI backend for the menubar UI - matches, odds, and the current summary."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from valbar.api.schemas import ErrorResponse, HealthResponse, SummaryResponse
from valbar.config import get_settings
from valbar.display.sink import DisplaySink
from valbar.errors import RequestError
from valbar.facade import RequestFacade
from valbar.ingestion.base import create_match_feed
from valbar.ingestion.poller import PollLoop
from valbar.models import MatchSegment, OddsResult

# Set by run_api() so lifespan can start the poll loop in the same process.
_run_with_poller = False
_config_profile: str | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings(_config_profile)
    app.state.sink = DisplaySink(prefix=settings.display_prefix)
    app.state.facade = RequestFacade.from_settings(settings)
    app.state.poller = None

    poll_task = None
    poll_stop = None
    if _run_with_poller:
        poller = PollLoop(create_match_feed(settings), app.state.sink, interval_sec=settings.poll_interval_sec)
        app.state.poller = poller
        poll_stop = asyncio.Event()
        poll_task = asyncio.create_task(poller.run(stop_event=poll_stop))

    yield

    if poll_task is not None and poll_stop is not None:
        poll_stop.set()
        await poll_task


app = FastAPI(title="Valbar API", version="0.1.0", lifespan=lifespan)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


def get_facade(request: Request) -> RequestFacade:
    return request.app.state.facade


def get_sink(request: Request) -> DisplaySink:
    return request.app.state.sink


def _error_json(code: str, message: str, status_code: int = 502) -> JSONResponse:
    """Return consistent error JSON: { detail, code }."""
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code},
    )


@app.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    poller = getattr(request.app.state, "poller", None)
    return HealthResponse(status="ok", poller=poller.get_status() if poller is not None else None)


@app.get(
    "/matches",
    response_model=list[MatchSegment],
    responses={502: {"model": ErrorResponse}},
)
async def matches(facade: RequestFacade = Depends(get_facade)):
    """Fetch live matches now, independent of the poll cadence."""
    try:
        return await facade.get_live_matches()
    except RequestError as e:
        return _error_json(e.code, e.message)


@app.get("/odds", response_model=OddsResult)
async def odds(
    team1: str = Query(..., min_length=1),
    team2: str = Query(..., min_length=1),
    facade: RequestFacade = Depends(get_facade),
) -> OddsResult:
    """Polymarket odds for a pairing; always carries a market_url."""
    return await facade.get_odds(team1, team2)


@app.get("/summary", response_model=SummaryResponse)
def summary(sink: DisplaySink = Depends(get_sink)) -> SummaryResponse:
    current = sink.current()
    return SummaryResponse(
        text=current.text if current else None,
        updated_at=current.updated_at if current else None,
        label=sink.label(),
    )


def run_api(
    host: str = "127.0.0.1",
    port: int = 8000,
    with_poller: bool = True,
    profile: str | None = None,
) -> None:
    global _run_with_poller, _config_profile
    _run_with_poller = with_poller
    _config_profile = profile
    import uvicorn
    uvicorn.run("valbar.api.main:app", host=host, port=port, reload=False)
