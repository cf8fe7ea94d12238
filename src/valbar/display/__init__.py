"""Match summary text and the shared display sink."""

from valbar.display.sink import DisplaySink, DisplaySummary
from valbar.display.summary import LIVE, UNKNOWN_MAP, summarize

__all__ = ["DisplaySink", "DisplaySummary", "summarize", "LIVE", "UNKNOWN_MAP"]
