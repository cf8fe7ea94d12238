"""Valbar - live Valorant match summaries with Polymarket odds."""

__version__ = "0.1.0"
