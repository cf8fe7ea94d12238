"""TOML config loading and profiles."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

# Default config search path (project root or cwd)
_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent.parent / "config"
_CWD_CONFIG = Path.cwd() / "config"


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base. Override values take precedence."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _find_config_dir() -> Path:
    if _CWD_CONFIG.exists():
        return _CWD_CONFIG
    return _CONFIG_DIR


def load_config(profile: str | None = None, config_dir: Path | None = None) -> dict[str, Any]:
    """Load merged config from default.toml and optional profile overlay."""
    config_dir = config_dir or _find_config_dir()
    default_path = config_dir / "default.toml"
    base = _load_toml(default_path) if default_path.exists() else {}
    if profile:
        profile_path = config_dir / f"{profile}.toml"
        if profile_path.exists():
            overlay = _load_toml(profile_path)
            base = _deep_merge(base, overlay)
    return base


def get_settings(profile: str | None = None, config_dir: Path | None = None) -> Settings:
    """Return Settings instance from merged config."""
    raw = load_config(profile, config_dir)
    return Settings.from_dict(raw)


class Settings:
    """Application settings from TOML config."""

    def __init__(
        self,
        *,
        runtime: dict[str, Any] | None = None,
        feed: dict[str, Any] | None = None,
        http: dict[str, Any] | None = None,
        polymarket: dict[str, Any] | None = None,
        poll: dict[str, Any] | None = None,
        display: dict[str, Any] | None = None,
        logging: dict[str, Any] | None = None,
    ):
        self.runtime = runtime or {}
        self.feed = feed or {}
        self.http = http or {}
        self.polymarket = polymarket or {}
        self.poll = poll or {}
        self.display = display or {}
        self.logging = logging or {}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Settings:
        return cls(
            runtime=raw.get("runtime"),
            feed=raw.get("feed"),
            http=raw.get("http"),
            polymarket=raw.get("polymarket"),
            poll=raw.get("poll"),
            display=raw.get("display"),
            logging=raw.get("logging"),
        )

    # Convenience accessors with defaults
    @property
    def offline(self) -> bool:
        return bool(self.runtime.get("offline", False))

    @property
    def feed_url(self) -> str:
        return self.feed.get("url", "https://vlrggapi.vercel.app/v2/match?q=live_score")

    @property
    def http_timeout_sec(self) -> float:
        return float(self.http.get("timeout_sec", 10.0))

    @property
    def user_agent(self) -> str:
        return self.http.get("user_agent", "valbar/0.1.0")

    @property
    def gamma_api_base(self) -> str:
        return self.polymarket.get("gamma_api_base", "https://gamma-api.polymarket.com")

    @property
    def market_base_url(self) -> str:
        return self.polymarket.get("market_base_url", "https://polymarket.com")

    @property
    def fallback_base_url(self) -> str:
        return self.polymarket.get(
            "fallback_base_url", "https://polymarket.com/sports/valorant/games/week/1"
        )

    @property
    def search_limit(self) -> int:
        return int(self.polymarket.get("search_limit", 10))

    @property
    def poll_interval_sec(self) -> float:
        return float(self.poll.get("interval_sec", 30.0))

    @property
    def display_prefix(self) -> str:
        return self.display.get("prefix", "Valorant")

    @property
    def logging_level(self) -> str:
        return self.logging.get("level", "INFO").upper()

    @property
    def logging_format(self) -> str:
        return self.logging.get("format", "console")

    @property
    def logging_level_num(self) -> int:
        return getattr(logging, self.logging_level, logging.INFO)


def configure_logging(settings: Settings) -> None:
    """Configure structlog with settings. Call once at application entry."""
    import structlog

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.logging_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.logging_level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
