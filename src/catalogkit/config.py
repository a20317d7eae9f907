"""Runtime configuration helpers for catalogkit."""

from __future__ import annotations
from functools import lru_cache
from typing import Literal, cast
from dynaconf import Dynaconf


DuplicatePolicy = Literal["reject", "last_write_wins"]
"""Supported policies for duplicate codes during catalog construction."""

LogFormat = Literal["text", "json"]
"""Supported log output formats."""

_DEFAULTS: dict[str, object] = {
    "DUPLICATE_POLICY": "reject",
    "QUERY_MAX_RANK": 22,
    "LOG_LEVEL": "INFO",
    "LOG_FORMAT": "text",
}

DUPLICATE_POLICIES = frozenset({"reject", "last_write_wins"})
LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def _build_loader() -> Dynaconf:
    """Create a Dynaconf loader wired to environment variables only."""
    return Dynaconf(
        envvar_prefix="CATALOGKIT",
        settings_files=[],
        load_dotenv=True,
        environments=False,
    )


def _normalize_settings(source: Dynaconf) -> Dynaconf:
    """Validate and fill defaults on the raw Dynaconf settings."""
    policy_raw = source.get("DUPLICATE_POLICY", _DEFAULTS["DUPLICATE_POLICY"])
    if policy_raw is None:
        policy = str(_DEFAULTS["DUPLICATE_POLICY"])
    else:
        policy = str(policy_raw).strip().lower()
    if policy not in DUPLICATE_POLICIES:
        msg = (
            "CATALOGKIT_DUPLICATE_POLICY must be either 'reject' or "
            "'last_write_wins'."
        )
        raise ValueError(msg)

    normalized = Dynaconf(
        envvar_prefix="CATALOGKIT",
        settings_files=[],
        load_dotenv=False,
        environments=False,
    )
    normalized.set("DUPLICATE_POLICY", cast(DuplicatePolicy, policy))

    max_rank_raw = source.get("QUERY_MAX_RANK", _DEFAULTS["QUERY_MAX_RANK"])
    try:
        max_rank = int(max_rank_raw)
    except (TypeError, ValueError) as exc:
        msg = "CATALOGKIT_QUERY_MAX_RANK must be an integer."
        raise ValueError(msg) from exc
    normalized.set("QUERY_MAX_RANK", max_rank)

    level = str(source.get("LOG_LEVEL") or _DEFAULTS["LOG_LEVEL"]).upper()
    if level not in LOG_LEVELS:
        msg = f"CATALOGKIT_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}."
        raise ValueError(msg)
    normalized.set("LOG_LEVEL", level)

    log_format = str(source.get("LOG_FORMAT") or _DEFAULTS["LOG_FORMAT"]).lower()
    if log_format not in {"text", "json"}:
        msg = "CATALOGKIT_LOG_FORMAT must be either 'text' or 'json'."
        raise ValueError(msg)
    normalized.set("LOG_FORMAT", cast(LogFormat, log_format))

    return normalized


@lru_cache(maxsize=1)
def _load_settings() -> Dynaconf:
    """Load settings once and cache the normalized Dynaconf instance."""
    return _normalize_settings(_build_loader())


def get_settings(*, refresh: bool = False) -> Dynaconf:
    """Return the cached Dynaconf settings, reloading them if requested."""
    if refresh:
        _load_settings.cache_clear()
    return _load_settings()


__all__ = [
    "DUPLICATE_POLICIES",
    "LOG_LEVELS",
    "DuplicatePolicy",
    "LogFormat",
    "get_settings",
]
