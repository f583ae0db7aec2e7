from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import polars as pl
import streamlit as st

from yearcal.io import FrameSource, load_frame

__all__ = [
    "CacheConfig",
    "load_series",
    "load_frame_sources",
]

# ---------- Cache configuration (factory of cached callables) ----------


@dataclass(frozen=True)
class CacheConfig:
    """Hashable cache configuration for Streamlit @st.cache_data.

    Note: Streamlit's decorator parameters (ttl, persist) are fixed at decoration
    time. We build and memoize decorated callables per (name, ttl, persist) so the
    app can switch these at runtime while still benefiting from caching.
    """

    ttl: int | None = None
    persist: bool = False


# Registry of decorated functions by (loader_name, CacheConfig)
_CACHE_REGISTRY: dict[tuple[str, CacheConfig], Callable[..., Any]] = {}


def _get_cached(loader_name: str, cfg: CacheConfig, fn: Callable[..., Any]) -> Callable[..., Any]:
    key = (loader_name, cfg)
    if key in _CACHE_REGISTRY:
        return _CACHE_REGISTRY[key]
    if cfg.persist:
        wrapped = st.cache_data(persist="disk", ttl=cfg.ttl)(fn)
    else:
        wrapped = st.cache_data(ttl=cfg.ttl)(fn)
    _CACHE_REGISTRY[key] = wrapped
    return wrapped


# ---------- Loaders ----------


def _load_series_impl(path: str) -> pl.DataFrame:
    return load_frame(path)


def load_series(path: str, *, cfg: CacheConfig | None = None) -> pl.DataFrame:
    """Read one series file through a cached loader.

    Raises:
        yearcal.io.errors.SourceError: If the file is missing or unsupported.
    """
    cfg = cfg or CacheConfig()
    return _get_cached("series", cfg, _load_series_impl)(path)


def load_frame_sources(
    paths: list[str],
    *,
    date_column: str,
    value_column: str,
    cfg: CacheConfig | None = None,
) -> list[FrameSource]:
    """Cached frames wrapped as data sources (the wrapping itself is cheap and not cached)."""
    return [
        FrameSource(
            load_series(p, cfg=cfg),
            date_column=date_column,
            value_column=value_column,
            name=p,
        )
        for p in paths
    ]
