"""
yearcal.io: Settings and data sources.

## Responsibilities
- Load CalendarSettings with precedence env > TOML > defaults.
- Provide DataSource implementations over mappings and polars DataFrames.
- Read CSV/Parquet/JSON series files via polars.

## Public API
- CalendarSettings: configuration (title, color domain/palette, initial year, column names).
- MappingSource, FrameSource: DataSource implementations.
- load_frame, load_sources: file loaders.

## Import DAG discipline
- Depends only on stdlib, polars and yearcal.core.
- MUST NOT import yearcal.viz.
"""

from __future__ import annotations

from .config import CalendarSettings
from .sources import FrameSource, MappingSource, load_frame, load_sources

__all__ = [
    "CalendarSettings",
    "FrameSource",
    "MappingSource",
    "load_frame",
    "load_sources",
]
