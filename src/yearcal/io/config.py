"""
Configuration for yearcal.

Defines CalendarSettings, a frozen dataclass carrying the render configuration (title and
color scale), the initial selected year, and the column names used when reading series files.
Defaults are sourced from yearcal.core.constants.

Precedence
- environment (YEARCAL_*) > TOML (yearcal.toml or [tool.yearcal] in pyproject.toml) > defaults

Import DAG discipline
- Depends only on stdlib and yearcal.core.

Notes
- Values that cannot be parsed are ignored and the previous layer's value is kept.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from yearcal.core.constants import DEFAULT_COLOR_DOMAIN, DEFAULT_COLOR_PALETTE
from yearcal.core.schema import RenderConfig, ViewState

logger = logging.getLogger(__name__)


def _split_csv(v: Any) -> list[str]:
    if isinstance(v, str):
        return [p.strip() for p in v.split(",") if p.strip()]
    if isinstance(v, (list, tuple)):
        return [str(p).strip() for p in v if str(p).strip()]
    return []


@dataclass(frozen=True)
class CalendarSettings:
    """
    Runtime settings for yearcal.

    Attributes:
        title (str): Static chart title drawn in every year strip.
        color_domain (tuple[float, float]): [min, max] input domain of the quantize scale.
        color_palette (tuple[str, ...]): Output colors of the quantize scale, low to high.
        initial_year (int | None): Year selected on first render (None = current UTC year).
        date_column (str): Date column name in series files.
        value_column (str): Value column name in series files.

    Examples:
        >>> from yearcal.io import CalendarSettings
        >>> CalendarSettings(title="Commits").to_render_config().title
        'Commits'
    """

    title: str = ""
    color_domain: tuple[float, float] = DEFAULT_COLOR_DOMAIN
    color_palette: tuple[str, ...] = DEFAULT_COLOR_PALETTE
    initial_year: int | None = None
    date_column: str = "date"
    value_column: str = "value"

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: CalendarSettings, cfg: dict[str, Any] | None) -> CalendarSettings:
        """Apply a loose config mapping onto CalendarSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "title" in cfg and isinstance(cfg["title"], str):
            s = replace(s, title=cfg["title"])

        # color_domain: [min, max] list or "min,max" string
        if "color_domain" in cfg:
            parts = _split_csv(cfg["color_domain"])
            if len(parts) == 2:
                try:
                    s = replace(s, color_domain=(float(parts[0]), float(parts[1])))
                except ValueError:
                    pass

        if "color_palette" in cfg:
            colors = _split_csv(cfg["color_palette"])
            if colors:
                s = replace(s, color_palette=tuple(colors))

        if "initial_year" in cfg:
            try:
                s = replace(s, initial_year=int(cfg["initial_year"]))
            except (TypeError, ValueError):
                pass

        if "date_column" in cfg and isinstance(cfg["date_column"], str):
            s = replace(s, date_column=cfg["date_column"])
        if "value_column" in cfg and isinstance(cfg["value_column"], str):
            s = replace(s, value_column=cfg["value_column"])

        return s

    @classmethod
    def from_env(
        cls, base: CalendarSettings | None = None, prefix: str = "YEARCAL_"
    ) -> CalendarSettings:
        """
        Build CalendarSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - YEARCAL_TITLE
            - YEARCAL_COLOR_DOMAIN ("min,max")
            - YEARCAL_COLOR_PALETTE (comma separated colors)
            - YEARCAL_INITIAL_YEAR
            - YEARCAL_DATE_COLUMN
            - YEARCAL_VALUE_COLUMN
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in (
            "title",
            "color_domain",
            "color_palette",
            "initial_year",
            "date_column",
            "value_column",
        ):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> CalendarSettings:
        """
        Build CalendarSettings from a TOML file.

        Search order when `path` is None:
            1) ./yearcal.toml (with either a [calendar] table or direct keys)
            2) ./pyproject.toml under [tool.yearcal]

        Returns defaults if no file is present.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning("ignoring unreadable settings file %s: %s", p, e)
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "yearcal.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("yearcal") if isinstance(tool, dict) else None
            elif isinstance(data.get("calendar"), dict):
                cfg = data["calendar"]
            else:
                cfg = data
            if cfg:
                logger.debug("loaded settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> CalendarSettings:
        """
        Load CalendarSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search yearcal.toml then pyproject.toml.

        Returns:
            CalendarSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s

    def to_render_config(self) -> RenderConfig:
        """Validated render configuration (raises pydantic.ValidationError when malformed)."""
        return RenderConfig(
            color_domain=self.color_domain,
            color_palette=self.color_palette,
            title=self.title,
        )

    def initial_view(self) -> ViewState:
        """View state for the first render; falls back to the current UTC year."""
        year = self.initial_year if self.initial_year is not None else datetime.now(tz=UTC).year
        return ViewState(selected_year=year)
