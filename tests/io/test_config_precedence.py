from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from yearcal.core.constants import DEFAULT_COLOR_DOMAIN, DEFAULT_COLOR_PALETTE
from yearcal.io.config import CalendarSettings

_ENV_KEYS = [
    "YEARCAL_TITLE",
    "YEARCAL_COLOR_DOMAIN",
    "YEARCAL_COLOR_PALETTE",
    "YEARCAL_INITIAL_YEAR",
    "YEARCAL_DATE_COLUMN",
    "YEARCAL_VALUE_COLUMN",
]


def _write_yearcal_toml(tmp: Path, content: str) -> Path:
    p = tmp / "yearcal.toml"
    p.write_text(content)
    return p


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    # Arrange TOML
    _write_yearcal_toml(
        tmp_path,
        """
        [calendar]
        title = "From TOML"
        color_domain = [0, 4]
        initial_year = 2021
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    # Arrange ENV that should override TOML
    monkeypatch.setenv("YEARCAL_TITLE", "From env")
    monkeypatch.setenv("YEARCAL_INITIAL_YEAR", "2024")

    # Act
    s = CalendarSettings.load()

    # Assert precedence: env > TOML
    assert s.title == "From env"
    assert s.initial_year == 2024
    assert s.color_domain == (0.0, 4.0)  # TOML only


def test_settings_from_toml_when_no_env(tmp_path: Path, monkeypatch) -> None:
    _write_yearcal_toml(
        tmp_path,
        """
        title = "Top-level keys"
        color_palette = ["#eee", "#333", "#000"]
        date_column = "day"
        value_column = "count"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = CalendarSettings.load()

    assert s.title == "Top-level keys"
    assert s.color_palette == ("#eee", "#333", "#000")
    assert s.date_column == "day"
    assert s.value_column == "count"


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
        [project]
        name = "demo"

        [tool.yearcal]
        title = "Commits"
        color_domain = "1,5"
        """.strip()
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = CalendarSettings.load()

    assert s.title == "Commits"
    assert s.color_domain == (1.0, 5.0)


def test_settings_env_lists_and_unparseable_values_fall_back(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    monkeypatch.setenv("YEARCAL_COLOR_PALETTE", "#a, #b")
    monkeypatch.setenv("YEARCAL_COLOR_DOMAIN", "zero,ten")
    monkeypatch.setenv("YEARCAL_INITIAL_YEAR", "soon")

    s = CalendarSettings.load()

    assert s.color_palette == ("#a", "#b")
    assert s.color_domain == DEFAULT_COLOR_DOMAIN
    assert s.initial_year is None


def test_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = CalendarSettings.load()

    assert s.title == ""
    assert s.color_palette == DEFAULT_COLOR_PALETTE
    assert s.initial_view().selected_year == datetime.now(tz=UTC).year


def test_settings_explicit_path_and_render_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    cfg_path = tmp_path / "elsewhere.toml"
    cfg_path.write_text('[calendar]\ntitle = "Explicit"\ninitial_year = 2019\n')

    s = CalendarSettings.load(cfg_path)
    cfg = s.to_render_config()

    assert cfg.title == "Explicit"
    assert cfg.color_palette == DEFAULT_COLOR_PALETTE
    assert s.initial_view().selected_year == 2019
