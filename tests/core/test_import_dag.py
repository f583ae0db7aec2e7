from __future__ import annotations

import ast
from pathlib import Path

SRC = Path(__file__).resolve().parents[2] / "src" / "yearcal"


def _imported_modules(py: Path) -> set[str]:
    tree = ast.parse(py.read_text(encoding="utf-8"))
    out: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            out.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            out.add(node.module)
    return out


def _violations(pkg: str, forbidden: tuple[str, ...]) -> list[str]:
    bad: list[str] = []
    for py in sorted((SRC / pkg).rglob("*.py")):
        for mod in _imported_modules(py):
            if any(mod == f or mod.startswith(f + ".") for f in forbidden):
                bad.append(f"{py.name}: {mod}")
    return bad


def test_core_is_zero_io() -> None:
    assert SRC.exists(), "src/yearcal directory must exist"
    assert _violations("core", ("polars", "altair", "streamlit", "yearcal.io", "yearcal.viz")) == []


def test_io_does_not_import_viz_or_app() -> None:
    assert _violations("io", ("yearcal.viz", "app", "streamlit", "altair")) == []


def test_viz_does_not_import_io_or_app() -> None:
    assert _violations("viz", ("yearcal.io", "app", "streamlit")) == []
