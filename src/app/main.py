"""
yearcal App entrypoint.

This module provides the CLI entrypoint to launch the Streamlit UI. It defers
all UI composition to the app.ui package and exists solely to start Streamlit
programmatically or render directly when already running under Streamlit.

Usage:
    - Python execution (hands process to Streamlit):
        python -m app.main --source data/commits.csv --year 2024

    - Streamlit direct:
        streamlit run src/app/main.py -- --source data/commits.csv --year 2024
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path

from app.ui import streamlit_app


def _parser(add_help: bool = True) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="yearcal Streamlit App", add_help=add_help)
    parser.add_argument(
        "--source",
        dest="sources",
        action="append",
        default=[],
        help="Series file to preload (repeatable).",
    )
    parser.add_argument("--year", type=int, default=None, help="Initially selected year.")
    parser.add_argument("--config", default=None, help="Explicit settings TOML path.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Console entrypoint that launches Streamlit with the yearcal UI.

    If already executing within a Streamlit server (environment variable
    STREAMLIT_SERVER_PORT is set), this function renders the app directly.
    Otherwise, it execs "python -m streamlit run <this_module>" to leverage
    Streamlit's reloader and argument parsing, passing through any supported
    options after "--".

    Args:
        argv (list[str] | None): Optional list of CLI arguments. If None,
            sys.argv[1:] is used.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    ns = _parser().parse_args(args)

    # If invoked within Streamlit, just render
    if os.environ.get("STREAMLIT_SERVER_PORT"):
        streamlit_app(
            default_sources=list(ns.sources),
            default_year=ns.year,
            default_config=ns.config,
        )
        return

    # Otherwise, exec streamlit run on this module to take over the process
    app_path = Path(__file__).resolve()
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path)]

    passthrough: list[str] = []
    for src in ns.sources:
        passthrough += ["--source", src]
    if ns.year is not None:
        passthrough += ["--year", str(int(ns.year))]
    if ns.config:
        passthrough += ["--config", ns.config]
    if passthrough:
        cmd += ["--"] + passthrough

    try:
        os.execv(sys.executable, cmd)
    except OSError:
        subprocess.run(cmd, check=False)


if __name__ == "__main__":
    # Support: --source, --year, --config after '--' when using `streamlit run`
    try:
        ns, _ = _parser(add_help=False).parse_known_args(sys.argv[1:])
        streamlit_app(
            default_sources=list(ns.sources),
            default_year=ns.year,
            default_config=ns.config,
        )
    except SystemExit:
        # Fallback to no-arg render
        streamlit_app()
