from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from yearcal.core.schema import ViewState
from yearcal.io import CalendarSettings, load_sources
from yearcal.io.errors import IoError
from yearcal.viz import Canvas, aggregate_year, records_frame, render_year, save_svg

logger = logging.getLogger(__name__)


def _year(text: str) -> int:
    year = int(text)
    if not date.min.year <= year <= date.max.year:
        raise argparse.ArgumentTypeError(f"year must be within 1..9999, got {year}")
    return year


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--source",
        dest="sources",
        action="append",
        default=[],
        help="Series file (csv/parquet/json/ndjson); repeat to sum several sources.",
    )
    p.add_argument("--year", type=_year, default=None, help="Selected year (default: settings).")
    p.add_argument("--config", type=str, default=None, help="Explicit settings TOML path.")
    p.add_argument("--log-level", type=str, default="WARNING", help="Logging level.")


def _settings(args: argparse.Namespace) -> CalendarSettings:
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return CalendarSettings.load(args.config)


def _view(args: argparse.Namespace, settings: CalendarSettings) -> ViewState:
    if args.year is not None:
        return ViewState(selected_year=args.year)
    return settings.initial_view()


def _cmd_render(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="yearcal render", description="Render a year calendar as SVG.")
    _add_common(p)
    p.add_argument("--title", type=str, default=None, help="Chart title (overrides settings).")
    p.add_argument("--out", type=str, default="", help="Output SVG path (default: stdout).")
    args = p.parse_args(argv)

    settings = _settings(args)
    config = settings.to_render_config()
    if args.title is not None:
        config = config.model_copy(update={"title": args.title})

    try:
        sources = load_sources(
            args.sources, date_column=settings.date_column, value_column=settings.value_column
        )
    except IoError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    logger.debug("loaded %d source(s) for render", len(sources))

    canvas = Canvas()
    render_year(canvas, sources, config, _view(args, settings))
    if canvas.drawable is None:
        print("[ERROR] nothing rendered", file=sys.stderr)
        return 1

    if args.out:
        path = save_svg(canvas.drawable, Path(args.out))
        print(f"[INFO] Wrote calendar to {path}")
    else:
        sys.stdout.write(canvas.to_svg() + "\n")
    return 0


def _cmd_show(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="yearcal show", description="Print aggregated daily values.")
    _add_common(p)
    p.add_argument("--n", type=int, default=10, help="Rows to display.")
    args = p.parse_args(argv)

    settings = _settings(args)
    try:
        sources = load_sources(
            args.sources, date_column=settings.date_column, value_column=settings.value_column
        )
    except IoError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    view = _view(args, settings)
    df = records_frame(aggregate_year(view.selected_year, sources))
    print(df.drop_nulls("value").head(args.n))
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="yearcal", description="Year calendar heatmap utilities.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("render")
    sub.add_parser("show")
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    if cmd == "render":
        code = _cmd_render(rest)
    elif cmd == "show":
        code = _cmd_show(rest)
    else:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        code = 2
    raise SystemExit(code)


if __name__ == "__main__":
    main()
