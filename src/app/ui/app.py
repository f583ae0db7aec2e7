"""
Streamlit application orchestrator for yearcal.

Responsibilities:
    - Configure the Streamlit page and sidebar (sources, title).
    - Own the ViewState across reruns (st.session_state) and the Canvas the calendar mounts into.
    - Dispatch the previous/next buttons to the scene's navigation glyphs.
    - Mount tab content (Calendar SVG, Interactive Altair chart, Data).

Notes:
    - The calendar is built by yearcal.viz; this module only hosts it.
    - All functions include Google-style docstrings.
"""

from __future__ import annotations

import streamlit as st

from app.data import load_frame_sources
from yearcal.core.errors import NavigationError
from yearcal.io import CalendarSettings
from yearcal.io.errors import SourceError
from yearcal.viz import Canvas, YearCalendar, records_frame
from yearcal.viz.altair_view import calendar_chart

from .helpers import compute_year_kpis

_VIEW_KEY = "yearcal_view"
_CANVAS_KEY = "yearcal_canvas"


def _activate(calendar: YearCalendar, css_class: str) -> None:
    glyph = calendar.glyph(css_class)
    if glyph is None:
        return
    try:
        glyph.activate()
    except NavigationError as e:
        st.warning(str(e))


def streamlit_app(
    default_sources: list[str] | None = None,
    default_year: int | None = None,
    default_config: str | None = None,
) -> None:
    """Render the yearcal Streamlit application.

    Args:
        default_sources (list[str] | None): Series files preloaded into the sidebar.
        default_year (int | None): Year selected on first load (default: settings).
        default_config (str | None): Explicit settings TOML path.

    Returns:
        None
    """
    st.set_page_config(page_title="yearcal", layout="wide")
    settings = CalendarSettings.load(default_config)

    with st.sidebar:
        st.markdown("### yearcal")
        raw_paths = st.text_area(
            "Series files (one per line)",
            value="\n".join(default_sources or []),
            help="CSV/Parquet/JSON files with date and value columns; values are summed per day.",
        )
        title = st.text_input("Title", value=settings.title)

    paths = [p.strip() for p in raw_paths.splitlines() if p.strip()]
    try:
        sources = load_frame_sources(
            paths, date_column=settings.date_column, value_column=settings.value_column
        )
    except SourceError as e:
        st.error(str(e))
        return

    config = settings.to_render_config().model_copy(update={"title": title})
    if _VIEW_KEY not in st.session_state:
        view = settings.initial_view()
        if default_year is not None:
            view.selected_year = default_year
        st.session_state[_VIEW_KEY] = view
    if _CANVAS_KEY not in st.session_state:
        st.session_state[_CANVAS_KEY] = Canvas()

    calendar = YearCalendar(
        st.session_state[_CANVAS_KEY], sources, config, st.session_state[_VIEW_KEY]
    )
    calendar.render()

    c_prev, c_year, c_next = st.columns([1, 2, 1])
    with c_prev:
        if st.button("< Previous year", use_container_width=True):
            _activate(calendar, "nav-prev")
    with c_next:
        if st.button("Next year >", use_container_width=True):
            _activate(calendar, "nav-next")
    year = calendar.view.selected_year
    with c_year:
        st.markdown(f"#### {year}")

    records = calendar.records
    df = records_frame(records)
    kpi = compute_year_kpis(df)
    k1, k2, k3 = st.columns(3)
    with k1:
        st.metric("Days with data", f"{int(kpi['days_with_data'])}")
    with k2:
        st.metric("Total", f"{kpi['total']:.1f}")
    with k3:
        st.metric("Max", f"{kpi['max']:.1f}")

    tab_cal, tab_interactive, tab_data = st.tabs(["Calendar", "Interactive", "Data"])
    with tab_cal:
        st.markdown(calendar.canvas.to_svg(), unsafe_allow_html=True)
    with tab_interactive:
        st.altair_chart(calendar_chart(records, config), use_container_width=True)
    with tab_data:
        st.dataframe(df, use_container_width=True)
