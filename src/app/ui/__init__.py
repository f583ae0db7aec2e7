"""
yearcal App UI package.

Modules:
    - app: Streamlit application orchestrator (streamlit_app).
    - helpers: Small pure helpers (KPIs).

Usage:
    from app.ui import streamlit_app
    streamlit_app(default_sources=["data/commits.csv"], default_year=2024)
"""

from __future__ import annotations

from .app import streamlit_app

__all__ = [
    "streamlit_app",
]
