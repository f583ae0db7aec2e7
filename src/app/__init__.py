"""
Top-level Streamlit app package.

This package hosts the interactive yearcal app (Streamlit) decoupled from the yearcal.*
library modules. The calendar scene, SVG serialization and the navigation contract live
under yearcal.viz; the Streamlit shell that owns the view state lives here.

CLI entrypoint (configured in pyproject.toml):
    yearcal-app = app.main:main
"""

from __future__ import annotations
