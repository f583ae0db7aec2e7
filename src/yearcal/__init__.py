"""
yearcal: Year-by-year calendar heatmaps.

## Responsibilities
- Aggregate per-day values from any number of data sources for a selected year.
- Lay the days out as a Monday-aligned week grid, one strip per year, newest first.
- Build an immutable scene graph (cells, labels, month separators, navigation glyphs) and
  mount it into a host container, replacing the previous one.

## Layers
- core: constants, schemas, typing, hashing, errors (zero-IO).
- io: settings (env > TOML > defaults) and polars-backed data sources.
- viz: aggregation, grouping, layout, color scale, scene, SVG and Altair renditions, host glue.
- cli: `yearcal render` and `yearcal show` command line.

## Import DAG discipline
- core imports nothing from yearcal.
- io depends on core.
- viz depends on core only; data sources reach it through the DataSource protocol.
"""

__version__ = "0.1.0"
