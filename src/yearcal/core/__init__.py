"""
Core package aggregator for yearcal contracts (constants, schemas, errors, typing, hashing).

## Contracts (single source of truth)
- Constants: chart geometry, neutral color, default color configuration.
- Schemas: DailyRecord, YearGroup, RenderConfig, ViewState (pydantic v2).
- Typing: DataSource protocol and NavigateCallback alias.
- Hashing: canonical JSON and SHA-256 helpers.
- Errors: ColorScaleError, NavigationError.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.

## Downstream usage
- yearcal.io: builds RenderConfig/ViewState from settings and implements DataSource.
- yearcal.viz: consumes DailyRecord/YearGroup and the geometry constants.

## Examples
```python
from datetime import date
from yearcal.core.schema import DailyRecord, RenderConfig, ViewState
cfg = RenderConfig(color_domain=(0, 10), color_palette=["#9be9a8", "#216e39"], title="Commits")
view = ViewState(selected_year=2024)
DailyRecord(date=date(2024, 1, 1), value=3.0)
```
"""
