"""Export dashboard as self-contained HTML."""

import logging
from datetime import date, datetime
from html import escape
from pathlib import Path

from commodity_dashboard.config import Settings
from commodity_dashboard.data.loader import load_observations
from commodity_dashboard.indicators.transformer import TimeSeriesTransformer, date_bounds
from commodity_dashboard.models.commodity_data import LatestTrend
from commodity_dashboard.ui.charts import build_chart, format_trend


logger = logging.getLogger(__name__)


def render_trend_rows(trends: list[LatestTrend] | None) -> str:
    """Build the latest-trends panel rows."""
    if not trends:
        return '<div class="trend-empty">Less than one year of data in range</div>'

    rows = []
    for trend in trends:
        value_text, change_text, change_color = format_trend(trend)
        rows.append(f'''
            <div class="trend-row">
                <span style="color: {trend.color}">{escape(trend.name)}:</span>
                <div class="trend-values">
                    <div>{value_text}</div>
                    <div class="trend-change" style="color: {change_color}">{change_text}</div>
                </div>
            </div>
        ''')
    return "".join(rows)


def export_html(
    output_path: Path | str | None = None,
    start: date | str | None = None,
    end: date | str | None = None,
    show_yoy: bool = False,
    settings: Settings | None = None,
) -> Path:
    """
    Generate self-contained HTML dashboard.

    Args:
        output_path: Where to save the HTML file. Defaults to dist/index.html
        start: Inclusive start of the date range
        end: Inclusive end of the date range
        show_yoy: Chart YoY % change instead of index levels

    Returns:
        Path to the generated file
    """
    settings = settings or Settings()
    settings.validate()

    transformer = TimeSeriesTransformer()
    points = transformer.transform(load_observations(settings.data_path))
    filtered = transformer.filter_by_range(points, start, end)

    bounds = date_bounds(filtered)
    if bounds is None:
        raise ValueError("No observations in the selected range")

    fig = build_chart(filtered, show_yoy=show_yoy, transformer=transformer)
    chart_html = fig.to_html(full_html=False, include_plotlyjs="cdn")
    trend_rows = render_trend_rows(transformer.latest_trends(filtered))

    mode = "Year-over-Year Change" if show_yoy else "Index Levels"

    html = f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Bank of Canada Commodity Price Index</title>
    <style>
        body {{
            font-family: 'Inter', -apple-system, sans-serif;
            margin: 0;
            padding: 2rem;
            background: #f9fafb;
            color: #111827;
        }}
        h1 {{ font-size: 1.75rem; margin-bottom: 0.25rem; }}
        .subtitle {{ color: #6b7280; font-size: 0.85rem; margin-bottom: 1.5rem; }}
        .card {{
            background: #ffffff;
            border-radius: 8px;
            box-shadow: 0 1px 3px rgba(0, 0, 0, 0.1);
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .trends {{ max-width: 420px; }}
        .trend-row {{
            display: flex;
            justify-content: space-between;
            align-items: center;
            padding: 0.4rem 0;
        }}
        .trend-values {{ text-align: right; }}
        .trend-change {{ font-size: 0.85rem; }}
        .trend-empty {{ color: #6b7280; }}
    </style>
</head>
<body>
    <h1>Bank of Canada Commodity Price Index</h1>
    <div class="subtitle">
        {mode} | {bounds[0].isoformat()} to {bounds[1].isoformat()} |
        Generated {datetime.now().strftime("%Y-%m-%d %H:%M")}
    </div>
    <div class="card">
        {chart_html}
    </div>
    <div class="card trends">
        <h3>Latest Values &amp; Trends</h3>
        {trend_rows}
    </div>
</body>
</html>
'''

    output_path = Path(output_path or Path("dist") / "index.html")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    logger.info(f"Exported {len(filtered)} observations to {output_path}")
    return output_path


def main() -> None:
    """CLI entry point for HTML export."""
    import argparse
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Export BCPI dashboard as HTML")
    parser.add_argument("--output", type=Path, help="Output file (default dist/index.html)")
    parser.add_argument("--start", type=str, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end", type=str, help="End date (YYYY-MM-DD)")
    parser.add_argument("--yoy", action="store_true", help="Chart year-over-year changes")
    args = parser.parse_args()

    try:
        path = export_html(args.output, args.start, args.end, args.yoy)
    except (OSError, ValueError) as e:
        print(f"Export failed: {e}")
        sys.exit(1)

    print(f"Dashboard exported to {path}")


if __name__ == "__main__":
    main()
