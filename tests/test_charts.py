"""Tests for chart building and HTML export."""

import pytest

from commodity_dashboard.data.loader import parse_observations
from commodity_dashboard.indicators import transform
from commodity_dashboard.models import LatestTrend, Series
from commodity_dashboard.ui.charts import YOY_RANGE, build_chart, format_trend
from commodity_dashboard.ui.html_exporter import export_html, render_trend_rows


def test_chart_draws_every_charted_series(two_year_document):
    fig = build_chart(transform(parse_observations(two_year_document)))

    assert [trace.name for trace in fig.data] == [
        "Total Index",
        "Energy",
        "Metals & Minerals",
        "Agriculture",
        "Forestry",
        "Fish",
    ]


def test_chart_respects_selection_and_yoy(two_year_document):
    points = transform(parse_observations(two_year_document))
    fig = build_chart(points, [Series.FISH, Series.ENERGY], show_yoy=True)

    assert [trace.name for trace in fig.data] == ["Energy YoY %", "Fish YoY %"]
    assert list(fig.layout.yaxis.range) == YOY_RANGE
    assert fig.layout.yaxis.title.text == "% Change YoY"


def test_chart_with_no_points():
    fig = build_chart([])

    assert len(fig.data) == 6


def test_format_trend():
    up = LatestTrend(Series.ENERGY, "Energy", "#82ca9d", 512.3456, 3.456)
    flat = LatestTrend(Series.FISH, "Fish", "#FFBB28", 90.0, 0.0)

    assert format_trend(up)[:2] == ("512.35", "↑ 3.5% YoY")
    assert format_trend(flat)[1] == "↓ 0.0% YoY"


def test_export_html(settings, data_file, tmp_path):
    output = tmp_path / "dist" / "index.html"

    path = export_html(output, start="1973-06-01", show_yoy=True, settings=settings)

    html = path.read_text(encoding="utf-8")
    assert path == output
    assert "Bank of Canada Commodity Price Index" in html
    assert "Year-over-Year Change" in html
    assert "Less than one year of data in range" in html


def test_export_html_full_range_has_trends(settings, data_file, tmp_path):
    html = export_html(tmp_path / "index.html", settings=settings).read_text(encoding="utf-8")

    assert "Metals &amp; Minerals:" in html
    assert "% YoY" in html


def test_export_html_empty_range(settings, data_file, tmp_path):
    with pytest.raises(ValueError):
        export_html(tmp_path / "index.html", start="2100-01-01", settings=settings)


def test_export_html_requires_data(settings, tmp_path):
    with pytest.raises(ValueError):
        export_html(tmp_path / "index.html", settings=settings)


def test_trend_rows_escape_names():
    trend = LatestTrend(Series.METALS, "Metals & <Minerals>", "#ffc658", 101.0, 2.0)

    rows = render_trend_rows([trend])

    assert "Metals &amp; &lt;Minerals&gt;:" in rows
    assert "↑ 2.0% YoY" in rows


def test_trend_rows_without_trends():
    assert "Less than one year of data in range" in render_trend_rows(None)
