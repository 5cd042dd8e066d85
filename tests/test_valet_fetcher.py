"""Tests for the Valet API fetcher."""

import json

import httpx
import pytest

from commodity_dashboard.data.valet_fetcher import ValetFetcher


def make_fetcher(settings, handler) -> ValetFetcher:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return ValetFetcher(settings, client=client)


def test_fetch_group_requests_bcpi_weekly(settings, two_year_document):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=two_year_document)

    with make_fetcher(settings, handler) as fetcher:
        document = fetcher.fetch_group()

    assert document == two_year_document
    assert seen[0].url.path == "/valet/observations/group/BCPI_WEEKLY/json"
    assert seen[0].url.params["start_date"] == "1972-01-01"


def test_refresh_writes_data_file(settings, two_year_document):
    def handler(request):
        return httpx.Response(200, json=two_year_document)

    with make_fetcher(settings, handler) as fetcher:
        path = fetcher.refresh()
        status = fetcher.get_status()

    assert path == settings.data_path
    assert json.loads(path.read_text(encoding="utf-8")) == two_year_document
    assert status["observation_count"] == 104
    assert status["first_date"] == "1972-01-07"


def test_refresh_to_custom_output(settings, two_year_document, tmp_path):
    def handler(request):
        return httpx.Response(200, json=two_year_document)

    output = tmp_path / "nested" / "bcpi.json"
    with make_fetcher(settings, handler) as fetcher:
        path = fetcher.refresh(start_date="1990-01-05", output=output)

    assert path == output
    assert output.exists()


def test_http_error_propagates(settings):
    def handler(request):
        return httpx.Response(500, text="boom")

    with make_fetcher(settings, handler) as fetcher:
        with pytest.raises(httpx.HTTPStatusError):
            fetcher.fetch_group()


def test_unexpected_document_is_rejected(settings):
    def handler(request):
        return httpx.Response(200, json={"message": "Not found"})

    with make_fetcher(settings, handler) as fetcher:
        with pytest.raises(ValueError):
            fetcher.refresh()

    assert not settings.data_path.exists()


def test_status_without_file(settings):
    status = ValetFetcher(settings).get_status()

    assert status["observation_count"] == 0
    assert status["last_date"] is None
