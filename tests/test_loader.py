"""Tests for loading the static observations file."""

import json

import pytest

from commodity_dashboard.data.loader import load_observations, parse_observations


def test_parse_unwraps_values():
    document = {
        "observations": [
            {"d": "1972-01-07", "W.BCPI": {"v": "101.5"}, "W.ENER": {"v": "N/A"}},
        ]
    }
    observations = parse_observations(document)

    assert len(observations) == 1
    assert observations[0].date == "1972-01-07"
    assert observations[0].values == {"W.BCPI": "101.5", "W.ENER": "N/A"}


def test_parse_drops_unwrapped_fields():
    document = {
        "observations": [
            {"d": "1972-01-07", "W.BCPI": "101.5", "W.ENER": {}, "W.FISH": {"v": 88.25}},
        ]
    }
    observations = parse_observations(document)

    assert observations[0].values == {"W.FISH": "88.25"}


def test_parse_skips_non_object_entries():
    document = {"observations": [{"d": "1972-01-07"}, "junk", {"d": "1972-01-14"}]}

    assert [o.date for o in parse_observations(document)] == ["1972-01-07", "1972-01-14"]


@pytest.mark.parametrize("document", [{}, {"observations": {}}, []])
def test_parse_requires_observations_list(document):
    with pytest.raises(ValueError):
        parse_observations(document)


def test_load_observations_from_file(tmp_path, two_year_document):
    path = tmp_path / "bcpi.json"
    path.write_text(json.dumps(two_year_document), encoding="utf-8")

    observations = load_observations(path)

    assert len(observations) == 104
    assert observations[0].values["W.BCPI"] == "100.0000"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_observations(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        load_observations(path)
