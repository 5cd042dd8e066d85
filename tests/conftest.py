"""Shared fixtures: synthetic BCPI weekly documents."""

import json
from datetime import date, timedelta

import pytest

from commodity_dashboard.config import BCPI_SERIES, Settings


FIRST_WEEK = date(1972, 1, 7)


def make_document(weeks: int, overrides: dict | None = None) -> dict:
    """
    Build a Valet-style document with `weeks` weekly observations.

    Every series rises by one point per week from a base of 100. `overrides`
    maps (index, code) to the raw text stored for that field.
    """
    overrides = overrides or {}
    observations = []
    for i in range(weeks):
        obs = {"d": (FIRST_WEEK + timedelta(weeks=i)).isoformat()}
        for n, spec in enumerate(BCPI_SERIES.values()):
            text = overrides.get((i, spec.code), f"{100 + 10 * n + i:.4f}")
            obs[spec.code] = {"v": text}
        observations.append(obs)
    return {"seriesDetail": {}, "observations": observations}


@pytest.fixture
def two_year_document() -> dict:
    return make_document(104)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path, start_date="1972-01-01")


@pytest.fixture
def data_file(settings, two_year_document):
    settings.data_path.write_text(json.dumps(two_year_document), encoding="utf-8")
    return settings.data_path
