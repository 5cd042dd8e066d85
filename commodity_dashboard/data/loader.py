"""Load BCPI observations from the static JSON file."""

import json
import logging
from pathlib import Path

from commodity_dashboard.models.commodity_data import RawObservation


logger = logging.getLogger(__name__)


def _unwrap(entry: object) -> str | None:
    """Unwrap a {"v": "<numeric-string>"} value."""
    if isinstance(entry, dict) and "v" in entry and entry["v"] is not None:
        return str(entry["v"])
    return None


def parse_observations(document: dict) -> list[RawObservation]:
    """
    Convert a decoded Valet document into raw observations.

    Args:
        document: Decoded JSON with a top-level "observations" list

    Returns:
        Observations in file order
    """
    observations = document.get("observations") if isinstance(document, dict) else None
    if not isinstance(observations, list):
        raise ValueError("Document has no 'observations' list")

    results = []
    for i, obs in enumerate(observations):
        if not isinstance(obs, dict):
            logger.warning(f"Skipping observation {i}: not an object")
            continue

        values = {}
        for code, entry in obs.items():
            if code == "d":
                continue
            text = _unwrap(entry)
            if text is not None:
                values[code] = text

        results.append(RawObservation(date=str(obs.get("d", "")), values=values))

    return results


def load_observations(path: Path | str) -> list[RawObservation]:
    """Read and parse the static observations file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)

    observations = parse_observations(document)
    logger.info(f"Loaded {len(observations)} observations from {path.name}")
    return observations
