"""Data loading and fetching."""

from .loader import load_observations, parse_observations
from .valet_fetcher import ValetFetcher

__all__ = ["load_observations", "parse_observations", "ValetFetcher"]
