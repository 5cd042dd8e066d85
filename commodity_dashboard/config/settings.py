"""Configuration settings for the dashboard."""

from dataclasses import dataclass, field
from pathlib import Path
import os

from dotenv import load_dotenv

from commodity_dashboard.models.commodity_data import Series, SeriesSpec


load_dotenv()


# BCPI weekly series definitions - code, display name, chart color
BCPI_SERIES: dict[Series, SeriesSpec] = {
    Series.TOTAL: SeriesSpec("W.BCPI", "Total Index", "#8884d8"),
    # Auxiliary total, parsed but not charted
    Series.NON_ENERGY: SeriesSpec("W.BCNE", "Non-Energy Total", "#8dd1e1", charted=False),
    Series.ENERGY: SeriesSpec("W.ENER", "Energy", "#82ca9d"),
    Series.METALS: SeriesSpec("W.MTLS", "Metals & Minerals", "#ffc658"),
    Series.AGRICULTURE: SeriesSpec("W.AGRI", "Agriculture", "#ff7300"),
    Series.FORESTRY: SeriesSpec("W.FOPR", "Forestry", "#00C49F"),
    Series.FISH: SeriesSpec("W.FISH", "Fish", "#FFBB28"),
}

# Series shown on the chart and in the trends panel
CHARTED_SERIES: list[Series] = [s for s, spec in BCPI_SERIES.items() if spec.charted]

VALET_GROUP = "BCPI_WEEKLY"


@dataclass
class Settings:
    """Application settings."""

    data_dir: Path = field(
        default_factory=lambda: Path(
            os.getenv("BCPI_DATA_DIR", Path(__file__).parent.parent.parent / "data")
        )
    )
    start_date: str = field(
        default_factory=lambda: os.getenv("BCPI_START_DATE", "1972-01-01")
    )
    valet_url: str = field(
        default_factory=lambda: os.getenv(
            "BCPI_VALET_URL", "https://www.bankofcanada.ca/valet"
        )
    )
    data_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir)
        self.data_path = self.data_dir / f"{VALET_GROUP}-sd-{self.start_date}.json"

    def validate(self) -> None:
        """Validate that the static data file is in place."""
        if not self.data_path.exists():
            raise ValueError(
                f"Data file {self.data_path} not found. "
                "Run: python -m commodity_dashboard.data.valet_fetcher"
            )
