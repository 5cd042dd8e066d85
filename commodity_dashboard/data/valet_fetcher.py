"""Bank of Canada Valet API fetcher for the BCPI weekly group."""

import json
import logging
from datetime import datetime
from pathlib import Path

import httpx

from commodity_dashboard.config import Settings, VALET_GROUP
from commodity_dashboard.data.loader import load_observations, parse_observations


logger = logging.getLogger(__name__)


class ValetFetcher:
    """Downloads BCPI observations and stores them as the static data file."""

    def __init__(
        self, settings: Settings | None = None, client: httpx.Client | None = None
    ) -> None:
        self.settings = settings or Settings()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=30.0)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "ValetFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def fetch_group(self, start_date: str | None = None) -> dict:
        """
        Fetch the BCPI weekly group from Valet.

        Args:
            start_date: First observation date, defaults to settings

        Returns:
            Decoded JSON document
        """
        start_date = start_date or self.settings.start_date
        response = self.client.get(
            f"{self.settings.valet_url}/observations/group/{VALET_GROUP}/json",
            params={"start_date": start_date},
        )
        response.raise_for_status()
        document = response.json()

        # Fails fast on a document the dashboard could not load
        parse_observations(document)
        return document

    def save(self, document: dict, path: Path | None = None) -> Path:
        """Write a fetched document to disk."""
        path = Path(path or self.settings.data_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(document, f)
        return path

    def refresh(self, start_date: str | None = None, output: Path | None = None) -> Path:
        """Fetch the group and overwrite the static file."""
        logger.info(f"Fetching {VALET_GROUP} from {self.settings.valet_url}...")
        document = self.fetch_group(start_date)
        path = self.save(document, output)
        logger.info(
            f"  Saved {len(document['observations'])} observations to {path} "
            f"at {datetime.now().strftime('%Y-%m-%d %H:%M')}"
        )
        return path

    def get_status(self, path: Path | None = None) -> dict:
        """Summarize the static file currently on disk."""
        path = Path(path or self.settings.data_path)
        if not path.exists():
            return {
                "path": str(path),
                "observation_count": 0,
                "first_date": None,
                "last_date": None,
            }

        observations = load_observations(path)
        return {
            "path": str(path),
            "observation_count": len(observations),
            "first_date": observations[0].date if observations else None,
            "last_date": observations[-1].date if observations else None,
        }


def main() -> None:
    """CLI entry point for downloading the data file."""
    import argparse
    import sys

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Fetch BCPI weekly data")
    parser.add_argument(
        "--start",
        type=str,
        help="First observation date (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Where to write the JSON file",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show data file status and exit",
    )
    args = parser.parse_args()

    settings = Settings(start_date=args.start) if args.start else Settings()

    try:
        with ValetFetcher(settings) as fetcher:
            if args.status:
                status = fetcher.get_status(args.output)
                print("\nData File Status:")
                print("-" * 70)
                first = status["first_date"] or "N/A"
                last = status["last_date"] or "N/A"
                print(f"{status['path']}")
                print(f"  {status['observation_count']} obs | First: {first} | Last: {last}")
                return

            fetcher.refresh(output=args.output)

            status = fetcher.get_status(args.output)
            print(
                f"\nDone. {status['observation_count']} observations, "
                f"last date: {status['last_date']}"
            )

    except ValueError as e:
        print(f"Data error: {e}")
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"API error: {e.response.status_code} - {e.response.text}")
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"Network error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
