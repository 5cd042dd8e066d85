"""Dashboard configuration."""

from commodity_dashboard.config.settings import (
    Settings,
    BCPI_SERIES,
    CHARTED_SERIES,
    VALET_GROUP,
)

__all__ = ["Settings", "BCPI_SERIES", "CHARTED_SERIES", "VALET_GROUP"]
