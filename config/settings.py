"""Configuration management for the enrollment dashboard."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def parse_years(spec):
    """
    Parses a year specification into an ascending tuple of integer years.

    Accepts either an inclusive range ("2012-2021") or a comma separated list
    ("2012,2013,2015").

    Args:
        spec (str): The year specification.

    Returns:
        tuple: Years in ascending order.

    Raises:
        ValueError: If the specification is empty, not made of integers,
                    contains duplicates or is not ascending.
    """
    spec = (spec or "").strip()
    if not spec:
        raise ValueError("Year specification is empty")

    try:
        if "-" in spec and "," not in spec:
            start, end = (int(part) for part in spec.split("-", 1))
            if end < start:
                raise ValueError(f"Year range is reversed: {spec}")
            years = tuple(range(start, end + 1))
        else:
            years = tuple(int(part) for part in spec.split(",") if part.strip())
    except ValueError as e:
        raise ValueError(f"Invalid year specification {spec!r}: {e}") from e

    if not years:
        raise ValueError("Year specification is empty")
    if len(set(years)) != len(years):
        raise ValueError(f"Duplicate years in {spec!r}")
    if list(years) != sorted(years):
        raise ValueError(f"Years must be ascending: {spec!r}")
    return years


# App configuration
APP_CONFIG = {
    "title": "Where Ontario's Students Come From",
    "debug": os.getenv("DEBUG", "False").lower() == "true",
    "cache_dir": os.getenv("CACHE_DIR", "enrollment_cache"),
    "cache_size": float(os.getenv("CACHE_SIZE_MB", "64")) * 1e6,
    "cache_ttl": int(os.getenv("CACHE_TTL", "3600")),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "csv_path": os.getenv("ENROLLMENT_CSV", "assets/number_of_undergrads_graduates_in_ontario.csv"),
    "region_column": os.getenv("REGION_COLUMN", "Location of residence at the time of admission"),
    "years": parse_years(os.getenv("ENROLLMENT_YEARS", "2012-2021")),
    "default_region": os.getenv("DEFAULT_REGION", "British Columbia, origin"),
    "scroll_threshold": int(os.getenv("SCROLL_THRESHOLD", "50")),
}

# Chart configuration
CHART_CONFIG = {
    "width": 900,
    "height": 550,
    "margin": {"t": 40, "r": 160, "b": 40, "l": 70},
    "line_width": 2,
    "highlight_line_width": 4,
    "marker_size": 6,
    "label_font_size": 12,
    "y_title": "Percentage of Total Students (%)",
    "empty_message": "No regions selected. Please select one or more regions.",
}

# UI configuration
UI_CONFIG = {
    "font_family": "Open Sans, sans-serif",
    "font_weight": "600",
    "card_header_style": {
        "font-family": 'Open Sans',
        "font-weight": "600",
        "font-size": "16px"
    },
    "label_style": {
        "font-family": 'Open Sans',
        "font-weight": "600",
        "margin-bottom": "5px",
        "margin-top": "10px"
    },
}
