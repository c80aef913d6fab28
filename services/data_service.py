"""Data service for loading and normalizing enrollment counts."""

import os
import logging
import pandas as pd
from config.settings import APP_CONFIG
from models.series import SeriesPoint, RegionSeries, EnrollmentDataset
from services.cache_service import cache_decorator
from services.errors import DataError, DataLoadError, MissingValueError, ZeroTotalError
from services.visualization_service import build_color_map

# Configure logging
logger = logging.getLogger(__name__)


def load_enrollment_table(csv_path, region_column, years):
    """
    Reads the enrollment CSV: one row per region of origin, one column per year.

    Args:
        csv_path (str): Path to the CSV file.
        region_column (str): Header of the column naming the region.
        years (iterable): Years whose columns must be read.

    Returns:
        pandas.DataFrame: The region column as strings plus one column per year,
                          named by the year as a string.

    Raises:
        DataLoadError: If the file is missing, empty, unparsable or has no
                       region column.
    """
    if not os.path.isfile(csv_path):
        raise DataLoadError(csv_path, "file not found")

    try:
        frame = pd.read_csv(csv_path, dtype={region_column: str}, thousands=",", skipinitialspace=True)
    except pd.errors.EmptyDataError as e:
        raise DataLoadError(csv_path, "file is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise DataLoadError(csv_path, f"could not parse file ({e})") from e

    frame.columns = [str(col).strip() for col in frame.columns]
    if region_column not in frame.columns:
        raise DataLoadError(csv_path, f"missing region column {region_column!r}")

    year_columns = [str(year) for year in years if str(year) in frame.columns]
    logger.info(f"Loaded {len(frame)} regions from {csv_path}")
    return frame[[region_column] + year_columns]


def _year_values(rows, regions, year):
    """Numeric values of one year column, raising on anything missing."""
    column = str(year)
    if column not in rows.columns:
        raise MissingValueError(year)

    values = pd.to_numeric(rows[column], errors="coerce")
    missing = values.isna()
    if missing.any():
        region = regions.loc[missing.idxmax()]
        raise MissingValueError(year, region=region)
    return values


def normalize(rows, years, region_column=None):
    """
    Converts raw per-region counts into per-region percentage series.

    Totals are column sums over every row, computed before any percentage.
    The input frame is left untouched.

    Args:
        rows (pandas.DataFrame): One row per region.
        years (iterable): Years to include, in the order points should appear.
        region_column (str): Column holding the region identifier.

    Returns:
        list: One RegionSeries per row, in row order.

    Raises:
        DataError: On a missing region column, a blank region or duplicate
                   regions.
        MissingValueError: If a year column or a cell is missing or non-numeric.
        ZeroTotalError: If a year's total is zero.
    """
    region_column = region_column or APP_CONFIG["region_column"]
    years = [int(year) for year in years]

    if region_column not in rows.columns:
        raise DataError(f"Region column {region_column!r} not found")

    raw_regions = rows[region_column]
    regions = raw_regions.astype(str).str.strip()
    blank = raw_regions.isna() | (regions == "")
    if blank.any():
        position = int(blank.to_numpy().argmax())
        raise DataError(f"Blank region in row {position + 1}")

    duplicated = regions[regions.duplicated()]
    if not duplicated.empty:
        raise DataError(f"Duplicate region {duplicated.iloc[0]!r}")

    counts = {}
    totals = {}
    for year in years:
        values = _year_values(rows, regions, year)
        total = float(values.sum())
        if total == 0:
            raise ZeroTotalError(year)
        counts[year] = values.tolist()
        totals[year] = total

    series = []
    for position, region in enumerate(regions):
        points = tuple(
            SeriesPoint(
                year=year,
                count=float(counts[year][position]),
                total=totals[year],
                percentage=float(counts[year][position]) / totals[year],
            )
            for year in years
        )
        series.append(RegionSeries(region=region, points=points))
    return series


def series_to_frame(series):
    """
    Flattens series into a tidy table for export.

    Args:
        series (iterable): RegionSeries to flatten.

    Returns:
        pandas.DataFrame: Columns region, year, count, total, percentage.
    """
    records = [
        {
            "region": s.region,
            "year": point.year,
            "count": point.count,
            "total": point.total,
            "percentage": point.percentage,
        }
        for s in series
        for point in s.points
    ]
    return pd.DataFrame.from_records(records, columns=["region", "year", "count", "total", "percentage"])


def _file_signature(csv_path):
    """Modification time and size, so cached results follow edits to the file."""
    try:
        stat = os.stat(csv_path)
    except OSError:
        return None
    return (stat.st_mtime_ns, stat.st_size)


@cache_decorator(ttl=3600)
def _load_and_normalize(csv_path, signature, region_column, years):
    rows = load_enrollment_table(csv_path, region_column, years)
    series = normalize(rows, years, region_column=region_column)
    colors = build_color_map([s.region for s in series])
    return EnrollmentDataset(years=tuple(years), series=tuple(series), colors=colors)


def load_enrollment_dataset(csv_path=None, region_column=None, years=None):
    """
    Loads and normalizes the enrollment CSV into an EnrollmentDataset.

    Results are cached per file path, file signature, region column and years.

    Args:
        csv_path (str): Path to the CSV, defaults to APP_CONFIG["csv_path"].
        region_column (str): Region column, defaults to APP_CONFIG["region_column"].
        years (iterable): Years to read, defaults to APP_CONFIG["years"].

    Returns:
        EnrollmentDataset: The immutable session dataset.

    Raises:
        DataError: Any load or normalization failure.
    """
    csv_path = csv_path or APP_CONFIG["csv_path"]
    region_column = region_column or APP_CONFIG["region_column"]
    years = tuple(int(year) for year in (years or APP_CONFIG["years"]))

    signature = _file_signature(csv_path)
    if signature is None:
        raise DataLoadError(csv_path, "file not found")

    return _load_and_normalize(csv_path, signature, region_column, years)
