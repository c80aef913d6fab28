import pandas as pd
import pytest

from models.series import EnrollmentDataset
from services.data_service import normalize
from services.visualization_service import build_color_map

REGION_COLUMN = "Location of residence at the time of admission"


@pytest.fixture
def region_column():
    return REGION_COLUMN


@pytest.fixture
def two_region_frame():
    """Regions A and B; 2020 is the 30/70 split."""
    return pd.DataFrame({
        REGION_COLUMN: ["A", "B"],
        "2019": [20, 60],
        "2020": [30, 70],
    })


@pytest.fixture
def two_region_dataset(two_region_frame):
    years = (2019, 2020)
    series = normalize(two_region_frame, years, region_column=REGION_COLUMN)
    return EnrollmentDataset(
        years=years,
        series=tuple(series),
        colors=build_color_map([s.region for s in series]),
    )


@pytest.fixture
def province_rows():
    return [
        ["British Columbia, origin", 1200, 1300, 1250],
        ["Alberta, origin", 900, 950, 1000],
        ["Quebec, origin", 2100, 2000, 2050],
    ]


@pytest.fixture
def write_csv(tmp_path, province_rows):
    """Writes an enrollment CSV and returns its path."""
    def _write(rows=None, years=(2019, 2020, 2021), name="enrollment.csv", header=None):
        path = tmp_path / name
        header = header or [REGION_COLUMN] + [str(year) for year in years]
        lines = [",".join(f'"{cell}"' if isinstance(cell, str) and "," in cell else str(cell) for cell in header)]
        for row in (province_rows if rows is None else rows):
            lines.append(",".join(f'"{cell}"' if isinstance(cell, str) else str(cell) for cell in row))
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
