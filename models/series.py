"""Normalized enrollment series shared by the data and visualization services."""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class SeriesPoint:
    """One year of one region: the raw count, the year total and their ratio."""
    year: int
    count: float
    total: float
    percentage: float


@dataclass(frozen=True)
class RegionSeries:
    """All yearly points of a single region, ordered by year."""
    region: str
    points: Tuple[SeriesPoint, ...]

    @property
    def years(self):
        return [point.year for point in self.points]

    @property
    def percentages(self):
        return [point.percentage for point in self.points]

    @property
    def last_point(self):
        return self.points[-1]

    def point_for(self, year):
        """Return the point for `year`, or None when the series has no such year."""
        for point in self.points:
            if point.year == year:
                return point
        return None


@dataclass(frozen=True)
class EnrollmentDataset:
    """
    The normalized dataset for a session. Built once at start-up and never
    mutated; the colour map covers every region, not just the selected ones.
    """
    years: Tuple[int, ...]
    series: Tuple[RegionSeries, ...]
    colors: Dict[str, str] = field(default_factory=dict)

    @property
    def regions(self):
        return [s.region for s in self.series]

    def get(self, region):
        for s in self.series:
            if s.region == region:
                return s
        return None
