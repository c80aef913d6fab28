"""Models package initialization."""

from models.series import SeriesPoint, RegionSeries, EnrollmentDataset

__all__ = ['SeriesPoint', 'RegionSeries', 'EnrollmentDataset']
