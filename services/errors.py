"""Exceptions raised while loading and normalizing enrollment data."""


class DataError(Exception):
    """Base class for problems with the enrollment dataset."""


class DataLoadError(DataError):
    """The input file is missing, empty or cannot be parsed."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not load {self.path}: {reason}")


class MissingValueError(DataError):
    """A region has no usable value for a declared year."""

    def __init__(self, year, region=None):
        self.year = year
        self.region = region
        if region is None:
            message = f"Column for year {year} is missing"
        else:
            message = f"Missing or non-numeric value for {region!r} in {year}"
        super().__init__(message)


class ZeroTotalError(DataError):
    """A year sums to zero, so no percentage can be computed for it."""

    def __init__(self, year):
        self.year = year
        super().__init__(f"Total for year {year} is zero")
