import pytest

from config.settings import APP_CONFIG, parse_years


def test_default_years_cover_the_decade():
    assert APP_CONFIG["years"] == tuple(range(2012, 2022))


def test_parse_year_range():
    assert parse_years("2012-2014") == (2012, 2013, 2014)


def test_parse_year_list():
    assert parse_years("2012, 2015,2020") == (2012, 2015, 2020)


@pytest.mark.parametrize("spec", ["", "  ", "2020-2012", "2012,abc", "2013,2012", "2012,2012"])
def test_invalid_year_specifications_are_rejected(spec):
    with pytest.raises(ValueError):
        parse_years(spec)
