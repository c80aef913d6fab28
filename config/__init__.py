"""Config package initialization."""

from config.settings import APP_CONFIG, CHART_CONFIG, UI_CONFIG, parse_years

__all__ = ['APP_CONFIG', 'CHART_CONFIG', 'UI_CONFIG', 'parse_years']
