"""Components package initialization."""

from components.charts import create_chart_card, create_error_card, create_detail_tooltip
from components.sidebar import create_region_selector, region_options, initial_selection
from components.navbar import create_navbar, nav_link_ids

__all__ = [
    'create_chart_card',
    'create_error_card',
    'create_detail_tooltip',
    'create_region_selector',
    'region_options',
    'initial_selection',
    'create_navbar',
    'nav_link_ids',
]
