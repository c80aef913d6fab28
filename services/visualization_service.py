"""Visualization service for the enrollment line chart."""

import math
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import plotly.graph_objects as go
from dash import html

import brand_colours as bc
from config.settings import CHART_CONFIG
from utils.helper_utils import monitor_performance

# Configure logging
logger = logging.getLogger(__name__)

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


@dataclass
class RenderResult:
    """What a render pass produced; `figure` is None for the empty state."""
    visible_regions: List[str]
    x_domain: Tuple[int, int]
    y_domain: Optional[Tuple[float, float]]
    colors: Dict[str, str]
    figure: Optional[go.Figure] = None
    line_widths: List[int] = field(default_factory=list)

    @property
    def is_empty(self):
        return not self.visible_regions


def build_color_map(regions, palette=None):
    """
    Assigns each region a colour from the palette, in region order, cycling
    when there are more regions than colours.

    Args:
        regions (list): Every region in the dataset.
        palette (list): Colours to use, defaults to the Tableau 10 palette.

    Returns:
        dict: Region name to colour string.
    """
    palette = palette or bc.REGION_PALETTE
    colors = {}
    for region in regions:
        if region not in colors:
            colors[region] = palette[len(colors) % len(palette)]
    return colors


def tick_increment(start, stop, count):
    """
    Tick step for a linear axis, as d3 computes it. Positive values are the
    step itself; negative values are the inverse of a fractional step.
    """
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * math.pow(10, power)
    return -math.pow(10, -power) / factor


def nice_domain(start, stop, count=10):
    """
    Extends [start, stop] outward to round tick values.

    Args:
        start (float): Lower bound.
        stop (float): Upper bound, must not be below start.
        count (int): Approximate number of ticks.

    Returns:
        tuple: The rounded (start, stop).
    """
    if not stop > start:
        return start, stop

    lower, upper = start, stop
    previous_step = None
    for _ in range(10):
        step = tick_increment(lower, upper, count)
        if step == previous_step:
            # avoid -0.0 from the fractional branch
            return lower + 0.0, upper + 0.0
        if step > 0:
            lower = math.floor(lower / step) * step
            upper = math.ceil(upper / step) * step
        elif step < 0:
            lower = math.ceil(lower * step) / step
            upper = math.floor(upper * step) / step
        else:
            break
        previous_step = step
    # no stable step, keep the domain as given
    return start, stop


def select_visible(all_series, selection):
    """
    Keeps the series whose region is selected, in dataset order.

    Unknown identifiers in the selection are logged and ignored.
    """
    selected = set(selection or [])
    known = {s.region for s in all_series}
    unknown = selected - known
    if unknown:
        logger.warning(f"Ignoring unknown regions in selection: {sorted(unknown)}")
    return [s for s in all_series if s.region in selected]


def year_domain(all_series, years=None):
    """The fixed x domain: first and last year over the full dataset."""
    if years:
        return min(years), max(years)
    every_year = [year for s in all_series for year in s.years]
    return min(every_year), max(every_year)


def percentage_domain(visible):
    """The y domain: zero to the largest visible percentage, rounded outward."""
    highest = max(point.percentage for s in visible for point in s.points)
    if highest <= 0:
        return 0.0, 1.0
    return nice_domain(0.0, highest)


def line_widths(visible_regions, highlighted_region=None):
    """Width of each visible line; only the highlighted region is thickened."""
    return [
        CHART_CONFIG["highlight_line_width"] if region == highlighted_region else CHART_CONFIG["line_width"]
        for region in visible_regions
    ]


def _create_line_trace(series, color):
    return go.Scatter(
        x=series.years,
        y=series.percentages,
        mode='lines+markers',
        name=series.region,
        line=dict(color=color, width=CHART_CONFIG["line_width"]),
        marker=dict(color=color, size=CHART_CONFIG["marker_size"]),
        customdata=[[series.region, point.count, point.total] for point in series.points],
        hoverinfo='none',
        hovertemplate=None,
        cliponaxis=False,
    )


def _create_end_label(series, color):
    last = series.last_point
    return dict(
        x=last.year,
        y=last.percentage,
        xref='x',
        yref='y',
        text=series.region,
        showarrow=False,
        xanchor='left',
        yanchor='middle',
        xshift=5,
        font=dict(color=color, size=CHART_CONFIG["label_font_size"]),
    )


def create_line_chart(visible, colors, x_domain, y_domain):
    """
    Creates the percentage-of-total line chart for the visible series.

    Args:
        visible (list): RegionSeries to draw.
        colors (dict): Region to colour, covering at least the visible regions.
        x_domain (tuple): Fixed (first year, last year).
        y_domain (tuple): (0, upper bound) for the visible series.

    Returns:
        plotly.graph_objects.Figure: The chart.
    """
    fig = go.Figure(data=[_create_line_trace(s, colors[s.region]) for s in visible])

    fig.update_layout(
        width=CHART_CONFIG["width"],
        height=CHART_CONFIG["height"],
        margin=CHART_CONFIG["margin"],
        showlegend=False,
        hovermode='closest',
        plot_bgcolor=bc.PLOT_BACKGROUND,
        paper_bgcolor='white',
        annotations=[_create_end_label(s, colors[s.region]) for s in visible],
        font=dict(
            color=bc.IIC_BLACK,
            family='Open Sans, sans-serif',
        ),
        xaxis=dict(
            range=list(x_domain),
            tickformat='d',
            dtick=1,
            showgrid=False,
            linecolor=bc.GREY,
            ticks='outside',
        ),
        yaxis=dict(
            range=list(y_domain),
            tickformat='.1%',
            title=CHART_CONFIG["y_title"],
            gridcolor='#E5E5E5',
            linecolor=bc.GREY,
            ticks='outside',
            zeroline=False,
        ),
        modebar_remove=['zoom', 'pan', 'select', 'zoomIn', 'zoomOut', 'autoScale', 'resetScale', 'lasso2d'],
    )
    return fig


@monitor_performance
def render_chart(all_series, selection, colors=None, years=None):
    """
    Rebuilds the chart for the current selection.

    The x domain and colours depend only on the full dataset, so they never
    change with the selection; the y domain follows the visible series. An
    empty selection yields an empty result with no figure.

    Args:
        all_series: An EnrollmentDataset, or a list of RegionSeries.
        selection (iterable): Selected region identifiers.
        colors (dict): Region colours, computed over all regions when omitted.
        years (iterable): Full year range, taken from the data when omitted.

    Returns:
        RenderResult: Visible regions, domains, colours and the figure.
    """
    if hasattr(all_series, "series"):
        colors = colors or all_series.colors
        years = years or all_series.years
        all_series = all_series.series

    colors = colors or build_color_map([s.region for s in all_series])
    visible = select_visible(all_series, selection)
    x_domain = year_domain(all_series, years)

    if not visible:
        return RenderResult(visible_regions=[], x_domain=x_domain, y_domain=None, colors=colors)

    y_domain = percentage_domain(visible)
    visible_regions = [s.region for s in visible]
    return RenderResult(
        visible_regions=visible_regions,
        x_domain=x_domain,
        y_domain=y_domain,
        colors=colors,
        figure=create_line_chart(visible, colors, x_domain, y_domain),
        line_widths=line_widths(visible_regions),
    )


def format_count(value):
    """Thousands-separated, without decimals for whole numbers."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def format_percentage(value):
    return f"{value * 100:.2f}%"


def hover_details(region, point):
    """
    The fields shown in the detail panel for one point.

    Args:
        region (str): Region of the hovered series.
        point (SeriesPoint): The hovered point.

    Returns:
        dict: Label to display string, in display order.
    """
    short_region = region.split(',')[0]
    return {
        "Year": str(point.year),
        f"Students from {short_region} in Ontario": format_count(point.count),
        f"Total Students in Ontario in {point.year}": format_count(point.total),
        "Percentage": format_percentage(point.percentage),
    }


def create_detail_panel(region, point):
    """Tooltip content for a hovered point."""
    rows = [html.Strong(region), html.Br(), html.Br()]
    for label, value in hover_details(region, point).items():
        rows.extend([html.Strong(f"{label}: "), value, html.Br()])
    return html.Div(
        rows,
        style={
            "font-family": 'Open Sans, sans-serif',
            "font-size": "13px",
            "color": bc.IIC_BLACK,
            "white-space": "nowrap",
        },
    )


def create_empty_response():
    """Outputs of the render callback when nothing is selected."""
    return {}, chart_style(visible=False), CHART_CONFIG["empty_message"]


def chart_style(visible=True):
    """Graph container style; the graph is hidden while nothing is selected."""
    return {
        "width": f"{CHART_CONFIG['width']}px",
        "height": f"{CHART_CONFIG['height']}px",
        "display": "block" if visible else "none",
    }
