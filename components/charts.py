"""Chart components for visualization."""

import dash_bootstrap_components as dbc
from dash import dcc, html
import brand_colours as bc
from config.settings import UI_CONFIG
from services.visualization_service import chart_style


def create_detail_tooltip(tooltip_id="chart-tooltip"):
    """
    The single detail panel shared by every hover. It is created once with
    the layout; callbacks only change its content, position and visibility.
    """
    return dcc.Tooltip(
        id=tooltip_id,
        show=False,
        direction="right",
        background_color="white",
        border_color=bc.IIC_BLACK,
        style={"box-shadow": "2px 2px 5px rgba(0,0,0,0.2)", "z-index": 1000},
    )


def create_chart_card(chart_id, title, controls=None):
    """
    Creates a card containing the line chart, its empty-state placeholder and
    the detail tooltip.

    Args:
        chart_id (str): The ID for the chart component
        title (str): Card title to display
        controls (list): Components shown above the chart

    Returns:
        dbc.Card: Card component with chart
    """
    chart = dcc.Graph(
        id=chart_id,
        config={'displaylogo': False},
        clear_on_unhover=True,
        style=chart_style(visible=False),
    )

    placeholder = html.P(
        id=f"{chart_id}-placeholder",
        className="text-muted mt-3",
    )

    return dbc.Card([
        dbc.CardHeader(title, style=UI_CONFIG["card_header_style"]),
        dbc.CardBody([
            *(controls or []),
            placeholder,
            # tooltip bbox coordinates are relative to the graph
            html.Div(
                [chart, create_detail_tooltip()],
                id=f"{chart_id}-container",
                className="chart-wrapper",
                style={"position": "relative"},
            ),
        ])
    ], className="mb-2 mt-2")


def create_error_card(title, message):
    """A card in place of the chart when the data could not be loaded."""
    return dbc.Card([
        dbc.CardHeader(title, style=UI_CONFIG["card_header_style"]),
        dbc.CardBody([
            dbc.Alert(message, id="data-error", color="danger", className="mb-0"),
        ])
    ], className="mb-2 mt-2")
