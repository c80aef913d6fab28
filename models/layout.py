"""Layout model for the enrollment dashboard."""

import dash_bootstrap_components as dbc
from dash import html, dcc
import brand_colours as bc
from config.settings import APP_CONFIG, UI_CONFIG
from components import (
    create_navbar, create_chart_card, create_error_card, create_region_selector
)

CHART_TITLE = "Share of Ontario's Students by Province of Origin, 2012 to 2021"

INTRO_TEXT = (
    "Each line shows the share of all undergraduate and graduate students "
    "enrolled in Ontario who came from a given province or territory. "
    "Choose regions below to compare them; hover over a point for the "
    "underlying counts."
)

ABOUT_TEXT = (
    "Percentages are computed per year as the number of students from a region "
    "divided by the total across every region listed for that year."
)


def create_load_error_message(csv_path):
    return f"Error: Could not load visualization. Check file path: {csv_path}"


def create_scroll_top_button():
    """Scroll-to-top control; hidden until the page is scrolled."""
    return html.Button(
        "↑ Top",
        id="scroll-top-button",
        n_clicks=0,
        title="Go to top",
        className="btn btn-dark",
        style={"display": "none"},
    )


def create_app_layout(dataset=None, error_message=None):
    """
    Creates the page: navbar, context section with the chart (or an error
    card when the data failed to load) and the page chrome.

    Args:
        dataset (EnrollmentDataset or None): The normalized data
        error_message (str or None): Message shown instead of the chart

    Returns:
        dash.html.Div: The complete application layout
    """
    if dataset is not None:
        controls = create_region_selector(dataset.regions, APP_CONFIG["default_region"])
        chart_card = create_chart_card("enrollment-chart", CHART_TITLE, controls=controls)
    else:
        chart_card = create_error_card(CHART_TITLE, error_message or create_load_error_message(APP_CONFIG["csv_path"]))

    content = dbc.Container([
        html.Section([
            html.H2("Context", className="mt-4"),
            html.P(INTRO_TEXT),
            chart_card,
        ], id="context"),
        html.Section([
            html.H2("About", className="mt-4"),
            html.P(ABOUT_TEXT),
        ], id="about", className="mb-4"),
    ], fluid=True, id="data")

    return html.Div([
        create_navbar(),
        content,
        html.Div(create_scroll_top_button(), style={"position": "fixed", "bottom": "20px", "right": "30px", "z-index": 99}),
        dcc.Store(id="scroll-position", data=0),
    ], style={
        "font-family": UI_CONFIG["font_family"],
        "font-weight": UI_CONFIG["font_weight"],
        "background-color": bc.PAGE_BACKGROUND,
        "min-height": "100vh",
    })
