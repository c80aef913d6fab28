"""Region selection controls."""

import dash_bootstrap_components as dbc
from dash import html, dcc
from config.settings import UI_CONFIG

BUTTON_FORMAT = {
    "margin-top": "15px",
    "border": "none",
    "padding": "10px 20px",
    "border-radius": "5px",
    "font-family": 'Open Sans',
    "font-weight": "600"
}

MULTI_DROPDOWN_FORMAT = {
    "multi": True,
    "searchable": True,
    "clearable": True,
    "placeholder": "Select one or more regions",
    "style": {
        "margin-bottom": "15px",
        "font-family": 'Open Sans',
        "font-weight": "600",
    }
}


def region_options(regions):
    """Dropdown options, one per region, in dataset order."""
    return [{'label': region, 'value': region} for region in regions]


def initial_selection(regions, default_region):
    """
    The selection shown at start-up: the default region when present,
    otherwise the first region.
    """
    if default_region in regions:
        return [default_region]
    return list(regions[:1])


def filter_args(id, options, value, format):
    """Create args for the region dropdown"""
    return {
        "id": id,
        "options": options,
        "value": value,
        **format
    }


def create_region_selector(regions, default_region):
    """
    Creates the labelled multi-select of regions and the download button.

    Args:
        regions (list): Every region in the dataset
        default_region (str): Region selected on first render

    Returns:
        list: Components to place above the chart
    """
    dropdown_args = filter_args(
        "region-select",
        region_options(regions),
        initial_selection(regions, default_region),
        MULTI_DROPDOWN_FORMAT,
    )

    return [
        html.Label("Province or territory of origin:", htmlFor="region-select", style=UI_CONFIG["label_style"]),
        dcc.Dropdown(**dropdown_args),
        dbc.Button(
            "Download data",
            id="download-button",
            n_clicks=0,
            color="dark",
            size="sm",
            style={**BUTTON_FORMAT, "margin-top": "0px"},
        ),
        dcc.Download(id="download-data"),
    ]
