"""Controllers for application callbacks."""

import logging
from dash import callback_context, no_update, Output, Input, State, Patch
from dash.exceptions import PreventUpdate

from config.settings import APP_CONFIG
from components.navbar import nav_link_ids
from services.data_service import series_to_frame
from services.visualization_service import (
    render_chart, select_visible, line_widths, create_detail_panel, create_empty_response, chart_style
)
from utils.helper_utils import CallbackContextManager, scroll_button_style

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "enrollment_by_province.csv"

SCROLL_LISTENER_JS = """
function attach_scroll_listener(store_id) {
    if (window._enrollmentScrollListener) {
        return dash_clientside.no_update;
    }
    var last = null;
    var timer = null;
    var report = function() {
        timer = null;
        var top = Math.round(document.documentElement.scrollTop || document.body.scrollTop || 0);
        if (top !== last) {
            last = top;
            dash_clientside.set_props(store_id, {data: top});
        }
    };
    window._enrollmentScrollListener = function() {
        if (timer === null) {
            timer = setTimeout(report, 150);
        }
    };
    window.addEventListener('scroll', window._enrollmentScrollListener);
    return dash_clientside.no_update;
}
"""

SCROLL_TO_TOP_JS = """
function scroll_to_top(n_clicks) {
    if (n_clicks) {
        window.scrollTo({top: 0, behavior: 'smooth'});
    }
    return dash_clientside.no_update;
}
"""


def update_chart(dataset, selection):
    """
    Outputs of the render callback: figure, graph style and placeholder text.

    Every call rebuilds the figure from scratch.
    """
    result = render_chart(dataset, selection or [])
    if result.is_empty:
        logger.debug("No regions selected, showing placeholder")
        return create_empty_response()
    return result.figure, chart_style(visible=True), None


def hover_point(dataset, hover_data, selection):
    """
    Detail panel and line highlight for the current hover state.

    Args:
        dataset (EnrollmentDataset): The session data.
        hover_data (dict or None): Graph hoverData; None once the pointer leaves.
        selection (list): Currently selected regions.

    Returns:
        tuple: (show, bbox, children, widths) for the tooltip and the lines,
               widths following the order of the visible lines.
    """
    visible = [s.region for s in select_visible(dataset.series, selection or [])]

    if not hover_data or not hover_data.get("points"):
        return False, no_update, no_update, line_widths(visible)

    point_data = hover_data["points"][0]
    try:
        customdata = point_data.get("customdata")
        region = customdata[0] if customdata else visible[point_data["curveNumber"]]
        year = int(point_data["x"])
    except (KeyError, IndexError, TypeError, ValueError) as e:
        logger.error(f"Unexpected hover payload {point_data}: {e}")
        raise PreventUpdate

    series = dataset.get(region)
    point = series.point_for(year) if series is not None else None
    if point is None:
        logger.warning(f"No data point for {region!r} in {year}")
        raise PreventUpdate

    return True, point_data.get("bbox"), create_detail_panel(region, point), line_widths(visible, region)


def toggle_mobile_nav(triggered_id, is_open):
    """The burger and close buttons flip the panel; following a link closes it."""
    if triggered_id in ("navbar-toggler", "mobile-nav-close"):
        return not is_open
    if triggered_id in nav_link_ids():
        return False
    return is_open


def export_selection(dataset, selection):
    """CSV download of the selected series."""
    visible = select_visible(dataset.series, selection or [])
    if not visible:
        raise PreventUpdate
    frame = series_to_frame(visible)
    return dict(content=frame.to_csv(index=False), filename=EXPORT_FILENAME)


def register_callbacks(app, dataset=None):
    """
    Register all Dash callbacks for the application.

    Chart callbacks are only registered when the dataset loaded, since the
    error layout has no chart components.

    Args:
        app: The Dash application instance
        dataset: The EnrollmentDataset, or None after a failed load
    """

    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        Input("mobile-nav-close", "n_clicks"),
        *[Input(link_id, "n_clicks") for link_id in nav_link_ids()],
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar_collapse(*args):
        is_open = args[-1]
        ctx = CallbackContextManager(callback_context)
        return toggle_mobile_nav(ctx.triggered_id, is_open)

    @app.callback(
        Output("scroll-top-button", "style"),
        Input("scroll-position", "data"),
    )
    def update_scroll_button(scroll_top):
        return scroll_button_style(scroll_top, APP_CONFIG["scroll_threshold"])

    app.clientside_callback(
        SCROLL_LISTENER_JS,
        Output("scroll-position", "id"),
        Input("scroll-position", "id"),
    )

    app.clientside_callback(
        SCROLL_TO_TOP_JS,
        Output("scroll-top-button", "id"),
        Input("scroll-top-button", "n_clicks"),
        prevent_initial_call=True,
    )

    if dataset is None:
        return

    @app.callback(
        Output("enrollment-chart", "figure"),
        Output("enrollment-chart", "style"),
        Output("enrollment-chart-placeholder", "children"),
        Input("region-select", "value"),
    )
    def redraw_chart(selection):
        return update_chart(dataset, selection)

    @app.callback(
        Output("chart-tooltip", "show"),
        Output("chart-tooltip", "bbox"),
        Output("chart-tooltip", "children"),
        Output("enrollment-chart", "figure", allow_duplicate=True),
        Input("enrollment-chart", "hoverData"),
        State("region-select", "value"),
        prevent_initial_call=True,
    )
    def show_point_details(hover_data, selection):
        show, bbox, children, widths = hover_point(dataset, hover_data, selection)
        patched_figure = Patch()
        for index, width in enumerate(widths):
            patched_figure["data"][index]["line"]["width"] = width
        return show, bbox, children, patched_figure

    @app.callback(
        Output("download-data", "data"),
        Input("download-button", "n_clicks"),
        State("region-select", "value"),
        prevent_initial_call=True,
    )
    def download_data(n_clicks, selection):
        """Download the selected series as CSV"""
        if not n_clicks:
            raise PreventUpdate
        return export_selection(dataset, selection)
