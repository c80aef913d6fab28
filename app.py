import logging

from dash import Dash
import dash_bootstrap_components as dbc

from config.settings import APP_CONFIG
from controllers.callbacks import register_callbacks
from models.layout import create_app_layout, create_load_error_message
from services.data_service import load_enrollment_dataset
from services.errors import DataError, DataLoadError

logging.basicConfig(level=APP_CONFIG["log_level"])
logger = logging.getLogger(__name__)


def load_dashboard_data(csv_path=None):
    """
    Loads the dataset once for the lifetime of the app.

    Returns:
        tuple: (dataset, error_message); exactly one of them is None.
    """
    csv_path = csv_path or APP_CONFIG["csv_path"]
    try:
        dataset = load_enrollment_dataset(csv_path)
    except DataLoadError as e:
        logger.error(f"Error loading visualization data: {e}")
        return None, create_load_error_message(e.path)
    except DataError as e:
        logger.error(f"Invalid visualization data in {csv_path}: {e}")
        return None, f"{create_load_error_message(csv_path)} ({e})"

    logger.info(f"Dataset ready: {len(dataset.series)} regions over {len(dataset.years)} years")
    return dataset, None


def create_app(csv_path=None):
    """
    Builds the Dash app: loads the data, lays out the page and registers the
    callbacks. A failed load still produces a working page showing the error.
    """
    dataset, error_message = load_dashboard_data(csv_path)

    app = Dash(
        __name__,
        title=APP_CONFIG["title"],
        external_stylesheets=[
            dbc.themes.BOOTSTRAP,
            'https://fonts.googleapis.com/css2?family=Open+Sans:wght@400;600&display=swap',
        ],
    )
    app.layout = create_app_layout(dataset, error_message)
    register_callbacks(app, dataset)
    return app


app = create_app()
server = app.server

if __name__ == '__main__':
    app.run(debug=APP_CONFIG["debug"])
