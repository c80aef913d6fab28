"""Utility functions and classes for the enrollment dashboard."""

import time
import logging
from functools import wraps
from collections import defaultdict

# Configure logging
logger = logging.getLogger(__name__)


class CallbackContextManager:
    """
    A helper class to interpret Dash callback contexts. It simplifies finding
    which input triggered the callback and whether the callback was triggered
    at all.
    """
    def __init__(self, context):
        """
        Initializes the CallbackContextManager with the given Dash callback context.

        Args:
            context (dash.callback_context): The current callback context provided by Dash.
        """
        self._ctx = context
        self._triggered = self._ctx.triggered[0] if self._ctx.triggered else None
        self._triggered_id = self._triggered['prop_id'].split('.')[0] if self._triggered else None

    @property
    def triggered_id(self):
        return self._triggered_id

    @property
    def is_triggered(self):
        return bool(self._triggered)


def monitor_performance(func):
    """
    Decorator to monitor the performance of functions.
    Logs average execution time after every 10 calls.

    Args:
        func (callable): The function to monitor

    Returns:
        callable: Wrapped function with performance monitoring
    """
    metrics = defaultdict(list)

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        execution_time = time.perf_counter() - start_time
        metrics[func.__name__].append(execution_time)

        if len(metrics[func.__name__]) >= 10:
            avg_time = sum(metrics[func.__name__]) / len(metrics[func.__name__])
            logger.info(f"{func.__name__} average execution time: {avg_time:.4f}s")
            metrics[func.__name__] = []

        return result
    return wrapper


def scroll_button_style(scroll_top, threshold):
    """
    Style for the scroll-to-top button: shown only once the page has been
    scrolled strictly past `threshold` pixels.
    """
    visible = scroll_top is not None and scroll_top > threshold
    return {"display": "block" if visible else "none"}
