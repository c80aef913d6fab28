"""Utils package initialization."""

from utils.helper_utils import CallbackContextManager, monitor_performance, scroll_button_style

__all__ = ['CallbackContextManager', 'monitor_performance', 'scroll_button_style']
