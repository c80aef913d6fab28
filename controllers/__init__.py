"""Controllers package initialization."""

from controllers.callbacks import register_callbacks

__all__ = ['register_callbacks']
