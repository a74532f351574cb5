"""Runnable demonstrations of the observer, strategy, template method, state, prototype and factory method patterns."""

__version__ = "0.1.0"