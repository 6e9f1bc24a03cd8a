"""ubicity — learning experience validation and domain network analytics."""

__version__ = "0.3.0"
