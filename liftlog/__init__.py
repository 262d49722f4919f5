"""Liftlog - personal workout log API with derived set metrics."""

__version__ = "0.1.0"
