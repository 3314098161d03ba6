"""Retirement corpus projection engine and its Flask API."""

__version__ = "1.0.0"
