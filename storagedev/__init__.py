"""Descriptive layer over Linux block storage devices."""

__version__ = "0.1.0"
