"""Vegan Moto Club site backend."""

__version__ = "0.1.0"
