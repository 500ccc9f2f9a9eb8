"""Manage supermarket branches, suppliers and products from an interactive console menu."""

__version__ = "0.1.0"