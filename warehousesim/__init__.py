"""Warehouse robot simulation: layout, fleet, shelves, motion planning, manual control, fonts and accounts."""

__version__ = "1.1.0"