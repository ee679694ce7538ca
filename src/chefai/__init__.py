"""Recipe shopping-list service: ingredient parsing and consolidation."""

__version__ = "0.1.0"
