"""Manage course assignments with deadlines, priorities and undo."""

__version__ = "0.1.0"