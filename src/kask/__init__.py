# src/kask/__init__.py

"""kask: personal task lists stored as plain text."""

__version__ = "0.3.0"
