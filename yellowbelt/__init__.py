"""A dated event database with a condition query language, a bus route directory, and small tools and algorithms."""

__version__ = "0.1.0"