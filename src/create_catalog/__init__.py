"""Set up the Catalog documentation tool inside a Node project."""

__version__ = "1.0.0"
