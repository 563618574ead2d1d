"""Tender Search — normalized search, sort and export over the open tender feed."""

__version__ = "1.0.0"
