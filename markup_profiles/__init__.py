"""Markup output profiles: named formatting options for generated markup."""

__version__ = "1.0.0"
