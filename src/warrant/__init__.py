"""Warrant - authorization ability engine with role, claim and attribute rules."""

__version__ = "0.1.0"
