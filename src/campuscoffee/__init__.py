"""campuscoffee — CRUD service layer for campus points of sale."""

__version__ = "0.1.0"
