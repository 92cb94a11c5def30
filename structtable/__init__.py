"""Row caching, load-range planning, sorting, selection and pagination logic for tables."""

__version__ = "0.1.0"

__all__ = ["controls", "loaded_rows", "loading", "sorting"]