"""mlexport - stream paginated marketplace results to JSON or CSV."""

__version__ = "0.1.0"
