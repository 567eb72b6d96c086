"""JSON reporting for benchmark results: data model, formatting and reporter."""

__version__ = "0.1.0"
__all__ = ["formatting", "json_reporter", "model"]