"""OpenAPI 3.1 document model, dictionary and JSON serialisation, and a per-thread generation context."""

__version__ = "0.1.0"

__all__ = [
    "context",
    "document",
    "errors",
    "info",
    "operation",
    "parameter",
    "reference",
    "responses",
    "schema",
    "status_code",
]