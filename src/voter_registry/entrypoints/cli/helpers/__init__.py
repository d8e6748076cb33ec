"""CLI helpers for VOTER REGISTRY.

Utilities used by the command-line interface: database URL resolution and
sanitization for safe display, message emitters that write to stderr with
emoji→ASCII fallbacks, and the logger-level option parser.
"""

from .db_url import open_repository, resolve_db_url, sanitize_url
from .messages import error, success, warn

__all__ = [
    "open_repository",
    "resolve_db_url",
    "sanitize_url",
    "warn",
    "success",
    "error",
]
