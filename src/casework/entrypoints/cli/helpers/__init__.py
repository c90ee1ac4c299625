"""CLI helpers for casework.

Utilities used by the command-line interface: URL sanitization for safe
display, OSC-8 terminal hyperlinks when supported, stderr message emitters
with emoji→ASCII fallbacks, JSON output, paging options, and translation of
application errors into exit codes.
"""

from .app import get_message_bus
from .db_url import sanitize_url
from .errors import NotFoundException, translate_errors
from .hyperlinks import hyperlink
from .messages import error, success, warn
from .output import emit_json
from .paging import build_page_request, page_options

__all__ = [
    "NotFoundException",
    "build_page_request",
    "emit_json",
    "error",
    "get_message_bus",
    "hyperlink",
    "page_options",
    "sanitize_url",
    "success",
    "translate_errors",
    "warn",
]
