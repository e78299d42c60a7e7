"""HTML minification middleware for Starlette and FastAPI."""

from starlette_mini.core.minifier import is_html, minify_bytes
from starlette_mini.core.policy import DEFAULT_POLICY, MinifyPolicy
from starlette_mini.middleware.minify import HTMLMinifyMiddleware, html_minifier
from starlette_mini.utils.errors import MinificationError, MiniError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_POLICY",
    "HTMLMinifyMiddleware",
    "MinificationError",
    "MiniError",
    "MinifyPolicy",
    "html_minifier",
    "is_html",
    "minify_bytes",
]
