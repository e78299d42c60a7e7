"""Минификация HTML через minify-html."""

from typing import Optional

import minify_html

from starlette_mini.core.policy import DEFAULT_POLICY, MinifyPolicy
from starlette_mini.utils.errors import MinificationError

HTML_CONTENT_TYPE = "text/html"


def is_html(content_type: Optional[str]) -> bool:
    """
    Проверка заголовка Content-Type на HTML.

    Поиск подстроки, а не разбор MIME: "text/html; charset=utf-8" тоже HTML.
    """
    if content_type is None:
        return False
    return HTML_CONTENT_TYPE in content_type


def minify_bytes(body: bytes, policy: MinifyPolicy = DEFAULT_POLICY) -> bytes:
    """
    Минифицировать HTML документ.

    Args:
        body: Исходный документ в UTF-8
        policy: Политика минификации

    Returns:
        Минифицированный документ в UTF-8

    Raises:
        MinificationError: Тело не декодируется или minify-html упал
    """
    try:
        source = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MinificationError("Тело ответа не является корректным UTF-8", e) from e

    try:
        minified = minify_html.minify(source, **policy.as_kwargs())
    except (KeyboardInterrupt, SystemExit):
        raise
    except BaseException as e:
        # паники pyo3 наследуются от BaseException
        raise MinificationError(f"minify-html: {type(e).__name__}: {e}", e) from e

    return minified.encode("utf-8")
