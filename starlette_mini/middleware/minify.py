"""Middleware минификации HTML ответов."""

from typing import List, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from starlette_mini.core.minifier import is_html, minify_bytes
from starlette_mini.core.policy import DEFAULT_POLICY
from starlette_mini.utils.errors import MinificationError
from starlette_mini.utils.logger import logger

NO_BODY_STATUS_CODES = (204, 304)


async def read_body(response: Response) -> bytes:
    """Собрать тело ответа целиком, в том числе из body_iterator."""
    body_iterator = getattr(response, "body_iterator", None)
    if body_iterator is None:
        return bytes(response.body)

    chunks: List[bytes] = []
    async for chunk in body_iterator:
        if isinstance(chunk, str):
            chunk = chunk.encode(getattr(response, "charset", "utf-8"))
        chunks.append(bytes(chunk))
    return b"".join(chunks)


def replace_body(response: Response, body: bytes) -> Response:
    """
    Новый ответ с тем же статусом и заголовками, но другим телом.

    Content-Length заменяется на месте (или добавляется), остальные
    заголовки, включая повторяющиеся, сохраняются в исходном порядке.
    """
    new_response = Response(
        content=body,
        status_code=response.status_code,
        background=getattr(response, "background", None),
    )

    content_length = str(len(body)).encode("latin-1")
    raw_headers: List[Tuple[bytes, bytes]] = []
    replaced = False
    for key, value in response.raw_headers:
        if key.lower() == b"content-length":
            if not replaced:
                raw_headers.append((key, content_length))
                replaced = True
            continue
        raw_headers.append((key, value))
    if not replaced:
        raw_headers.append((b"content-length", content_length))

    new_response.raw_headers = raw_headers
    return new_response


async def html_minifier(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """
    Минифицировать ответ, если это HTML.

    Подходит для ``@app.middleware("http")``. Ошибки обработчика
    пробрасываются как есть, ошибки минификации нет: в этом случае
    клиент получает исходное тело.
    """
    response = await call_next(request)

    content_type = response.headers.get("content-type")
    if not is_html(content_type):
        return response

    # У 1xx, 204 и 304 нет тела, Content-Length добавлять нельзя
    if response.status_code < 200 or response.status_code in NO_BODY_STATUS_CODES:
        return response

    body = await read_body(response)

    try:
        minified = minify_bytes(body, DEFAULT_POLICY)
    except MinificationError as e:
        logger.warning(
            f"HTML minification failed for {request.url.path}, sending original body: {e.message}",
            exc_info=True,
            path=request.url.path,
            original_size=len(body),
            content_type=content_type,
        )
        minified = body
    else:
        logger.log_minification(
            path=request.url.path,
            original_size=len(body),
            minified_size=len(minified),
        )

    return replace_body(response, minified)


class HTMLMinifyMiddleware(BaseHTTPMiddleware):
    """Middleware для минификации HTML ответов с фиксированной политикой."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        return await html_minifier(request, call_next)
