import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from starlette_mini.main import app as demo_app
from starlette_mini.middleware.minify import HTMLMinifyMiddleware

SAMPLE_HTML = "<html><body><!-- comment -->  <h1>Hi</h1>  </body></html>"


def build_app() -> FastAPI:
    """Приложение с набором ответов разных типов под middleware."""
    test_app = FastAPI()
    test_app.add_middleware(HTMLMinifyMiddleware)

    @test_app.get("/sample", response_class=HTMLResponse)
    async def sample():
        return SAMPLE_HTML

    @test_app.get("/charset")
    async def charset():
        return Response(content=SAMPLE_HTML, media_type="text/html; charset=utf-8")

    @test_app.get("/json")
    async def json_endpoint():
        return JSONResponse({"a": 1}, headers={"X-Custom": "kept"})

    @test_app.get("/text")
    async def text():
        return PlainTextResponse("  <!-- not html -->  ")

    @test_app.get("/no-content-type")
    async def no_content_type():
        return Response(content=b"<p>  raw  </p>")

    @test_app.get("/latin1")
    async def latin1():
        return Response(content=b"<p>  caf\xe9  </p>", media_type="text/html")

    @test_app.get("/not-found")
    async def not_found():
        return HTMLResponse("<html>  <body>  <!-- x --> <p>Missing</p> </body> </html>", status_code=404)

    @test_app.api_route("/both", methods=["GET", "HEAD"], response_class=HTMLResponse)
    async def both():
        return SAMPLE_HTML

    @test_app.get("/empty")
    async def empty():
        return Response(status_code=204, media_type="text/html")

    @test_app.get("/cookies")
    async def cookies():
        response = HTMLResponse("<div>   <p>a</p>   </div>")
        response.set_cookie("first", "1")
        response.set_cookie("second", "2")
        return response

    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("downstream failure")

    return test_app


@pytest.fixture
def client():
    """Фикстура тестового клиента."""
    with TestClient(build_app()) as test_client:
        yield test_client


@pytest.fixture
def demo_client():
    """Клиент демо-приложения."""
    with TestClient(demo_app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client():
    """Асинхронный клиент поверх ASGI транспорта."""
    transport = ASGITransport(app=build_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
