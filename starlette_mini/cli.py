#!/usr/bin/env python3
"""
starlette-mini CLI — минификация HTML из командной строки.

Использование:
    starlette-mini --help

Команды:
    minify      — Минифицировать HTML файл (или stdin)
    policy      — Показать политику минификации
    serve       — Запустить демо-приложение
"""

import json
import sys
from typing import Optional

import click

from starlette_mini.core.config import settings
from starlette_mini.core.minifier import minify_bytes
from starlette_mini.core.policy import DEFAULT_POLICY
from starlette_mini.utils.errors import MinificationError


@click.group()
@click.version_option(package_name="starlette-mini")
def cli():
    """starlette-mini CLI — HTML минификация с фиксированной политикой."""


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--output", "-o", type=click.File("wb"), default="-", help="Output file")
@click.option("--stats", "-s", is_flag=True, help="Print sizes to stderr")
def minify(source, output, stats: bool):
    """Минифицировать HTML документ."""
    body = source.read()
    try:
        minified = minify_bytes(body, DEFAULT_POLICY)
    except MinificationError as e:
        raise click.ClickException(e.message)

    output.write(minified)

    if stats:
        saved = len(body) - len(minified)
        ratio = (saved / len(body) * 100) if body else 0.0
        click.echo(
            f"{len(body)} -> {len(minified)} bytes (-{saved}, {ratio:.1f}%)",
            err=True,
        )


@cli.command()
def policy():
    """Политика минификации в JSON."""
    click.echo(json.dumps(DEFAULT_POLICY.to_dict(), indent=2))


@cli.command()
@click.option("--host", default=None, help=f"Bind address (default {settings.HOST})")
@click.option("--port", type=int, default=None, help=f"Port (default {settings.PORT})")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Запустить демо-приложение через uvicorn."""
    import uvicorn

    uvicorn.run(
        "starlette_mini.main:app",
        host=host or settings.HOST,
        port=port or settings.PORT,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    sys.exit(cli())
