# flake8: noqa
# scripts/export_openapi.py

"""
애플리케이션의 OpenAPI 문서를 JSON 파일로 저장하는 스크립트입니다.

사용 예:
    python -m scripts.export_openapi --output openapi-spec.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import typer

cli = typer.Typer()


def build_openapi_document() -> Dict[str, Any]:
    """FastAPI 애플리케이션에서 OpenAPI 문서를 생성합니다."""
    from app.main import app

    return app.openapi()


@cli.command()
def main(
    output: Path = typer.Option(Path("openapi-spec.json"), "--output", "-o", help="저장할 파일 경로입니다."),
):
    """
    OpenAPI 명세를 생성하여 파일로 저장합니다.
    """
    document = build_openapi_document()
    output.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    typer.echo(f"OpenAPI specification has been generated at {output.resolve()}")


if __name__ == "__main__":
    cli()
