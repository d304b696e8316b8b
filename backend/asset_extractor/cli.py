"""
Command-line extractor.

    asset-extractor https://example.com
    asset-extractor https://example.com --render --max-buttons 10

Prints the result as JSON. Exit code 1 if the extraction failed.
"""

import asyncio
import json
from typing import Optional

import typer

from asset_extractor.extractor import extract_assets

app = typer.Typer(
    name="asset-extractor",
    help="Extract buttons and layout templates from a web page.",
    add_completion=False,
)


@app.command()
def extract(
    url: str = typer.Argument(..., help="Page to extract from (http or https)"),
    render: Optional[bool] = typer.Option(
        None,
        "--render/--no-render",
        help="Render with headless Chromium before extracting (default: RENDER_JS setting)",
    ),
    max_buttons: Optional[int] = typer.Option(None, "--max-buttons", help="Buttons to keep"),
    max_templates: Optional[int] = typer.Option(None, "--max-templates", help="Templates to keep"),
):
    """Extract assets from URL and print them as JSON."""
    result = asyncio.run(
        extract_assets(
            url,
            render=render,
            max_buttons=max_buttons,
            max_templates=max_templates,
        )
    )
    typer.echo(json.dumps(result, indent=2, ensure_ascii=False))
    if not result["success"]:
        raise typer.Exit(1)


def main():
    app()


if __name__ == "__main__":
    main()
