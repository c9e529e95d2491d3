#!/usr/bin/env python3
"""
Site Tooltip Build CLI

Annotates every rendered page of a content directory with glossary tooltips
and mirrors the result into an output directory.

Examples:\n

    build_site.py dist/ dist_annotated/

    build_site.py site/src/content/ out/ --pattern "**/*.htm"

    build_site.py dist/ out/ --preset sparse --preset english
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from gloss.contexts.annotation import GlossaryAnnotator
from gloss.contexts.glossary import GlossaryLoadError
from gloss.contexts.rendering import build_pages
from gloss.contexts.rendering.logger import setup_rendering_logger
from gloss.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Annotate a directory of rendered pages.", add_completion=False)


@app.command()
def main(
    content_dir: Annotated[
        Path, typer.Argument(help="Directory of rendered pages", exists=True, file_okay=False)
    ],
    output_dir: Annotated[Path, typer.Argument(help="Directory for annotated pages")],
    pattern: Annotated[
        str, typer.Option("--pattern", help="Glob selecting pages")
    ] = "**/*.html",
    source_suffix: Annotated[
        str, typer.Option("--source-suffix", help="Suffix of the source files pages came from")
    ] = ".md",
    glossary: Annotated[
        Optional[Path],
        typer.Option("--glossary", "-g", help="Glossary YAML (default: GLOSSARY_TERMS_PATH)"),
    ] = None,
    preset: Annotated[
        Optional[List[str]],
        typer.Option("--preset", "-p", help="Settings preset to apply (repeatable)"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show one line per page on the console")
    ] = False,
):
    """Annotate every page under CONTENT_DIR into OUTPUT_DIR."""
    log_dir = LOGS_PATH / f"build_{now()}"
    log_file = setup_rendering_logger(log_dir, content_dir, verbose)
    typer.echo(f"Log file: {log_file}")

    try:
        annotator = GlossaryAnnotator.from_config(terms_path=glossary, presets=preset)
    except (GlossaryLoadError, FileNotFoundError, ValueError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    result = build_pages(content_dir, output_dir, annotator, pattern, source_suffix)

    if not result.success:
        typer.secho(f"\n{len(result.failures)} pages failed", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.secho(
        f"\n✓ {len(result.pages)} pages, {result.tooltip_count} tooltips",
        fg=typer.colors.GREEN,
    )


if __name__ == "__main__":
    app()
