#!/usr/bin/env python3
"""
Annotate a single rendered page with glossary tooltips.

Usage:
    python scripts/annotate_page.py dist/guides/intro.html
    python scripts/annotate_page.py dist/glossaire/seo.html --source-path src/content/glossaire/seo.md
    python scripts/annotate_page.py page.html --output page.annotated.html --preset sparse
"""

from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from gloss.contexts.annotation import GlossaryAnnotator
from gloss.contexts.glossary import GlossaryLoadError
from gloss.contexts.rendering import annotate_fragment

app = typer.Typer(help="Annotate one HTML page with glossary tooltips.", add_completion=False)


@app.command()
def main(
    page: Annotated[Path, typer.Argument(help="Rendered HTML page or fragment", exists=True)],
    source_path: Annotated[
        Optional[str],
        typer.Option("--source-path", "-s", help="Source file the page was rendered from"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write annotated HTML here instead of stdout"),
    ] = None,
    glossary: Annotated[
        Optional[Path],
        typer.Option("--glossary", "-g", help="Glossary YAML (default: GLOSSARY_TERMS_PATH)"),
    ] = None,
    preset: Annotated[
        Optional[List[str]],
        typer.Option("--preset", "-p", help="Settings preset to apply (repeatable)"),
    ] = None,
):
    """Annotate PAGE and print the result with a summary of matched terms."""
    try:
        annotator = GlossaryAnnotator.from_config(terms_path=glossary, presets=preset)
    except (GlossaryLoadError, FileNotFoundError, ValueError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    try:
        markup = page.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"ERROR: Could not read {page}: {e}", err=True)
        raise typer.Exit(1)

    annotated, result = annotate_fragment(
        markup, annotator, source_path or page.with_suffix(".md").as_posix()
    )

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(annotated, encoding="utf-8")
        typer.echo(f"Wrote {output}", err=True)
    else:
        typer.echo(annotated)

    typer.echo(f"\n=== Tooltips ({result.count}/{result.max_annotations}) ===", err=True)
    for term_id in result.matched_term_ids:
        typer.echo(f"  {term_id}", err=True)
    if result.self_term_id:
        typer.echo(f"  (self term skipped: {result.self_term_id})", err=True)
    if result.preexisting:
        typer.echo(f"  ({result.preexisting} tooltips already present)", err=True)


if __name__ == "__main__":
    app()
