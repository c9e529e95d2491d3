#!/usr/bin/env python3
"""
Validate the glossary file before a build.

Usage:
    python scripts/validate_glossary.py
    python scripts/validate_glossary.py data/glossary_terms.yaml --rules
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from gloss.contexts.annotation import build_match_index
from gloss.contexts.glossary import GlossaryLoadError, TermDictionary

app = typer.Typer(help="Validate the glossary file.", add_completion=False)


@app.command()
def main(
    path: Annotated[
        Optional[Path], typer.Argument(help="Glossary YAML (default: GLOSSARY_TERMS_PATH)")
    ] = None,
    rules: Annotated[
        bool, typer.Option("--rules", help="Show match rules in resolution order")
    ] = False,
):
    """Load the glossary and report terms, variants and conflicts."""
    try:
        dictionary = TermDictionary.from_yaml(path)
    except GlossaryLoadError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"\n=== Terms ({len(dictionary)}) ===")
    for term in dictionary:
        typer.echo(f"  {term.slug}: {term.title} [{term.category}, {term.difficulty}]")
        typer.echo(f"    variants: {', '.join(term.variants)}")

    # Related terms pointing outside the glossary
    warnings = []
    for term in dictionary:
        for related in term.related_terms:
            if related not in dictionary:
                warnings.append(f"{term.slug}: related term '{related}' not in glossary")

    for variant, slugs in dictionary.shared_variants().items():
        warnings.append(f"variant '{variant}' shared by {', '.join(slugs)}")

    if rules:
        typer.echo("\n=== Match Rules (resolution order) ===")
        for rule in build_match_index(dictionary):
            typer.echo(f"  {rule.variant!r} -> {rule.term_id}")

    if warnings:
        typer.echo("\n=== Warnings ===")
        for w in warnings:
            typer.echo(f"  ! {w}")

    typer.secho("\n✓ Glossary valid", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
