"""
Page Builder

Annotates rendered HTML pages with glossary tooltips. This is the seam between
the site's markup renderer and the annotation context: one annotate call per
page, each with its own state, so pages can be processed in any order.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from gloss.contexts.annotation.annotator import AnnotationResult, GlossaryAnnotator
from gloss.contexts.rendering.exceptions import PageBuildError
from gloss.contexts.rendering.html_tree import parse_html, to_html
from gloss.contexts.rendering.logger import (
    log_build_start,
    log_build_summary,
    log_page_result,
)


@dataclass
class PageBuildResult:
    """
    Outcome of building one page.

    Attributes:
        relative_path: Page path relative to the content directory
        source_path: Source path used for the self-term lookup
        annotation: Annotation summary (None if the page failed)
        output_path: Where the annotated page was written
        error: Failure, if any
    """

    relative_path: Path
    source_path: Path
    annotation: Optional[AnnotationResult] = None
    output_path: Optional[Path] = None
    error: Optional[PageBuildError] = None


@dataclass
class BuildResult:
    """
    Outcome of a whole build.

    Attributes:
        pages: Per-page results in build order
        elapsed_time: Wall time in seconds
        output_dir: Output directory
    """

    pages: List[PageBuildResult] = field(default_factory=list)
    elapsed_time: float = 0.0
    output_dir: Optional[Path] = None

    @property
    def failures(self) -> List[PageBuildResult]:
        return [page for page in self.pages if page.error is not None]

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def tooltip_count(self) -> int:
        return sum(page.annotation.count for page in self.pages if page.annotation)


def annotate_fragment(
    markup: str,
    annotator: GlossaryAnnotator,
    source_path: Union[str, Path, None] = None,
) -> Tuple[str, AnnotationResult]:
    """
    Parse, annotate and re-serialize one HTML fragment.

    Args:
        markup: Rendered HTML
        annotator: Shared annotator
        source_path: Source file the HTML was rendered from (self-term lookup)

    Returns:
        Tuple of (annotated HTML, AnnotationResult)

    Example:
        >>> html, result = annotate_fragment("<p>Le SEO</p>", annotator)
        >>> result.matched_term_ids
        ['seo']
    """
    root = parse_html(markup)
    result = annotator.annotate(root, source_path)
    return to_html(root), result


def build_page(
    page_path: Path,
    content_dir: Path,
    output_dir: Path,
    annotator: GlossaryAnnotator,
    source_suffix: str = ".md",
) -> PageBuildResult:
    """
    Annotate one page file and write it under output_dir.

    The self-term lookup uses the path of the source the page was rendered
    from: content_dir/glossaire/seo.html is looked up as
    content_dir/glossaire/seo.md.

    Raises:
        PageBuildError: If the page cannot be read or written
    """
    relative_path = page_path.relative_to(content_dir)
    source_path = (content_dir / relative_path).with_suffix(source_suffix)
    output_path = output_dir / relative_path

    try:
        markup = page_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PageBuildError("Could not read page", page_path, e) from e

    annotated, annotation = annotate_fragment(markup, annotator, source_path.as_posix())

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(annotated, encoding="utf-8")
    except OSError as e:
        raise PageBuildError("Could not write page", output_path, e) from e

    return PageBuildResult(
        relative_path=relative_path,
        source_path=source_path,
        annotation=annotation,
        output_path=output_path,
    )


def build_pages(
    content_dir: Path,
    output_dir: Path,
    annotator: GlossaryAnnotator,
    pattern: str = "**/*.html",
    source_suffix: str = ".md",
) -> BuildResult:
    """
    Annotate every page under content_dir matching pattern.

    A page that fails is recorded in the result and the build continues.

    Args:
        content_dir: Directory of rendered pages
        output_dir: Directory for annotated pages (mirrors content_dir layout)
        annotator: Shared annotator
        pattern: Glob selecting pages
        source_suffix: Suffix of the source files pages were rendered from

    Returns:
        BuildResult with one PageBuildResult per page
    """
    start = time.time()
    page_paths = sorted(path for path in content_dir.glob(pattern) if path.is_file())
    log_build_start(content_dir, output_dir, len(page_paths))

    result = BuildResult(output_dir=output_dir)
    for page_path in page_paths:
        try:
            page = build_page(page_path, content_dir, output_dir, annotator, source_suffix)
        except PageBuildError as e:
            relative_path = page_path.relative_to(content_dir)
            page = PageBuildResult(
                relative_path=relative_path,
                source_path=page_path,
                error=e,
            )
        log_page_result(page)
        result.pages.append(page)

    result.elapsed_time = time.time() - start
    log_build_summary(result)
    return result
