"""
parse_script.py

End-to-end parse of a document into a Script.

Overview
--------
Given a DocumentSource (page count + optional text per page), this module:

1) Pulls text page by page, in order, one newline after each page.
2) Splits it into trimmed, non-empty raw lines.
3) Classifies and merges raw lines into logical lines (one forward pass).
4) Numbers the logical lines 1..N.
5) Derives Act/Scene sections from the cached classifications.
6) Assembles the Script in one step and returns it.

Failure model
-------------
Only a document without content is an error: zero pages, or no extractable
text on any page, raises InputError before any Script exists. Lines that
match no heuristic are Dialogue, silently.

Progress
--------
`progress(fraction, current_page)` is an optional observer. It is called
before each page and once with 1.0 at the end. If it raises, it is
detached for the remainder of the parse; the result is the same whether or
not anyone is listening.

- Deterministic: identical page text -> identical lines and sections.
- No shared mutable state: independent parses may run on separate threads.
"""
from __future__ import annotations

import os
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from tqdm import tqdm

from script_structure.errors import InputError
from script_structure.io.document_source import DocumentSource, TextPagesSource, open_pdf_source
from script_structure.io.jsonio import dump_script
from script_structure.models import Script
from script_structure.pipeline.segmentation import number_lines, segment_lines
from script_structure.pipeline.structure import extract_sections
from script_structure.text.cleaners import split_raw_lines
from script_structure.text.vocabulary import DEFAULT_CONFIG, ClassifierConfig

ProgressCallback = Callable[[float, int], None]


class _Progress:
    """Forwards progress to an observer until the observer fails once."""

    def __init__(self, callback: Optional[ProgressCallback], *, verbose: bool = False):
        self._callback = callback
        self._verbose = verbose

    def __call__(self, fraction: float, current_page: int) -> None:
        if self._callback is None:
            return
        try:
            self._callback(fraction, current_page)
        except Exception as exc:
            self._callback = None
            if self._verbose:
                print(f"[warn] progress observer failed, detached: {exc!r}", flush=True)


def extract_text(
    source: DocumentSource,
    *,
    progress: Optional[ProgressCallback] = None,
    show_progress: bool = False,
    verbose: bool = False,
) -> str:
    """
    Concatenate the text of every page, each followed by a newline.

    Pages with no text (text_for_page() -> None) are skipped.
    """
    notify = progress if isinstance(progress, _Progress) else _Progress(progress, verbose=verbose)
    page_count = source.page_count

    parts: List[str] = []
    missing = 0
    pages = range(page_count)
    for page_idx in tqdm(pages, desc="pages", disable=not show_progress):
        notify(page_idx / page_count, page_idx + 1)
        text = source.text_for_page(page_idx)
        if text is None:
            missing += 1
            continue
        parts.append(text + "\n")

    if verbose and missing:
        print(f"[info] pages without text: {missing}/{page_count}", flush=True)
    return "".join(parts)


def parse_script(
    source: DocumentSource,
    name: str,
    *,
    config: ClassifierConfig = DEFAULT_CONFIG,
    progress: Optional[ProgressCallback] = None,
    show_progress: bool = False,
    verbose: bool = False,
    dump_path: Optional[str] = None,
    script_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> Script:
    """
    Parse a document into a Script.

    Args:
        source: Anything with `page_count` and `text_for_page(index)`.
        name: Name given to the resulting Script.
        config: Classifier configuration (patterns, vocabulary, thresholds).
        progress: Optional observer called as progress(fraction, current_page).
        show_progress: Show a tqdm bar over pages.
        verbose: Print [phase]/[info]/[ok] lines.
        dump_path: If set, the finished Script is also written there as JSON.
        script_id: Fixed id instead of a fresh UUID4.
        created_at: Fixed creation time instead of now (UTC).

    Returns:
        The complete Script. Nothing is returned or stored on failure.

    Raises:
        InputError: the document has no pages or no extractable text.
    """
    notify = _Progress(progress, verbose=verbose)

    page_count = source.page_count
    if page_count <= 0:
        raise InputError(f"{name!r}: document has no pages", page_count=page_count)

    if verbose:
        print(f"[phase] extract text from {page_count} pages...", flush=True)
    text = extract_text(source, progress=notify, show_progress=show_progress, verbose=verbose)

    raw_lines = split_raw_lines(text)
    if not raw_lines:
        raise InputError(
            f"{name!r}: no extractable text across {page_count} pages",
            page_count=page_count,
        )

    if verbose:
        print(f"[phase] segment {len(raw_lines)} raw lines...", flush=True)
    logical = segment_lines(raw_lines, config=config)
    lines = number_lines(logical)
    sections = extract_sections(lines, [ll.line_type for ll in logical], config=config)

    script = Script(
        id=script_id or str(uuid.uuid4()),
        name=name,
        created_at=created_at or datetime.now(timezone.utc),
        lines=tuple(lines),
        sections=tuple(sections),
    )
    notify(1.0, page_count)

    if verbose:
        merged = sum(1 for ll in logical if ll.merged)
        print(
            f"[info] raw_lines={len(raw_lines)} lines={len(lines)} "
            f"merged={merged} sections={len(sections)}",
            flush=True,
        )

    if dump_path:
        dump_script(script, dump_path)
        if verbose:
            print(f"[ok] script {name!r} -> {dump_path}", flush=True)

    return script


def parse_text(text: str, name: str, **kwargs: Any) -> Script:
    """Parse already-extracted text as a single-page document."""
    return parse_script(TextPagesSource([text]), name, **kwargs)


def parse_pdf(
    pdf_path: str,
    name: Optional[str] = None,
    *,
    pdf_open: Optional[Callable[..., Any]] = None,
    **kwargs: Any,
) -> Script:
    """Parse a PDF file. The script name defaults to the file name without extension."""
    if name is None:
        name = os.path.splitext(os.path.basename(pdf_path))[0]
    open_kwargs = {"pdf_open": pdf_open} if pdf_open is not None else {}
    with open_pdf_source(pdf_path, **open_kwargs) as source:
        return parse_script(source, name, **kwargs)
