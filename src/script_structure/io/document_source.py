"""
document_source.py

The upstream capability the parser reads from: a page count and optional
text per page. The parser never sees the document format itself.

Two implementations:
    - TextPagesSource: pages already held as strings (tests, plain text input)
    - PdfDocumentSource: pages of an open pdfplumber document, extracted lazily
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional, Protocol, Sequence

import pdfplumber


class DocumentSource(Protocol):
    @property
    def page_count(self) -> int: ...

    def text_for_page(self, index: int) -> Optional[str]: ...


class TextPagesSource:
    """Pages given up front. A None entry stands for a page with no text layer."""

    def __init__(self, pages: Sequence[Optional[str]]):
        self._pages: List[Optional[str]] = list(pages)

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def text_for_page(self, index: int) -> Optional[str]:
        if not 0 <= index < len(self._pages):
            return None
        return self._pages[index]


class PdfDocumentSource:
    """Wraps an already-open pdfplumber PDF (or anything with `.pages[i].extract_text()`)."""

    def __init__(self, pdf: Any):
        self._pdf = pdf

    @property
    def page_count(self) -> int:
        return len(self._pdf.pages)

    def text_for_page(self, index: int) -> Optional[str]:
        if not 0 <= index < self.page_count:
            return None
        return self._pdf.pages[index].extract_text()


@contextmanager
def open_pdf_source(
    pdf_path: str,
    *,
    pdf_open: Callable[..., Any] = pdfplumber.open,
) -> Iterator[PdfDocumentSource]:
    """
    Open a PDF and yield it as a DocumentSource.

    The file stays open for the duration of the with-block, so pages can be
    extracted one at a time while the parser reports progress.
    """
    with pdf_open(pdf_path) as pdf:
        yield PdfDocumentSource(pdf)
