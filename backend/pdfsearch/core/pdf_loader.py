# backend/pdfsearch/core/pdf_loader.py
"""PDF text extraction: one PageDocument per page that has text."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from pypdf import PdfReader

logger = logging.getLogger(__name__)


@dataclass
class PageDocument:
    text: str
    metadata: Dict = field(default_factory=dict)


def _document_info(reader: PdfReader) -> Dict[str, str]:
    info = reader.metadata or {}
    return {str(k).lstrip("/"): str(v) for k, v in info.items()}


def load_pdf(path: Union[str, Path], source_name: Optional[str] = None) -> List[PageDocument]:
    pdf_path = Path(path)
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    reader = PdfReader(str(pdf_path))
    pdf_meta = {
        "version": reader.pdf_header.replace("%PDF-", ""),
        "info": _document_info(reader),
        "totalPages": len(reader.pages),
    }
    source = source_name or pdf_path.name

    pages: List[PageDocument] = []
    for page_number, page in enumerate(reader.pages, start=1):
        text = page.extract_text() or ""
        if not text.strip():
            continue
        pages.append(
            PageDocument(
                text=text,
                metadata={
                    "source": source,
                    "pdf": dict(pdf_meta),
                    "loc": {"pageNumber": page_number},
                },
            )
        )

    logger.info(f"Loaded {source} | pages={pdf_meta['totalPages']} | pages_with_text={len(pages)}")
    return pages
