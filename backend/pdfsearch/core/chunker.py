# chunker.py
"""
Simple chunker: splits text into overlapping chunks by characters.
Produces list of dicts: {'chunk_id', 'start', 'end', 'text'}
"""
import copy
from typing import Dict, Iterable, List


def chunk_text(text: str, chunk_size: int = 500, overlap: int = 200) -> List[Dict]:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    if overlap < 0 or overlap >= chunk_size:
        raise ValueError("overlap must be in [0, chunk_size)")

    chunks = []
    start = 0
    chunk_id = 0
    length = len(text)
    while start < length:
        end = min(start + chunk_size, length)
        # prefer to cut on whitespace, but never at or before the overlap
        if end < length and not text[end].isspace():
            for i in range(end - 1, start + overlap, -1):
                if text[i].isspace():
                    end = i
                    break
        chunk = text[start:end].strip()
        if chunk:
            chunks.append({"chunk_id": chunk_id, "start": start, "end": end, "text": chunk})
            chunk_id += 1
        if end >= length:
            break
        start = end - overlap
    return chunks


def split_documents(pages: Iterable, chunk_size: int = 500, overlap: int = 200) -> List[Dict]:
    """
    Chunk every page and attach a copy of its metadata, extended with the
    chunk's character span (loc.start / loc.end) and a document-wide chunk_index.
    Returns list of dicts: {'text', 'metadata'}
    """
    out = []
    for page in pages:
        for ch in chunk_text(page.text, chunk_size=chunk_size, overlap=overlap):
            md = copy.deepcopy(page.metadata)
            loc = md.setdefault("loc", {})
            loc["start"] = ch["start"]
            loc["end"] = ch["end"]
            md["chunk_index"] = len(out)
            out.append({"text": ch["text"], "metadata": md})
    return out
