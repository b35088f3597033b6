# test_chunker.py
import pytest

from pdfsearch.core.chunker import chunk_text, split_documents
from pdfsearch.core.pdf_loader import PageDocument

WORDS = " ".join(f"word{i:03d}" for i in range(300))  # 2399 chars


def test_chunks_never_exceed_chunk_size():
    chunks = chunk_text(WORDS, chunk_size=500, overlap=200)
    assert len(chunks) > 1
    assert all(len(c["text"]) <= 500 for c in chunks)
    assert all(c["end"] - c["start"] <= 500 for c in chunks)


def test_neighbours_overlap_by_configured_length():
    chunks = chunk_text(WORDS, chunk_size=500, overlap=200)
    for prev, nxt in zip(chunks, chunks[1:]):
        assert nxt["start"] == prev["end"] - 200
        assert nxt["start"] > prev["start"]


def test_chunks_cover_whole_text():
    chunks = chunk_text(WORDS, chunk_size=500, overlap=200)
    assert chunks[0]["start"] == 0
    assert chunks[-1]["end"] == len(WORDS)


def test_cut_prefers_whitespace():
    chunks = chunk_text(WORDS, chunk_size=500, overlap=200)
    for c in chunks[:-1]:
        assert WORDS[c["end"]].isspace()


def test_unbroken_text_still_progresses():
    text = "x" * 1234
    chunks = chunk_text(text, chunk_size=500, overlap=200)
    assert [c["start"] for c in chunks] == [0, 300, 600, 900]
    assert chunks[-1]["end"] == 1234


def test_short_text_is_single_chunk():
    assert chunk_text("  hello world  ", chunk_size=500, overlap=200) == [
        {"chunk_id": 0, "start": 0, "end": 15, "text": "hello world"}
    ]


def test_empty_and_whitespace_text():
    assert chunk_text("") == []
    assert chunk_text("   \n\t ") == []


@pytest.mark.parametrize("size,overlap", [(0, 0), (100, 100), (100, 150), (100, -1)])
def test_invalid_window_rejected(size, overlap):
    with pytest.raises(ValueError):
        chunk_text("abc", chunk_size=size, overlap=overlap)


def test_split_documents_merges_page_metadata():
    pages = [
        PageDocument(text=WORDS[:900], metadata={"source": "a.pdf", "loc": {"pageNumber": 1}}),
        PageDocument(text="second page text", metadata={"source": "a.pdf", "loc": {"pageNumber": 2}}),
    ]
    out = split_documents(pages, chunk_size=500, overlap=200)
    assert [c["metadata"]["chunk_index"] for c in out] == list(range(len(out)))
    assert out[-1]["metadata"]["loc"] == {"pageNumber": 2, "start": 0, "end": 16}
    assert out[0]["metadata"]["loc"]["pageNumber"] == 1
    # page metadata itself is not mutated
    assert pages[0].metadata["loc"] == {"pageNumber": 1}
