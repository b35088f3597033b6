# backend/pdfsearch/ui/tabs.py
"""
In-memory query tabs for one UI session.

A tab is created only for a successful query. The strip shows as many tabs as
fit at a fixed per-tab width; the rest go to a searchable overflow list that
is paged OVERFLOW_PAGE_SIZE at a time.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pdfsearch.core.config import settings


@dataclass
class QueryTab:
    id: int
    query: str
    answer: str
    sources: List[Dict[str, Any]] = field(default_factory=list)
    timestamp: str = ""


class TabSession:
    def __init__(
        self,
        tab_width: int = settings.TAB_WIDTH,
        padding: int = settings.TAB_STRIP_PADDING,
        page_size: int = settings.OVERFLOW_PAGE_SIZE,
    ):
        self.tab_width = tab_width
        self.padding = padding
        self.page_size = page_size
        self.tabs: List[QueryTab] = []
        self.active_id: Optional[int] = None
        self.overflow_search = ""
        self.overflow_page = 0
        self._next_id = 1
        self._strip_width: Optional[int] = None

    # ---------- tabs ----------
    def add_tab(self, query: str, answer: str, sources: Optional[List[Dict[str, Any]]] = None) -> QueryTab:
        tab = QueryTab(
            id=self._next_id,
            query=query,
            answer=answer,
            sources=list(sources or []),
            timestamp=datetime.now().strftime("%H:%M:%S"),
        )
        self._next_id += 1
        self.tabs.append(tab)
        self.active_id = tab.id
        self.overflow_page = 0
        return tab

    def close_tab(self, tab_id: int):
        self.tabs = [t for t in self.tabs if t.id != tab_id]
        if self.active_id == tab_id:
            self.active_id = self.tabs[-1].id if self.tabs else None
        _, overflow = self.layout(self._strip_width)
        self.clamp_page(self.filtered_overflow(overflow))

    def select(self, tab_id: int):
        if any(t.id == tab_id for t in self.tabs):
            self.active_id = tab_id

    @property
    def active_tab(self) -> Optional[QueryTab]:
        return next((t for t in self.tabs if t.id == self.active_id), None)

    # ---------- strip layout ----------
    def max_visible(self, strip_width: int) -> int:
        return max(0, (strip_width - self.padding) // self.tab_width)

    def layout(self, strip_width: Optional[int]) -> Tuple[List[QueryTab], List[QueryTab]]:
        """
        Split tabs into (visible, overflow). Recompute after every width or tab-list change.
        """
        self._strip_width = strip_width
        if strip_width is None or not self.tabs:
            return list(self.tabs), []
        n = self.max_visible(strip_width)
        return self.tabs[:n], self.tabs[n:]

    # ---------- overflow menu ----------
    def set_overflow_search(self, text: str):
        self.overflow_search = text or ""
        self.overflow_page = 0

    def filtered_overflow(self, overflow: List[QueryTab]) -> List[QueryTab]:
        needle = self.overflow_search.lower()
        return [t for t in overflow if needle in t.query.lower()]

    def total_pages(self, filtered: List[QueryTab]) -> int:
        return math.ceil(len(filtered) / self.page_size)

    def clamp_page(self, filtered: List[QueryTab]) -> int:
        last = max(self.total_pages(filtered) - 1, 0)
        self.overflow_page = min(max(self.overflow_page, 0), last)
        return self.overflow_page

    def page_items(self, filtered: List[QueryTab]) -> List[QueryTab]:
        page = self.clamp_page(filtered)
        start = page * self.page_size
        return filtered[start : start + self.page_size]

    def next_page(self, filtered: List[QueryTab]):
        self.overflow_page += 1
        self.clamp_page(filtered)

    def prev_page(self, filtered: List[QueryTab]):
        self.overflow_page -= 1
        self.clamp_page(filtered)
