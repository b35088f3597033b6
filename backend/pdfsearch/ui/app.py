# backend/pdfsearch/ui/app.py
# Run with: streamlit run backend/pdfsearch/ui/app.py
import logging
import uuid

import streamlit as st

from pdfsearch.core.config import settings
from pdfsearch.logging_config import setup_logging
from pdfsearch.ui.client import SearchClient, SearchClientError
from pdfsearch.ui.tabs import TabSession

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="PDF Search", layout="wide")

# ---- session state ----
if "tabs" not in st.session_state:
    st.session_state.tabs = TabSession()
if "collection" not in st.session_state:
    st.session_state.collection = f"session-{uuid.uuid4().hex[:12]}"

session: TabSession = st.session_state.tabs
client = SearchClient()


# ---- actions ----
def upload_pdf(pdf):
    try:
        with st.spinner("Uploading..."):
            data = client.upload(pdf.name, pdf.getvalue(), st.session_state.collection)
    except SearchClientError as e:
        logger.error(f"error while uploading pdf: {e}")
        st.error(f"Upload failed: {e}")
        return
    logger.info(f"PDF upload response: {data}")
    st.success(f"{data.get('message', 'Uploaded')} ({data.get('chunks', 0)} chunks)")


def run_search(question: str):
    try:
        with st.spinner("Searching..."):
            data = client.query(question, st.session_state.collection)
    except SearchClientError as e:
        logger.error(f"error while searching: {e}")
        st.error(f"Search failed: {e}")
        return
    session.add_tab(question, data.get("answer", ""), data.get("sources", []))


def on_overflow_search():
    session.set_overflow_search(st.session_state.overflow_search_input)


# ---- upload panel ----
with st.sidebar:
    st.header("Document Upload")
    st.caption("Upload your PDF file")
    st.text_input("Collection", key="collection", help="Uploads and searches use this namespace")
    pdf = st.file_uploader("Drop your PDF here", type=["pdf"])
    if pdf is not None:
        st.caption(f"{pdf.name} · PDF Document · {pdf.size / 1024 / 1024:.2f} MB")
        if st.button("Upload"):
            upload_pdf(pdf)
    st.divider()
    strip_width = st.slider(
        "Tab strip width (px)", min_value=200, max_value=2400, value=settings.TAB_STRIP_WIDTH, step=20
    )

# ---- search panel ----
st.title("Search Content")
with st.form("search", clear_on_submit=True):
    question = st.text_input(
        "Query", key="question", placeholder="Enter your search query...", label_visibility="collapsed"
    )
    submitted = st.form_submit_button("Search")
if submitted and question.strip():
    run_search(question.strip())

# ---- tab strip ----
visible, overflow = session.layout(strip_width)
if session.tabs:
    columns = st.columns(len(visible) + 1) if visible else [st.container()]
    for col, tab in zip(columns, visible):
        with col:
            left, right = st.columns([5, 1])
            left.button(
                tab.query[:24] or "(empty)",
                key=f"tab-{tab.id}",
                type="primary" if tab.id == session.active_id else "secondary",
                on_click=session.select,
                args=(tab.id,),
                use_container_width=True,
            )
            right.button("✕", key=f"close-{tab.id}", on_click=session.close_tab, args=(tab.id,))

    if overflow:
        with columns[-1]:
            with st.expander(f"+{len(overflow)}"):
                st.text_input(
                    "Search tabs...",
                    key="overflow_search_input",
                    on_change=on_overflow_search,
                )
                filtered = session.filtered_overflow(overflow)
                items = session.page_items(filtered)
                if not items:
                    st.caption("No tabs found")
                for tab in items:
                    left, right = st.columns([5, 1])
                    left.button(
                        tab.query[:40] or "(empty)",
                        key=f"ovf-{tab.id}",
                        on_click=session.select,
                        args=(tab.id,),
                        use_container_width=True,
                    )
                    right.button("✕", key=f"ovf-close-{tab.id}", on_click=session.close_tab, args=(tab.id,))
                pages = session.total_pages(filtered)
                if pages > 1:
                    prev_col, label_col, next_col = st.columns([1, 2, 1])
                    prev_col.button(
                        "‹",
                        key="ovf-prev",
                        disabled=session.overflow_page == 0,
                        on_click=session.prev_page,
                        args=(filtered,),
                    )
                    label_col.caption(f"{session.overflow_page + 1} / {pages}")
                    next_col.button(
                        "›",
                        key="ovf-next",
                        disabled=session.overflow_page >= pages - 1,
                        on_click=session.next_page,
                        args=(filtered,),
                    )

# ---- results ----
active = session.active_tab
if active is not None:
    st.subheader(active.query)
    st.caption(active.timestamp)
    st.markdown("#### Search Results")
    st.markdown(active.answer)
    if active.sources:
        with st.expander(f"Sources ({len(active.sources)})"):
            for source in active.sources:
                st.json(source)
else:
    st.info("No active search. Enter a query and click Search to begin.")
