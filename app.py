import logging

import streamlit as st
import pandas as pd
import plotly.express as px

from components.benchmark import run_benchmark, summarize
from components.work_loads import WorkLoad
from wordtrie import Trie, TrieError, WordListError, parse_word_list

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
log = logging.getLogger("app")

# Configure page
st.set_page_config(
    page_title="Word Trie Bench",
    page_icon="🔎",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Main title
st.title("🔎 Word Trie Containment Bench")
st.markdown("---")


def new_trie():
    return Trie(strict=st.session_state.get("strict", False),
                prune=st.session_state.get("prune", False))


def decode_upload(uploaded_file):
    """Turn an uploaded .json array or text file into a list of strings."""
    try:
        raw = uploaded_file.getvalue().decode("utf-8")
    except UnicodeDecodeError as e:
        raise WordListError(f"cannot decode {uploaded_file.name} as utf-8: {e}") from e
    return parse_word_list(raw, uploaded_file.name)


# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Home", "Dictionary", "Lookup", "Benchmark"]
    )

    st.markdown("---")
    st.subheader("Trie Options")
    st.checkbox("Strict bookkeeping", key="strict",
                help="Reject duplicate adds and deletes of non-entry prefixes")
    st.checkbox("Prune on delete", key="prune",
                help="Remove empty nodes left behind by a delete")
    min_depth = st.number_input("Minimum depth (is_contained)", min_value=0, value=3, step=1)

    st.markdown("---")
    st.subheader("Quick Actions")
    if st.button("🗑️ Reset Trie"):
        st.session_state.pop("trie", None)
        st.session_state.pop("words", None)
        st.rerun()


trie = st.session_state.get("trie")

# Main content area
if page == "Home":
    st.header("Dictionary Containment Testing")

    st.markdown("""
    Load a word list into a case-insensitive trie, then check whether any
    entry occurs inside arbitrary text.

    **Sections:**
    - 📁 Dictionary: upload a word list or generate one
    - 🔍 Lookup: exact lookup, substring containment and deletion
    - ⏱️ Benchmark: timing of `find` and `is_contained` over synthetic queries
    """)

    col1, col2, col3, col4 = st.columns(4)

    if trie is None:
        with col1:
            st.metric("Entries", "0", "No dictionary loaded")
        with col2:
            st.metric("Terminal Nodes", "0")
        with col3:
            st.metric("Nodes", "1")
        with col4:
            st.metric("Avg Branching", "0.00")
    else:
        with col1:
            st.metric("Entries", f"{trie.count():,}")
        with col2:
            st.metric("Terminal Nodes", f"{trie.count_terminals():,}",
                      f"{trie.count_terminals() - trie.count():+,} vs count")
        with col3:
            st.metric("Nodes", f"{trie.count_nodes():,}")
        with col4:
            st.metric("Avg Branching", f"{trie.count_nodes(get_avg_branch_factor=True):.2f}")

elif page == "Dictionary":
    st.header("📁 Dictionary")

    tab1, tab2 = st.tabs(["Upload", "Generate"])

    with tab1:
        uploaded_file = st.file_uploader(
            "Choose a word list",
            type=["json", "txt"],
            help="A JSON array of strings, or one word per line"
        )

        if uploaded_file is not None:
            try:
                words = decode_upload(uploaded_file)
                t = new_trie()
                t.load(words)
                st.session_state["trie"] = t
                st.session_state["words"] = words
                log.info("Loaded %s words from upload %s", f"{len(words):,}", uploaded_file.name)
                st.success(f"✅ Loaded {len(words):,} entries")
            except (WordListError, TrieError) as e:
                st.error(f"❌ Error loading word list: {str(e)}")

    with tab2:
        col1, col2 = st.columns(2)
        with col1:
            num_words = st.number_input("Words", min_value=1, max_value=200_000, value=5_000, step=1_000)
            seed = st.number_input("Seed", min_value=0, value=42, step=1)
        with col2:
            len_range = st.slider("Word length", min_value=1, max_value=20, value=(3, 10))
            unique = st.checkbox("Unique words", value=True)

        if st.button("Generate"):
            try:
                words = WorkLoad(seed=int(seed)).words(int(num_words), len_range[0], len_range[1], unique=unique)
                t = new_trie()
                t.load(words)
                st.session_state["trie"] = t
                st.session_state["words"] = words
                st.success(f"✅ Generated and loaded {len(words):,} entries")
            except (ValueError, TrieError) as e:
                st.error(f"❌ {str(e)}")

    if "words" in st.session_state:
        st.subheader("Sample Entries")
        st.dataframe(pd.DataFrame({"word": st.session_state["words"][:50]}))

elif page == "Lookup":
    st.header("🔍 Lookup")

    if trie is None:
        st.info("📁 Please load a dictionary in the 'Dictionary' section first")
    else:
        text = st.text_input("Text")

        col1, col2, col3 = st.columns(3)
        with col1:
            if st.button("find"):
                st.write(f"`find({text!r})` → **{trie.find(text)}**")
        with col2:
            if st.button("is_contained"):
                found, entry = trie.is_contained(text, int(min_depth))
                st.write(f"`is_contained({text!r}, {int(min_depth)})` → **{found}** {entry!r}")
        with col3:
            if st.button("delete"):
                try:
                    trie.delete(text)
                    st.success(f"Deleted {text!r}; count is now {trie.count():,}")
                except TrieError as e:
                    st.error(f"❌ {str(e)}")

        st.subheader("Entries by Prefix")
        prefix = st.text_input("Prefix", key="prefix")
        st.dataframe(pd.DataFrame({"entry": list(trie.enumerate_prefix(prefix, k=100))}))

elif page == "Benchmark":
    st.header("⏱️ Benchmark")

    if trie is None:
        st.info("📁 Please load a dictionary in the 'Dictionary' section first")
    else:
        col1, col2, col3 = st.columns(3)
        with col1:
            num_queries = st.number_input("Queries", min_value=1, max_value=100_000, value=2_000, step=500)
        with col2:
            query_len = st.number_input("Query length", min_value=1, max_value=500, value=40, step=5)
        with col3:
            hit_rate = st.slider("Hit rate", min_value=0.0, max_value=1.0, value=0.5)

        if st.button("Run"):
            queries = WorkLoad(seed=7).haystacks(int(num_queries), int(query_len),
                                                 st.session_state.get("words", []), hit_rate)
            st.session_state["bench"] = run_benchmark(trie, queries, int(min_depth))

        if "bench" in st.session_state:
            df = st.session_state["bench"]

            st.subheader("Summary")
            st.dataframe(summarize(df))

            fig = px.histogram(df, x="ns", color="operation", barmode="overlay",
                               log_y=True, title="Per-call time (ns)")
            st.plotly_chart(fig, use_container_width=True)

            fig_box = px.box(df, x="operation", y="ns", color="hit", title="Time by outcome")
            st.plotly_chart(fig_box, use_container_width=True)

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Word Trie Bench
    </div>
    """,
    unsafe_allow_html=True
)
