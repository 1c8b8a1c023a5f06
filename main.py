from __future__ import annotations
import streamlit as st
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import networkx as nx
import io

from text_ranker import (
    SummarizerConfig, SummarizerError, build_graph, detect_language,
    preprocess_text, build_relevance_matrix, total_relevance,
    score_sentences, select_top, summarize, DAMPING,
)

MAX_MATRIX_DISPLAY = 50

def _preview(text: str, width: int = 80) -> str:
    text = " ".join(text.split())
    return text[:width] + "..." if len(text) > width else text

def load_text_from_file(uploaded_file) -> str:
    """Load text content from an uploaded .txt file."""
    return uploaded_file.read().decode("utf-8")

def draw_graph_visualization(graph, selected):
    """Draw the relevance graph; selected sentences are highlighted."""
    G = nx.Graph()
    for s in graph.nodes:
        G.add_node(s.idx)
    for edge in graph.edges:
        G.add_edge(edge.i, edge.j, weight=edge.weight)

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title("Sentence Relevance Graph", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
        colors = ['gold' if i in selected else 'lightblue' for i in G.nodes()]
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=800, alpha=0.8)

        edges = G.edges(data=True)
        if edges:
            weights = [d['weight'] for _, _, d in edges]
            max_weight = max(weights)
            nx.draw_networkx_edges(G, pos, ax=ax,
                                   width=[3 * (w / max_weight) for w in weights],
                                   alpha=0.6, edge_color='gray')
        nx.draw_networkx_labels(G, pos, {i: f"S{i+1}" for i in G.nodes()}, ax=ax,
                                font_size=10, font_weight='bold')
        if len(G.nodes) <= 10:
            edge_labels = {(u, v): f"{d['weight']:.2f}" for u, v, d in G.edges(data=True)}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    st.sidebar.header("Parameters")
    n = st.sidebar.slider("Sentences in summary", min_value=1, max_value=20, value=5, step=1)
    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")
    return n, debug_mode

def debug_pipeline(text: str, n: int) -> str:
    """Run the pipeline step by step, showing intermediate results."""

    st.header("Step 1: Segmentation & Vocabulary")
    with st.expander("Segmentation Details", expanded=True):
        doc = preprocess_text(text)
        st.success(f"Segmented {len(doc.sentences)} sentences, {len(doc.vocabulary)} distinct tokens")

        sentences_df = pd.DataFrame([{
            "Sentence #": s.idx + 1,
            "Text": _preview(s.text),
            "Tokens": len(s.tokens),
            "Token Ids": ", ".join(str(i) for i in s.sequence[:12]) + ("..." if len(s.sequence) > 12 else ""),
        } for s in doc.sentences])
        st.dataframe(sentences_df, use_container_width=True)

        with st.expander("Vocabulary", expanded=False):
            vocab_df = pd.DataFrame(list(doc.vocabulary.items()), columns=["Token", "Id"])
            st.dataframe(vocab_df, use_container_width=True, height=200)

    st.header("Step 2: Relevance Matrix")
    with st.expander("Relevance Details", expanded=True):
        M = build_relevance_matrix(doc)
        total = total_relevance(M)
        st.metric("Total Relevance", f"{total:.4f}")

        n_sentences = len(M)
        if n_sentences <= MAX_MATRIX_DISPLAY:
            labels = [f"S{i+1}" for i in range(n_sentences)]
            st.dataframe(pd.DataFrame(M, columns=labels, index=labels), use_container_width=True)
        else:
            st.info(f"Matrix too large to display ({n_sentences}x{n_sentences} = {n_sentences**2:,} cells)")
            flat = np.array([M[i][j] for i in range(n_sentences) for j in range(i+1, n_sentences)])
            col1, col2, col3, col4 = st.columns(4)
            col1.metric("Min Relevance", f"{flat.min():.3f}")
            col2.metric("Max Relevance", f"{flat.max():.3f}")
            col3.metric("Mean Relevance", f"{np.mean(flat):.3f}")
            col4.metric("Std Relevance", f"{np.std(flat):.3f}")

    st.header("Step 3: Scoring")
    with st.expander("Scoring Details", expanded=True):
        st.write(f"**Running:** single pass, damping {DAMPING}")
        scores = score_sentences(M, total=total)
        selected = select_top(scores, n)

        graph = build_graph(doc, M)
        if 0 < len(graph.nodes) <= MAX_MATRIX_DISPLAY:
            st.image(draw_graph_visualization(graph, set(selected)),
                     caption="Edges weighted by relevance; selected sentences in gold")

        scoring_df = pd.DataFrame([{
            "Sentence #": i + 1,
            "Score": f"{scores[i]:.4f}",
            "Selected": "yes" if i in selected else "",
            "Text": _preview(doc.sentences[i].text),
        } for i in range(len(scores))])
        st.dataframe(scoring_df, use_container_width=True)

        col1, col2 = st.columns(2)
        col1.metric("Target Sentences", n)
        col2.metric("Actually Selected", len(selected))

    return "".join(doc.sentences[i].text for i in selected)

def main():
    st.title("TextRank Sentence Extractor")
    st.write("Paste text or upload a .txt file to extract its most representative sentences")

    n, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader("Choose a text file", type=['txt'])
    text = load_text_from_file(uploaded_file) if uploaded_file is not None else ""
    text = st.text_area("Content", text, height=200)

    if st.button("Generate Summary", type="primary") and text:
        try:
            lang = detect_language(text, SummarizerConfig(sentence_count=n))
            st.caption(f"Detected language: {lang.name.title()}")
            if debug_mode:
                st.markdown("---")
                st.title("Pipeline Debug Mode")
            result = debug_pipeline(text, n) if debug_mode else _quiet_pipeline(text, n)
        except SummarizerError as e:
            st.error(str(e))
            return

        st.markdown("---")
        st.header("Final Summary")
        st.text_area("Generated Summary", result, height=150, disabled=True)

        col1, col2, col3 = st.columns(3)
        col1.metric("Original Length", len(text.split()))
        col2.metric("Summary Length", len(result.split()))
        compression = len(result.split()) / len(text.split()) if text.split() else 0
        col3.metric("Actual Compression", f"{compression:.2%}")

def _quiet_pipeline(text: str, n: int) -> str:
    with st.spinner("Generating summary..."):
        return summarize(text, n)

if __name__ == "__main__":
    main()
