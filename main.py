# main.py
import json

import pandas as pd
import streamlit as st

from c_parser import parse_c_code
from cfg_builder import build_cfg
from cfg_model import MergePolicy
from flowchart_generator import render_document, render_dot, render_mermaid
from metrics_calculator import calculate_all
from settings import OutputFormat, get_settings
from utils import explain_metrics

st.set_page_config(page_title="C Flowchart Generator", layout="wide")
st.title("C Control-Flow Flowcharts")

st.markdown(
    """
**How to use**

1. Upload a C file OR paste your code in the sidebar.
2. Click **Process Code** to build one flowchart per function.
3. Explore results in the tabs: **Flowcharts**, **Metrics**, **Explanations**, **Raw JSON**.
"""
)

settings = get_settings()

# ---------- Sidebar: input & process button ----------
st.sidebar.header("Input")
uploaded_file = st.sidebar.file_uploader("Upload a C file (.c)", type=["c", "h"])
code_area = st.sidebar.text_area("Or paste C code here", height=300)
policy_names = [p.value for p in MergePolicy]
merge_policy = MergePolicy(
    st.sidebar.selectbox(
        "Merge node handling",
        policy_names,
        index=policy_names.index(settings.merge_policy.value),
    )
)
process_button = st.sidebar.button("▶ Process Code")

if "last_code" not in st.session_state:
    st.session_state["last_code"] = ""

if uploaded_file is not None:
    st.session_state["last_code"] = uploaded_file.getvalue().decode("utf-8", errors="replace")
elif code_area and code_area.strip():
    st.session_state["last_code"] = code_area

code = st.session_state.get("last_code", "").strip()

if process_button:
    st.session_state["run_analysis"] = True

if "run_analysis" not in st.session_state:
    st.info("Press **Process Code** in the sidebar to build flowcharts for the provided code.")
    st.stop()

if not code:
    st.error("No code provided. Paste code in the sidebar or upload a .c file.")
    st.stop()

with st.spinner("Building control-flow graphs..."):
    functions = parse_c_code(code)
    pairs = [(fn, build_cfg(fn, merge_policy)) for fn in functions]
    functions_metrics = calculate_all(pairs)
    keys = list(functions_metrics)

if not pairs:
    st.warning("No function definitions found.")
    st.stop()

df = pd.DataFrame.from_dict(functions_metrics, orient="index")

tab_flow, tab_metrics, tab_explain, tab_raw = st.tabs(
    ["🔗 Flowcharts", "📊 Metrics", "📝 Explanations", "📦 Raw JSON"]
)

# ----- Flowcharts Tab -----
with tab_flow:
    st.header("Function flowcharts")
    ncols = min(3, max(1, len(pairs)))
    cols = st.columns(ncols)
    for idx, (fn, cfg) in enumerate(pairs):
        with cols[idx % ncols]:
            st.markdown(f"**{fn.name}**")
            st.graphviz_chart(render_dot(cfg))
            with st.expander("Mermaid source"):
                st.code(render_mermaid(cfg), language="markdown")

    st.download_button(
        "⬇️ Download Mermaid document",
        render_document([cfg for _, cfg in pairs], OutputFormat.MERMAID),
        file_name="flowcharts.md",
        mime="text/markdown",
        key="download_mermaid",
    )
    st.download_button(
        "⬇️ Download DOT document",
        render_document([cfg for _, cfg in pairs], OutputFormat.DOT),
        file_name="flowcharts.dot",
        mime="text/vnd.graphviz",
        key="download_dot",
    )

# ----- Metrics Tab -----
with tab_metrics:
    st.header("Function metrics")

    def _highlight_cc(val):
        if val > 10:
            return "background-color: #ff9999"
        if val > 5:
            return "background-color: #ffe599"
        return ""

    styled = df.style.map(_highlight_cc, subset=["cyclomatic_complexity"]).format(precision=0, na_rep="-")
    st.dataframe(styled)

# ----- Explanations Tab -----
with tab_explain:
    st.header("Plain-language summaries")
    texts = explain_metrics(functions_metrics)
    for key in keys:
        st.markdown(f"### {key}()")
        st.markdown(texts[key])

# ----- Raw JSON Tab -----
with tab_raw:
    st.header("Raw graph JSON")
    report = {
        "merge_policy": merge_policy.value,
        "functions": {
            key: {"metrics": functions_metrics[key], "graph": cfg.to_dict()} for key, (_, cfg) in zip(keys, pairs)
        },
    }
    st.json(report)
    st.download_button(
        "Download metrics CSV",
        df.to_csv().encode("utf-8"),
        file_name="function_metrics.csv",
        mime="text/csv",
        key="metrics_csv_dl",
    )
    st.download_button(
        "Download full JSON",
        json.dumps(report, indent=2),
        file_name="flowcharts.json",
        mime="application/json",
        key="graph_json_dl",
    )
