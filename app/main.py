import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import time

import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px

from fintree.config import Settings, configure_logging
from fintree.domain import example_tree
from fintree.exceptions import FintreeError
from fintree.functional import safe_find
from fintree.lazy import lazy_top_nodes
from fintree.render import format_node, format_total, format_tree
from fintree.services import ReportService
from fintree.transforms import load_tree, tree_to_rows

st.set_page_config(page_title="Finance Tree", layout="wide")

try:
    settings = Settings.from_env()
except FintreeError as e:
    st.error(str(e))
    st.stop()
configure_logging(settings)

st.sidebar.markdown("### 🌳 Tree")
seed_path = st.sidebar.text_input("Seed file", value=settings.seed_path)
use_example = st.sidebar.checkbox("Use built-in example", value=not os.path.exists(seed_path))
lookup_name = st.sidebar.text_input("Find node", value=settings.lookup_name)

started = time.perf_counter()

if use_example:
    root = example_tree()
else:
    try:
        root = load_tree(seed_path)
    except FileNotFoundError:
        st.error(f"Seed file not found: {seed_path}")
        st.stop()
    except FintreeError as e:
        st.error(str(e))
        st.json(e.to_dict())
        st.stop()

report = ReportService().tree_report(root, lookup_name)
result = report["result"]

df = pd.DataFrame(tree_to_rows(root))
root_total = result["total"]
df["share"] = df["total"] / root_total if root_total else np.nan

menu = st.sidebar.radio("Menu", ["🏠 Overview", "🔎 Lookup", "🧾 Dump"])

if menu == "🏠 Overview":
    k1, k2, k3 = st.columns(3)
    with k1:
        st.metric(f"Total {root.name}", format_total(root_total, settings.amount_precision))
    with k2:
        st.metric("Nodes", result["size"])
    with k3:
        st.metric("Depth", result["depth"])

    # sunburst needs non-negative values, so sizes use absolute own amounts
    chart_df = df.assign(abs_amount=df["amount"].abs())
    if chart_df["abs_amount"].sum() > 0:
        fig = px.sunburst(
            chart_df,
            ids="id",
            names="name",
            parents=chart_df["parent_id"].fillna(""),
            values="abs_amount",
            color="amount",
            color_continuous_scale="RdYlGn",
            title="Amounts by category",
        )
        fig.update_layout(template="plotly_dark", margin=dict(t=30, b=10, l=10, r=10))
        st.plotly_chart(fig, use_container_width=True)
    else:
        st.info("All amounts are zero.")

    st.subheader("📊 Largest entries")
    top = pd.DataFrame(list(lazy_top_nodes(root, 5)), columns=["name", "amount"])
    st.table(top)

    disp = df[["path", "depth", "amount", "total", "share"]].copy()
    disp["amount"] = disp["amount"].map(lambda x: format_total(x, settings.amount_precision))
    disp["total"] = disp["total"].map(lambda x: format_total(x, settings.amount_precision))
    st.dataframe(disp, use_container_width=True)
    csv = df.to_csv(index=False)
    st.download_button("⬇ Download CSV", csv, file_name="tree.csv")

elif menu == "🔎 Lookup":
    st.title("🔎 Lookup")
    dump = safe_find(root, lookup_name).map(format_node)
    if dump.is_some():
        st.success(f"Found {lookup_name!r}")
        st.code(dump.get_or_else(""))
    else:
        st.warning(f"{lookup_name!r} not found")

elif menu == "🧾 Dump":
    st.title("🧾 Tree dump")
    st.code(format_tree(root))

elapsed_ms = int((time.perf_counter() - started) * 1000)
st.caption(f"Tempo de execução: {elapsed_ms}ms")
