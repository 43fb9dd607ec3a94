# streamlit_app.py — Minimal UI for the tarot reading engine
# Run:  streamlit run streamlit_app.py

from __future__ import annotations

from typing import List, Optional, Union

import streamlit as st

from tarot_engine.config import configure_logging
from tarot_engine.logic import perform_custom_reading, perform_reading
from tarot_engine.sessions import default_session_store
from tarot_engine.spreads import list_spreads

configure_logging()

# -----------------------------
# Page setup
# -----------------------------
st.set_page_config(
    page_title="Tarot Reading Engine",
    page_icon="🔮",
    layout="wide",
)

st.title("🔮 Tarot Reading Engine")
st.caption("Pick a spread, ask a question, draw your cards.")

if "session_id" not in st.session_state:
    st.session_state["session_id"] = default_session_store.create_session()

# -----------------------------
# Sidebar controls
# -----------------------------
st.sidebar.header("Controls")

SPREADS = {s.id: s for s in list_spreads()}
CUSTOM = "(custom)"

spread_id = st.sidebar.selectbox(
    "Spread",
    list(SPREADS) + [CUSTOM],
    index=1,
    format_func=lambda sid: SPREADS[sid].name if sid in SPREADS else "Custom spread",
)

if spread_id in SPREADS:
    spread = SPREADS[spread_id]
    st.sidebar.markdown(f"**Number of cards:** `{spread.card_count}`")
    st.sidebar.caption(spread.description)
    custom_name = custom_desc = ""
    custom_positions: List[dict] = []
else:
    custom_name = st.sidebar.text_input("Spread name", value="My Spread")
    custom_desc = st.sidebar.text_input("Description", value="A spread of my own design")
    raw = st.sidebar.text_area(
        "Positions (one per line: name | meaning)",
        value="Situation | Where things stand\nAdvice | What to do next",
        height=140,
    )
    custom_positions = []
    for line in raw.splitlines():
        if line.strip():
            name, _, meaning = line.partition("|")
            custom_positions.append({"name": name.strip(), "meaning": meaning.strip()})

seed = st.sidebar.text_input(
    "Seed (optional)",
    value="",  # default OFF (empty = no seed)
    placeholder="Leave empty for random each time",
    help="Enter a value to lock results; leave empty for a fresh random draw.",
)

# -----------------------------
# Main panel inputs
# -----------------------------
question = st.text_area(
    "Your question",
    placeholder="Type your life question or context...",
    height=100,
)

col_btn1, col_btn2 = st.columns([1, 1])
with col_btn1:
    run = st.button("🔀 Draw cards", use_container_width=True)
with col_btn2:
    clear = st.button("🧹 Clear output", use_container_width=True)

if clear:
    st.session_state.pop("reading_text", None)
    st.rerun()

# -----------------------------
# Execute draw
# -----------------------------
if run:
    if seed.strip() == "":
        seed_val: Optional[Union[int, str]] = None
    else:
        try:
            seed_val = int(seed)
        except ValueError:
            seed_val = seed

    with st.spinner("Drawing cards..."):
        sid = st.session_state["session_id"]
        if spread_id in SPREADS:
            text = perform_reading(spread_id, question, sid, seed=seed_val)
        else:
            text = perform_custom_reading(custom_name, custom_desc, custom_positions, question, sid, seed=seed_val)
        st.session_state["reading_text"] = text

# -----------------------------
# Render output
# -----------------------------
text = st.session_state.get("reading_text")
if text:
    st.markdown(text)

    history = default_session_store.get_history(st.session_state["session_id"]) or []
    with st.expander(f"Session history ({len(history)} readings)"):
        for r in reversed(history):
            st.markdown(f"- `{r.id}` · {r.spread_type} · {r.question or '(no question)'}")
else:
    st.info("Choose a spread, enter a question, then click **Draw cards**.")
