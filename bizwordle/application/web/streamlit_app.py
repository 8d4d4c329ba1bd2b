# bizwordle/application/web/streamlit_app.py
# Run with:  streamlit run bizwordle/application/web/streamlit_app.py
from __future__ import annotations
from html import escape
from pathlib import Path
from typing import List
import json
import logging

import streamlit as st
import streamlit.components.v1 as components

from bizwordle.application.game_service import GameService
from bizwordle.application.ports import GameConfig
from bizwordle.domain.models.guess_evaluation import GuessEvaluation
from bizwordle.domain.services.guess_evaluator import hint_arrow
from bizwordle.infrastructure.clipboard.system_clipboard import NullClipboard
from bizwordle.infrastructure.config.paths import RepoPaths, find_repo_root
from bizwordle.infrastructure.repositories.csv_company_repository import CsvCompanyRepository
from bizwordle.infrastructure.repositories.json_marker_repository import JsonMarkerRepository

PAGE_TITLE = "Biz Wordle - Guess the Mystery Fortune 500 Company"
PAGE_DESCRIPTION = (
    "Test your knowledge of Fortune 500 companies by guessing the mystery "
    "company in a limited number of tries."
)

HEADER_BOXES = [
    ("Industry", "#4CAF50"),
    ("Founded", "#2196F3"),
    ("Headquarters", "#FF9800"),
    ("Fortune 500 Rank", "#E91E63"),
    ("CEO", "#9C27B0"),
]

st.set_page_config(page_title=PAGE_TITLE, page_icon="🏢", layout="centered")

st.markdown("""
<style>
    .bw-title {font-size: 2.6rem; font-weight: 800; text-align: center; margin-bottom: 0.5rem;}
    .bw-headers {display: flex; flex-wrap: wrap; justify-content: center; gap: 0.75rem; margin: 1rem 0;}
    .bw-box {padding: 0.6rem 1rem; border-radius: 12px; color: white; font-weight: 600;}
    .bw-table {width: 100%; border-collapse: collapse; margin-top: 1rem;}
    .bw-table th, .bw-table td {border: 1px solid #ddd; padding: 0.5rem; text-align: center;}
    .bw-table td.match {background-color: #6aaa64; color: white;}
    .bw-hint {font-weight: 700; margin-left: 0.3rem;}
    .bw-reveal {font-size: 2rem; font-weight: 800; text-align: center;}
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def _repo_paths() -> RepoPaths:
    return RepoPaths.from_root(find_repo_root(Path.cwd()))


@st.cache_resource(show_spinner="Loading companies...")
def _companies_repo() -> CsvCompanyRepository:
    return CsvCompanyRepository(_repo_paths().dataset)


def _service() -> GameService:
    if "service" not in st.session_state:
        svc = GameService(
            companies_repo=_companies_repo(),
            marker_repo=JsonMarkerRepository(_repo_paths().marker),
            clipboard=NullClipboard(),   # copying happens in the browser
            config=GameConfig(),
            logger=logging.getLogger("bizwordle.web"),
        )
        svc.start()
        st.session_state.service = svc
    return st.session_state.service


def _results_table(evaluations: List[GuessEvaluation]) -> str:
    head = "".join(f"<th>{h}</th>" for h in ["Name"] + [name for name, _ in HEADER_BOXES])
    body = []
    for ev in evaluations:
        cells = [f"<td>{escape(ev.name)}</td>"]
        for fr in ev.fields:
            arrow = f'<span class="bw-hint">{hint_arrow(fr.hint)}</span>' if fr.hint else ""
            css = ' class="match"' if fr.match else ""
            cells.append(f"<td{css}>{escape(str(fr.value))}{arrow}</td>")
        body.append("<tr>" + "".join(cells) + "</tr>")
    return f'<table class="bw-table"><thead><tr>{head}</tr></thead><tbody>{"".join(body)}</tbody></table>'


def _copy_button(text: str) -> None:
    # navigator.clipboard only exists in the browser; failures are shown inline
    payload = json.dumps(text)
    components.html(
        f"""
        <div style="font-family:system-ui; display:flex; gap:10px; align-items:center;">
          <button id="copyBtn" style="padding:8px 12px; border-radius:10px; border:1px solid rgba(0,0,0,.2);
                  background:white; font-weight:700; cursor:pointer;">Share Results</button>
          <span id="msg" style="color:#374151; font-size:13px;"></span>
        </div>
        <script>
          const text = {payload};
          document.getElementById("copyBtn").addEventListener("click", async () => {{
            const msg = document.getElementById("msg");
            try {{
              await navigator.clipboard.writeText(text);
              msg.textContent = "Results copied to clipboard!";
            }} catch (e) {{
              msg.textContent = "Failed to copy results. Please try again.";
            }}
          }});
        </script>
        """,
        height=60,
    )


def _on_pick(name: str) -> None:
    svc = _service()
    for c in svc.search(st.session_state.query):
        if c.name == name:
            svc.guess(c)
            break
    st.session_state.query = ""


def _on_guess() -> None:
    _service().guess_first(st.session_state.query)
    st.session_state.query = ""


def _on_give_up() -> None:
    _service().give_up()


def _on_new_game() -> None:
    _service().new_game()
    st.session_state.query = ""


def main() -> None:
    svc = _service()
    state = svc.state
    st.session_state.setdefault("query", "")

    st.markdown('<div class="bw-title">Biz Wordle</div>', unsafe_allow_html=True)
    st.caption(PAGE_DESCRIPTION)

    if svc.show_instructions:
        with st.container(border=True):
            st.write(f"Guess the mystery business in {state.max_guesses} tries or less!")
            st.write("Green cells indicate a match with the mystery business.")
            st.write("For numeric values, arrows indicate if the mystery business's value is higher (↑) or lower (↓).")
            st.button("Got it!", on_click=svc.dismiss_instructions)

    if not state.is_over:
        boxes = "".join(
            f'<div class="bw-box" style="background-color:{color}">{name}</div>'
            for name, color in HEADER_BOXES
        )
        st.markdown("<h4 style='text-align:center'>Guess these business attributes:</h4>", unsafe_allow_html=True)
        st.markdown(f'<div class="bw-headers">{boxes}</div>', unsafe_allow_html=True)

        st.text_input("Company", key="query", placeholder="Start typing to guess a business...",
                      label_visibility="collapsed")
        candidates = svc.search(st.session_state.query)
        for c in candidates:
            st.button(c.name, key=f"pick_{c.name}", on_click=_on_pick, args=(c.name,))

        c1, c2 = st.columns(2)
        c1.button("Guess", on_click=_on_guess, disabled=not candidates, use_container_width=True)
        c2.button("Give up", on_click=_on_give_up, disabled=not state.guesses, use_container_width=True)

        st.write(f"Guesses: {len(state.guesses)}/{state.max_guesses}")
        if state.guesses:
            st.markdown(_results_table(svc.evaluations()), unsafe_allow_html=True)
    else:
        st.markdown("<h3 style='text-align:center'>The mystery business was:</h3>", unsafe_allow_html=True)
        st.markdown(f'<div class="bw-reveal">{escape(state.target.name)}</div>', unsafe_allow_html=True)
        st.write(svc.summary())
        st.markdown(_results_table(svc.evaluations()), unsafe_allow_html=True)

        _copy_button(svc.share_text())
        with st.expander("Preview share text", expanded=False):
            st.code(svc.share_text())
        st.button("New Game", on_click=_on_new_game)

    st.divider()
    st.caption("This site is not affiliated with Fortune 500 companies.")


main()
