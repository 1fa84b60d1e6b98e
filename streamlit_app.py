"""Streamlit entrypoint for the AI Trend Analyzer."""

from __future__ import annotations

import streamlit as st

from trend_analyzer.config import AppConfig
from trend_analyzer.state import AppState
from trend_analyzer.ui import render_app


def main() -> None:
    config = AppConfig.get()

    if "app_state" not in st.session_state:
        st.session_state["app_state"] = AppState.from_config(config)

    render_app(st.session_state["app_state"])


if __name__ == "__main__":
    main()
