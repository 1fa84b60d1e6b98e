"""Streamlit UI helpers and rendering functions."""

from __future__ import annotations

from typing import List

import streamlit as st

from .accounts import Account, Role
from .constants import CATEGORY_OPTIONS, LANGUAGE_OPTIONS
from .errors import TrendAnalyzerError
from .logger import get_logger
from .prompts import FilterSet
from .query import QueryResult
from .sessions import Surface
from .state import AppState

LOGGER = get_logger(__name__)


def _rerun_app() -> None:
    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if rerun is not None:
        rerun()


def compose_result_markdown(result: QueryResult) -> str:
    """Render analysis text followed by a linked source list."""
    markdown = result.text
    if result.citations:
        sources = "\n".join(f"- [{citation.label}]({citation.uri})" for citation in result.citations)
        markdown += f"\n\n#### Sources:\n{sources}"
    return markdown


def _page_header(label: str, app_state: AppState) -> None:
    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown(f"**{label}**")
    with col2:
        if st.button("Logout", key="logout_button"):
            app_state.logout()
            _rerun_app()


def render_login(app_state: AppState) -> None:
    st.title("📈 AI Trend Analyzer")

    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        try:
            app_state.login(username, password)
        except TrendAnalyzerError as exc:
            st.error(exc.message)
        else:
            _rerun_app()


def render_trend_analyzer(app_state: AppState) -> None:
    account = app_state.current_account()
    _page_header(f"Welcome, {account.username}!", app_state)

    st.title("📈 AI Trend Analyzer")
    st.caption("Discover emerging trends and predict the next viral story.")

    previous = app_state.filters
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        country = st.text_input("Country", value=previous.country, placeholder="Country")
    with col2:
        state = st.text_input("State", value=previous.state, placeholder="State")
    with col3:
        district = st.text_input("District", value=previous.district, placeholder="District")
    with col4:
        city = st.text_input("City", value=previous.city, placeholder="City")

    languages = list(LANGUAGE_OPTIONS)
    categories = list(CATEGORY_OPTIONS)
    col1, col2 = st.columns(2)
    with col1:
        language = st.selectbox(
            "Language",
            languages,
            index=languages.index(previous.language) if previous.language in languages else 0,
            format_func=LANGUAGE_OPTIONS.get,
        )
    with col2:
        category = st.selectbox(
            "Category",
            categories,
            index=categories.index(previous.category) if previous.category in categories else 0,
            format_func=CATEGORY_OPTIONS.get,
        )

    filters = FilterSet(
        country=country,
        state=state,
        district=district,
        city=city,
        language=language,
        category=category,
    )

    if st.button("Analyze Current Trends", type="primary"):
        with st.spinner("Analyzing..."):
            try:
                app_state.run_query_blocking(filters)
            except TrendAnalyzerError as exc:
                LOGGER.debug("Analysis surfaced to UI as: %s", exc.message)

    executor = app_state.executor
    if executor.error:
        st.error(executor.error)
    if executor.result is not None and executor.result.text:
        with st.container(border=True):
            st.markdown(compose_result_markdown(executor.result))


def _render_account_table(accounts: List[Account]) -> None:
    st.table([{"Username": a.username, "Role": a.role.value} for a in accounts])


def render_admin_panel(app_state: AppState) -> None:
    _page_header("Admin Panel", app_state)

    st.header("Manage Users")
    accounts = app_state.list_accounts()
    _render_account_table(accounts)

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Add New User")
        with st.form("add_user_form", clear_on_submit=True):
            new_username = st.text_input("Username")
            new_password = st.text_input("Password", type="password")
            new_role = st.selectbox(
                "Role",
                [Role.STANDARD, Role.ADMIN],
                format_func=lambda r: "User" if r is Role.STANDARD else "Admin",
            )
            add_submitted = st.form_submit_button("Add User")

        if add_submitted:
            try:
                app_state.add_account(new_username, new_password, new_role)
            except TrendAnalyzerError as exc:
                st.error(exc.message)
            else:
                _rerun_app()

    with col2:
        st.subheader("Change Password")
        usernames = [a.username for a in accounts]
        with st.form("change_password_form", clear_on_submit=True):
            target = st.selectbox("Select User", usernames, index=0 if usernames else None)
            changed_password = st.text_input("New Password", type="password")
            change_submitted = st.form_submit_button("Change Password")

        if change_submitted:
            try:
                app_state.change_password(target or "", changed_password)
            except TrendAnalyzerError as exc:
                st.error(exc.message)

        notice = app_state.active_notice()
        if notice is not None:
            st.success(notice.message)


def render_app(app_state: AppState) -> None:
    st.set_page_config(
        page_title="AI Trend Analyzer",
        page_icon="📈",
        layout="centered",
    )

    surface = app_state.surface()
    if surface is Surface.LOGIN:
        render_login(app_state)
    elif surface is Surface.ADMIN:
        render_admin_panel(app_state)
    else:
        render_trend_analyzer(app_state)


__all__ = [
    "compose_result_markdown",
    "render_app",
    "render_login",
    "render_trend_analyzer",
    "render_admin_panel",
]
