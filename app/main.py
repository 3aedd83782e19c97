"""
Streamlit Frontend for Bankist

The presentation surface only: it collects form input, calls the
BankingApp operations and renders the DashboardView it gets back.
No balance, total or date label is computed here.

Timers: the app runs on a ManualScheduler. Every rerun, and the countdown
fragment once a second, advances it to the current wall time, so the
countdown and pending loans catch up with whatever happened since.
"""

from datetime import datetime, timezone

import streamlit as st

from bankist.models.session import ActionResult
from bankist.models.view import DashboardView, MovementKind
from bankist.orchestrator import BankingApp, create_app_components
from bankist.services.scheduling import ManualScheduler


st.set_page_config(
    page_title="Bankist",
    page_icon="🏦",
    layout="wide",
)


def get_app() -> tuple[BankingApp, ManualScheduler]:
    """One BankingApp per browser session."""
    if "bankist_app" not in st.session_state:
        scheduler = ManualScheduler(start=datetime.now(timezone.utc))
        st.session_state.bankist_scheduler = scheduler
        st.session_state.bankist_app = create_app_components(scheduler=scheduler)
    return st.session_state.bankist_app, st.session_state.bankist_scheduler


def show_result(result: ActionResult) -> None:
    if result.ok:
        st.success(result.message)
    else:
        st.error(result.message)


def render_login(app: BankingApp) -> None:
    with st.form("login"):
        col1, col2, col3 = st.columns([2, 2, 1])
        handle = col1.text_input("User", placeholder="user")
        pin = col2.text_input("PIN", type="password", placeholder="PIN")
        submitted = col3.form_submit_button("→")
    if submitted:
        result = app.login(handle.strip(), pin)
        if not result.ok:
            show_result(result)
        else:
            st.rerun()


def render_dashboard(app: BankingApp, scheduler: ManualScheduler, view: DashboardView) -> None:
    ledger = view.ledger

    col1, col2 = st.columns([3, 1])
    with col1:
        st.markdown("#### Current balance")
        st.caption(f"As of {view.as_of_label}")
    col2.markdown(f"## {ledger.formatted_balance}")

    left, right = st.columns([3, 2])

    with left:
        # Most recent first
        for row in reversed(ledger.rows):
            icon = "🟢" if row.kind == MovementKind.DEPOSIT else "🔴"
            c1, c2, c3 = st.columns([2, 2, 2])
            c1.markdown(f"{icon} {row.position} {row.kind.value}")
            c2.markdown(row.date_label)
            c3.markdown(f"**{row.formatted_amount}**")

    with right:
        with st.form("transfer", clear_on_submit=True):
            st.markdown("**Transfer money**")
            receiver = st.text_input("Transfer to")
            amount = st.text_input("Amount")
            if st.form_submit_button("Transfer"):
                show_result(app.transfer(receiver.strip(), amount))

        with st.form("loan", clear_on_submit=True):
            st.markdown("**Request loan**")
            loan = st.text_input("Amount ")
            if st.form_submit_button("Request"):
                show_result(app.request_loan(loan))

        with st.form("close", clear_on_submit=True):
            st.markdown("**Close account**")
            handle = st.text_input("Confirm user")
            pin = st.text_input("Confirm PIN", type="password")
            if st.form_submit_button("Close"):
                result = app.close_account(handle.strip(), pin)
                show_result(result)
                if result.ok:
                    st.rerun()

    s1, s2, s3, s4 = st.columns(4)
    s1.metric("In", ledger.formatted_total_in)
    s2.metric("Out", ledger.formatted_total_out)
    s3.metric("Interest", ledger.formatted_interest)
    if s4.button("⬇ SORTED" if ledger.sorted_by_amount else "↓ SORT"):
        app.toggle_sort()
        st.rerun()

    render_countdown(app, scheduler)


@st.fragment(run_every=1)
def render_countdown(app: BankingApp, scheduler: ManualScheduler) -> None:
    """Refresh the timer once a second without rerunning the whole page."""
    scheduler.advance_to(datetime.now(timezone.utc))
    view = app.dashboard()

    # Logged out or a loan landed: the rest of the page is stale
    if not view.visible or view.ledger.rows != st.session_state.get("bankist_rows"):
        st.rerun()

    st.caption(f"You will be logged out in {view.countdown_display}")


def main():
    """Main application entry point."""
    app, scheduler = get_app()
    scheduler.advance_to(datetime.now(timezone.utc))

    view = app.dashboard()
    st.title(view.welcome_text)

    render_login(app)

    if view.visible and view.ledger is not None:
        st.session_state.bankist_rows = view.ledger.rows
        render_dashboard(app, scheduler, view)


if __name__ == "__main__":
    main()
