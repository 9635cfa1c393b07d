"""Notifications page - Budget, bill and spending alerts."""

import streamlit as st

from src.alerts import AlertRefresher, AlertSeverity, DataFetchError, render_message
from src.utils.formatters import format_date

st.title("\U0001F514 Notifications")

# Get resources from session state
client = st.session_state.get('client')
config = st.session_state.get('config')
store = st.session_state.get('alert_store')

if not client or not config or store is None:
    st.warning("Application not properly initialized")
    st.stop()

refresher = AlertRefresher(
    client,
    config=config.alerts.as_detector_config(),
    timeout=config.refresh_timeout_seconds,
)

col1, col2 = st.columns([2, 1])
with col1:
    if st.button("\U0001F504 Refresh", type="primary"):
        with st.spinner("Checking budgets, bills and spending..."):
            try:
                store.sync(refresher.refresh_blocking())
                st.session_state.alert_error = None
            except DataFetchError as e:
                # Keep showing the previous alerts
                st.session_state.alert_error = str(e)
        st.rerun()

with col2:
    unread = store.unread_count()
    if unread and st.button("Mark all as read"):
        store.mark_all_read()
        st.rerun()

if st.session_state.get('alert_error'):
    st.error(f"Refresh failed: {st.session_state.alert_error}")

st.divider()

alerts = store.alerts

severity_config = {
    AlertSeverity.RED: {"icon": "\U0001F534"},
    AlertSeverity.ORANGE: {"icon": "\U0001F7E0"},
    AlertSeverity.BLUE: {"icon": "\U0001F535"},
}

if not alerts:
    st.info("No notifications. Press Refresh to check for new ones.")
else:
    st.caption(f"{len(alerts)} notification(s), {store.unread_count()} unread")

    for alert in alerts:
        icon = severity_config[alert.severity]["icon"]
        label = f"{icon} {alert.title}" if alert.read else f"{icon} **{alert.title}** (new)"

        with st.container(border=True):
            text_col, btn_col1, btn_col2 = st.columns([6, 1, 1])
            with text_col:
                st.markdown(label)
                st.write(render_message(alert, currency_symbol=config.currency_symbol))
                due = alert.params.get("due_date")
                st.caption(f"{alert.time_label} · due {format_date(due)}" if due else alert.time_label)
            with btn_col1:
                if not alert.read and st.button("✔", key=f"read_{alert.id}", help="Mark as read"):
                    store.mark_read(alert.id)
                    st.rerun()
            with btn_col2:
                if st.button("✖", key=f"delete_{alert.id}", help="Delete"):
                    store.delete(alert.id)
                    st.rerun()
