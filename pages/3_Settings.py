"""Settings page - Connection status and alert thresholds."""

import streamlit as st

from src.alerts import build_detectors

st.title("⚙️ Settings")

# Get resources from session state
client = st.session_state.get('client')
config = st.session_state.get('config')

if not client or not config:
    st.warning("Application not properly initialized")
    st.stop()

# API Status
st.subheader("Backend Status")

col1, col2 = st.columns(2)

with col1:
    if client.test_connection():
        st.success("✅ Connected")
    else:
        st.error("❌ Connection failed")

with col2:
    st.caption(f"API: {config.api.base_url}")
    st.caption(f"Request timeout: {config.api.timeout_seconds:.0f}s")
    if config.refresh_timeout_seconds:
        st.caption(f"Refresh timeout: {config.refresh_timeout_seconds:.0f}s")

st.divider()

# Alert thresholds
st.subheader("Alert Thresholds")
st.caption("Set these under `[alert_thresholds]` in `.streamlit/secrets.toml`.")

detectors = build_detectors(config.alerts.as_detector_config())

for detector in detectors:
    schema = detector.get_config_schema()
    if not schema:
        continue

    kinds = ", ".join(k.value.replace("_", " ").title() for k in detector.alert_kinds)
    st.markdown(f"**{kinds}**")
    for key, field_schema in schema.items():
        st.write(
            f"- {field_schema['description']}: **{detector.config[key]}** "
            f"(default {field_schema['default']}, range {field_schema['min']}-{field_schema['max']})"
        )
