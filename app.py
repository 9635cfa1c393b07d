"""Personal finance dashboard: Main Streamlit application."""

import logging

import streamlit as st

from src.alerts import AlertStore
from src.api.finance_client import FinanceClient
from src.utils.config import load_config, get_token_from_secrets, validate_token

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Page configuration
st.set_page_config(
    page_title="Finance Dashboard",
    page_icon="\U0001F4B0",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Initialize session state
if "initialized" not in st.session_state:
    st.session_state.initialized = False
    st.session_state.alert_store = AlertStore()
    st.session_state.alert_error = None


@st.cache_resource
def get_finance_client(base_url: str, token: str, timeout: float):
    """Get singleton API client instance."""
    return FinanceClient(base_url, token, timeout=timeout)


def init_app():
    """Initialize the application."""
    token = get_token_from_secrets()

    if not token or not validate_token(token):
        return None, None

    config = load_config()
    client = get_finance_client(config.api.base_url, config.api_token, config.api.timeout_seconds)
    return config, client


# Initialize
config, client = init_app()

# Check for token
if client is None:
    st.title("\U0001F4B0 Finance Dashboard")
    st.error("API token not configured.")
    st.markdown("""
    ### Setup Instructions

    1. Create the secrets file: `.streamlit/secrets.toml`
    2. Add the access token issued by the finance backend at login:

    ```toml
    FINANCE_API_TOKEN = "your-jwt-here"

    [api]
    base_url = "http://localhost:8080/api"
    ```

    3. Restart the application
    """)
    st.stop()

# Test connection on first run
if not st.session_state.initialized:
    with st.spinner("Connecting to the finance backend..."):
        if client.test_connection():
            st.session_state.initialized = True
        else:
            st.error("Failed to reach the finance backend. Check the API URL and token.")
            st.stop()

# Define pages
dashboard = st.Page("pages/1_Dashboard.py", title="Dashboard", icon="\U0001F4CA", default=True)
notifications = st.Page("pages/2_Notifications.py", title="Notifications", icon="\U0001F514")
settings = st.Page("pages/3_Settings.py", title="Settings", icon="⚙️")

pg = st.navigation({
    "Overview": [dashboard],
    "Monitoring": [notifications],
    "Configuration": [settings]
})

# Sidebar
with st.sidebar:
    st.title("\U0001F4B0 Finance")

    store = st.session_state.alert_store
    unread = store.unread_count()
    if unread:
        red = sum(1 for a in store.alerts if not a.read and a.severity.value == "red")
        if red:
            st.error(f"\U0001F534 {red} urgent alert(s)")
        st.warning(f"\U0001F514 {unread} unread notification(s)")
    else:
        st.caption("No unread notifications")

# Store config and client in session for pages
st.session_state.config = config
st.session_state.client = client

# Run the selected page
pg.run()
