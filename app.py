import streamlit as st
from datetime import datetime, timezone

from infrastructure import observability
observability.setup_observability()

import ui
from utils import session_manager
from use_cases.session_models import Screen, is_authenticated
from views import dashboard_view, login_view, reset_view, signup_view

# --- PAGE SETTINGS ---
st.set_page_config(page_title="MorseChat", page_icon="💬", layout="centered")

# Health Check (Basic load-balancer heartbeat)
if st.query_params.get("health") == "1":
    st.write({"status": "ok", "version": "1.0", "uptime": datetime.now(timezone.utc).isoformat()})
    st.stop()

ui.setup_style()

flow = session_manager.get_auth_flow()
screen = flow.current_screen()

# The dashboard is only rendered while the session holds a user.
if screen is Screen.DASHBOARD and not is_authenticated(flow.session.snapshot()):
    flow.sign_out()
    screen = flow.current_screen()

# Every script run lands on a fresh thread, so the Sentry user is set per run.
if is_authenticated(flow.session.snapshot()):
    observability.tag_user(flow.session.current_user())
else:
    observability.untag_user()

SCREEN_VIEWS = {
    Screen.SIGN_IN: login_view.render_sign_in_screen,
    Screen.SIGN_UP: signup_view.render_sign_up_screen,
    Screen.RESET: reset_view.render_reset_screen,
    Screen.DASHBOARD: dashboard_view.render_dashboard,
}

SCREEN_VIEWS[screen](flow)
