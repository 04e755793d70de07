import streamlit as st

from utils import session_manager

FEATURE_TILES = [
    ("Messages", "Active messaging tab", "active"),
    ("Feature 2", "Coming soon...", "muted"),
    ("Feature 3", "Coming soon...", "muted"),
    ("Feature 4", "Coming soon...", "muted"),
]


def render_dashboard(flow):
    user = flow.session.current_user()

    col_title, col_user = st.columns([3, 2])
    with col_title:
        st.title("💬 MorseChat Dashboard")
    with col_user:
        st.caption(f"Welcome, {user.full_name}")
        if st.button("Sign Out", key="dashboard_sign_out"):
            session_manager.logout()

    st.subheader("Dashboard")
    st.write("Welcome to MorseChat! This is where your messaging interface will be.")

    for col, (title, text, state) in zip(st.columns(len(FEATURE_TILES)), FEATURE_TILES):
        with col:
            st.markdown(
                f'<div class="mc-tile {state}"><strong>{title}</strong><br/><small>{text}</small></div>',
                unsafe_allow_html=True
            )
