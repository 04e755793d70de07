import streamlit as st

import auth
from infrastructure import observability
from use_cases.auth_flow import AuthFlow

"""
SESSION STATE CONTRACT

This module owns the Streamlit session state of one browser tab.

st.session_state keys:

auth_flow: AuthFlow
    active screen, its form and the session of the current tab
    default: AuthFlow over the process-wide auth service
    owner: session_manager
"""


def init_session_state():
    if "auth_flow" not in st.session_state:
        st.session_state.auth_flow = AuthFlow(auth.get_auth_service())


def get_auth_flow() -> AuthFlow:
    init_session_state()
    return st.session_state.auth_flow


def logout():
    get_auth_flow().sign_out()
    observability.untag_user()
    st.rerun()
