import streamlit as st

import ui
from use_cases.session_models import Screen

FIELD_LABELS = [
    ("first_name", "First Name", "default"),
    ("last_name", "Last Name", "default"),
    ("username", "Username", "default"),
    ("email", "Email Address", "default"),
    ("password", "Password", "password"),
    ("confirm_password", "Confirm Password", "password"),
]


def _render_confirmation(flow):
    ui.render_brand("Account created", "Your MorseChat account is ready")
    st.success("Account created successfully! Please sign in.")
    if st.button("Continue to Sign In", type="primary", key="signup_ack"):
        flow.acknowledge_sign_up()
        st.rerun()


def render_sign_up_screen(flow):
    form = flow.form
    if form.succeeded:
        _render_confirmation(flow)
        return

    ui.render_brand("Create Account", "Join MorseChat and start communicating")

    with st.form("signup_form", clear_on_submit=False):
        values = {}
        for field_name, label, input_type in FIELD_LABELS:
            values[field_name] = st.text_input(label, value=getattr(form, field_name), type=input_type)
            ui.show_field_error(form, field_name)

        if form.general_error:
            st.error(form.general_error)

        submitted = st.form_submit_button("Create Account", type="primary", disabled=flow.is_loading(), use_container_width=True)
        if submitted:
            for field_name, value in values.items():
                flow.edit_field(field_name, value)
            ui.run_submit(flow.submit_sign_up(), "Creating your account...")
            st.rerun()

    if st.button("Already have an account? Sign in", key="signup_to_signin"):
        flow.navigate(Screen.SIGN_IN)
        st.rerun()
