import streamlit as st

import ui
from use_cases.session_models import Screen


def _back_to_sign_in(flow, key, label="← Back to Sign In"):
    if st.button(label, key=key):
        flow.navigate(Screen.SIGN_IN)
        st.rerun()


def render_reset_screen(flow):
    form = flow.form

    if form.succeeded:
        ui.render_brand("Check your email", "Password reset link sent")
        st.success(
            f"We've sent a password reset link to **{form.email}**. "
            "Check your inbox and follow the instructions to reset your password."
        )
        _back_to_sign_in(flow, "reset_done_to_signin", "Back to Sign In")
        return

    ui.render_brand("Reset Password", "Enter your email to reset your password")
    _back_to_sign_in(flow, "reset_back")

    with st.form("reset_form", clear_on_submit=False):
        email = st.text_input("Email Address", value=form.email, placeholder="Enter your email address")
        if form.error:
            st.caption(f":red[{form.error}]")

        submitted = st.form_submit_button("Send Reset Link", type="primary", disabled=flow.is_loading(), use_container_width=True)
        if submitted:
            flow.edit_field("email", email)
            ui.run_submit(flow.submit_reset(), "Sending reset link...")
            st.rerun()

    _back_to_sign_in(flow, "reset_footer_to_signin", "Remember your password? Sign in")
