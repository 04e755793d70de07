import streamlit as st

import ui
from infrastructure.identity.mock_auth_service import DEMO_EMAIL, DEMO_PASSWORD
from use_cases.session_models import Screen


def render_sign_in_screen(flow):
    ui.render_brand("Welcome back", "Sign in to your account to continue")
    form = flow.form

    with st.form("signin_form", clear_on_submit=False):
        email = st.text_input("Email or Username", value=form.email, placeholder="Enter your email or username")
        ui.show_field_error(form, "email")
        password = st.text_input("Password", value=form.password, type="password", placeholder="Enter your password")
        ui.show_field_error(form, "password")

        if form.general_error:
            st.error(form.general_error)

        submitted = st.form_submit_button("Sign In", type="primary", disabled=flow.is_loading(), use_container_width=True)
        if submitted:
            flow.edit_field("email", email)
            flow.edit_field("password", password)
            ui.run_submit(flow.submit_sign_in(), "Signing in...")
            st.rerun()

    st.markdown(
        f"""
        <div class="mc-demo-hint">
          <strong>Demo Credentials:</strong><br/>
          Email: {DEMO_EMAIL}<br/>
          Password: {DEMO_PASSWORD}
        </div>
        """,
        unsafe_allow_html=True
    )

    col_reset, col_signup = st.columns(2)
    with col_reset:
        if st.button("Forgot password?", key="signin_to_reset"):
            flow.navigate(Screen.RESET)
            st.rerun()
    with col_signup:
        if st.button("Don't have an account? Sign up", key="signin_to_signup"):
            flow.navigate(Screen.SIGN_UP)
            st.rerun()
