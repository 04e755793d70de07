import asyncio

import streamlit as st

APP_NAME = "MorseChat"
APP_TAGLINE = "Communicate through touch and vibration"


def setup_style():
    st.markdown("""
    <style>
        :root {
            --mc-primary: #2563eb;
            --mc-primary-dark: #1d4ed8;
            --mc-text-soft: #bfdbfe;
        }

        .stApp {
            background: linear-gradient(135deg, #1e3a8a 0%, #1e40af 50%, #312e81 100%);
        }

        .mc-brand {
            text-align: center;
            margin-bottom: 1.5rem;
        }

        .mc-brand h1 {
            color: #ffffff;
            font-weight: 800;
            margin-bottom: 0.25rem;
        }

        .mc-brand p {
            color: var(--mc-text-soft);
        }

        .mc-demo-hint {
            background: #eff6ff;
            border: 1px solid #bfdbfe;
            border-radius: 0.5rem;
            padding: 0.75rem;
            color: #1e40af;
            font-size: 0.8rem;
        }

        .mc-tile {
            border-radius: 0.5rem;
            border: 2px solid #e5e7eb;
            padding: 1rem;
            background: #f9fafb;
        }

        .mc-tile.active {
            border-color: #bfdbfe;
            background: #eff6ff;
        }

        .mc-tile.muted {
            opacity: 0.5;
        }
    </style>
    """, unsafe_allow_html=True)


def render_brand(title, subtitle):
    st.markdown(
        f"""
        <div class="mc-brand">
          <h1>💬 {APP_NAME}</h1>
          <p>{APP_TAGLINE}</p>
        </div>
        """,
        unsafe_allow_html=True
    )
    st.subheader(title)
    st.caption(subtitle)


def show_field_error(form, field_name):
    message = form.field_errors.get(field_name)
    if message:
        st.caption(f":red[{message}]")


def run_submit(coro, message="Please wait..."):
    """Drive one async submit to completion inside the Streamlit script run."""
    with st.spinner(message):
        return asyncio.run(coro)
