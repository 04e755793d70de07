import asyncio
import os
import sys

import toml

import auth
from infrastructure.identity.http_auth_service import HttpAuthService
from infrastructure.identity.mock_auth_service import DEMO_EMAIL, DEMO_PASSWORD, MockAuthService


def load_settings(path=".streamlit/secrets.toml"):
    try:
        secrets = toml.load(path)
    except (FileNotFoundError, toml.TomlDecodeError) as e:
        print(f"⚠️ Could not read {path}: {e}. Falling back to environment.")
        secrets = {}
    raw_timeout = secrets.get("AUTH_API_TIMEOUT") or os.getenv("AUTH_API_TIMEOUT")
    return {
        "AUTH_API_URL": secrets.get("AUTH_API_URL") or os.getenv("AUTH_API_URL"),
        "AUTH_API_TIMEOUT": auth.parse_float("AUTH_API_TIMEOUT", raw_timeout, auth.DEFAULT_API_TIMEOUT),
    }


def probe(settings, email=DEMO_EMAIL, password=DEMO_PASSWORD):
    """Sign in once against the configured backend. Returns a process exit code."""
    if settings["AUTH_API_URL"]:
        service = HttpAuthService(settings["AUTH_API_URL"], timeout=settings["AUTH_API_TIMEOUT"])
        print(f"🔌 Probing {settings['AUTH_API_URL']} as {email}")
    else:
        service = MockAuthService(delay=0)
        print(f"🔌 AUTH_API_URL not set, probing demo service as {email}")

    try:
        result = asyncio.run(service.sign_in(email, password))
    except auth.AuthServiceError as e:
        print(f"❌ Sign-in failed: {e}")
        return 1

    print(f"✅ Signed in as {result.user.username} (id={result.user.id})")
    return 0


if __name__ == "__main__":
    args = sys.argv[1:]
    if len(args) == 2:
        sys.exit(probe(load_settings(), args[0], args[1]))
    sys.exit(probe(load_settings()))
