"""
Streamlit Beta Access Gate

Shows the private beta login form until the visitor enters the beta access
password, and remembers successful logins with a signed token.

Usage:
    from buyermap.ui.auth import require_beta_access

    # At the top of the app (after st.set_page_config):
    require_beta_access()

Environment Variables:
    BETA_ACCESS_PASSWORD: The shared beta password. Without it the gate
        reports a configuration error instead of letting anyone in.
    BETA_TOKEN_KEY: Optional. Secret for signing remember-me tokens
        (derived from the password if not set).
    BETA_TOKEN_EXPIRY_DAYS: Optional. How long remembered logins last (default: 30).
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Optional

import streamlit as st

from buyermap.content import CONTENT
from buyermap.core.config import Config
from buyermap.services.beta_access_service import BetaAccessNotConfigured, BetaAccessService

logger = logging.getLogger(__name__)

TOKEN_PARAM = "_beta"
SESSION_KEY = "_beta_authorized"
TOKEN_EXPIRY_DAYS = int(os.getenv("BETA_TOKEN_EXPIRY_DAYS", "30"))


def _get_token_key(secret: str) -> str:
    """Get or derive the token signing key."""
    key = os.getenv("BETA_TOKEN_KEY")
    if not key:
        key = hashlib.sha256(f"buyermap_beta_{secret}".encode()).hexdigest()
    return key


# ============================================================================
# Remember-me tokens
# ============================================================================

def create_token(secret: str, now: Optional[float] = None) -> str:
    """Create a signed, expiring beta access token."""
    now = time.time() if now is None else now
    payload = json.dumps({"beta": True, "exp": now + TOKEN_EXPIRY_DAYS * 24 * 60 * 60}, sort_keys=True)
    signature = hmac.new(_get_token_key(secret).encode(), payload.encode(), hashlib.sha256).hexdigest()
    token_data = {"payload": payload, "sig": signature}
    return base64.urlsafe_b64encode(json.dumps(token_data).encode()).decode()


def verify_token(token: str, secret: str, now: Optional[float] = None) -> bool:
    """Check a token's signature and expiry."""
    try:
        token_data = json.loads(base64.urlsafe_b64decode(token.encode()).decode())
        payload = token_data["payload"]
        signature = token_data["sig"]
        if not isinstance(payload, str) or not isinstance(signature, str):
            return False

        expected_sig = hmac.new(_get_token_key(secret).encode(), payload.encode(), hashlib.sha256).hexdigest()
        if not hmac.compare_digest(signature, expected_sig):
            return False

        data = json.loads(payload)
        now = time.time() if now is None else now
        return bool(data.get("beta")) and data.get("exp", 0) >= now
    except (ValueError, KeyError, TypeError, AttributeError):
        return False


# ============================================================================
# Gate
# ============================================================================

def require_beta_access(config: Optional[Config] = None) -> bool:
    """
    Require the beta password for the current page.

    Stops page execution (``st.stop()``) until the visitor is authorized.

    Returns:
        True once authorized
    """
    config = config or Config.from_env()
    service = BetaAccessService(config.beta_access_password)

    if st.session_state.get(SESSION_KEY):
        _add_logout_button()
        return True

    if not service.configured:
        logger.error("BETA_ACCESS_PASSWORD not set in environment variables")
        st.error(CONTENT.beta.unavailable)
        st.stop()

    token = st.query_params.get(TOKEN_PARAM)
    if token and verify_token(token, service.secret):
        st.session_state[SESSION_KEY] = True
        _add_logout_button()
        return True

    _show_login_form(service)
    return False


def _show_login_form(service: BetaAccessService):
    """Display the beta login form."""
    copy = CONTENT.beta
    st.markdown(f"# {copy.title}")
    st.markdown(copy.subtitle)

    with st.form("beta_login_form"):
        password_input = st.text_input(copy.password_label, type="password", placeholder=copy.password_placeholder)
        submitted = st.form_submit_button(copy.submit, type="primary")

        if submitted:
            try:
                authorized = service.verify(password_input)
            except BetaAccessNotConfigured:
                authorized = None

            if authorized:
                st.session_state[SESSION_KEY] = True
                st.query_params[TOKEN_PARAM] = create_token(service.secret)
                st.rerun()
            elif authorized is None:
                st.error(copy.unavailable)
            else:
                st.error(copy.incorrect_password)

    st.caption(copy.contact)

    # Stop execution - don't render rest of page
    st.stop()


def _add_logout_button():
    """Add logout button to sidebar."""
    with st.sidebar:
        if st.button(CONTENT.beta.logout, key="_beta_logout_btn"):
            st.session_state[SESSION_KEY] = False
            st.query_params.clear()
            st.rerun()
