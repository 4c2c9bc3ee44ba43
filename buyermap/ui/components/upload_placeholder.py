"""Upload placeholder - demo-mode stand-in for the materials upload step."""

from typing import Callable

import streamlit as st

from buyermap.content import CONTENT


def render_upload_placeholder(on_complete: Callable[[], None], key: str = "upload_skip") -> None:
    """
    Render the upload call to action.

    No file is accepted: the button calls ``on_complete`` with no arguments,
    once per click.
    """
    copy = CONTENT.upload

    st.markdown(f"## {copy.title}")
    st.caption(copy.subtitle)

    with st.container(border=True):
        st.markdown(f"### {copy.deck_heading}")
        st.write(copy.deck_description)
        st.button(copy.skip_button, key=key, type="primary", on_click=on_complete)
