"""
Tests for the upload placeholder component.

Streamlit is mocked; the button's on_click is captured and invoked directly.
"""

from unittest.mock import MagicMock, patch

from buyermap.content import CONTENT
from buyermap.ui.components.upload_placeholder import render_upload_placeholder


class TestUploadPlaceholder:
    @patch("buyermap.ui.components.upload_placeholder.st")
    def test_renders_call_to_action(self, mock_st):
        render_upload_placeholder(on_complete=MagicMock())

        mock_st.markdown.assert_any_call(f"## {CONTENT.upload.title}")
        mock_st.caption.assert_called_once_with(CONTENT.upload.subtitle)
        args, kwargs = mock_st.button.call_args
        assert args[0] == CONTENT.upload.skip_button
        assert kwargs["type"] == "primary"

    @patch("buyermap.ui.components.upload_placeholder.st")
    def test_button_forwards_to_callback(self, mock_st):
        on_complete = MagicMock()
        render_upload_placeholder(on_complete=on_complete)

        on_click = mock_st.button.call_args.kwargs["on_click"]
        assert on_click is on_complete
        on_complete.assert_not_called()

    @patch("buyermap.ui.components.upload_placeholder.st")
    def test_each_activation_calls_callback_once(self, mock_st):
        calls = []
        render_upload_placeholder(on_complete=lambda: calls.append(1))

        on_click = mock_st.button.call_args.kwargs["on_click"]
        for _ in range(3):
            on_click()

        assert len(calls) == 3

    @patch("buyermap.ui.components.upload_placeholder.st")
    def test_custom_key(self, mock_st):
        render_upload_placeholder(on_complete=MagicMock(), key="my_key")
        assert mock_st.button.call_args.kwargs["key"] == "my_key"
