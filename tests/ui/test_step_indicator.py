"""
Tests for the step indicator component.

Classification is pure; rendering is checked by patching Streamlit.
"""

import pytest
from unittest.mock import patch

from buyermap.ui.components.step_indicator import (
    ACTIVE_BG,
    DEFAULT_TOTAL_STEPS,
    build_step_indicator,
    render_step_indicator,
    step_indicator_html,
)


class TestBuildStepIndicator:
    def test_default_total_is_four(self):
        state = build_step_indicator(1)
        assert DEFAULT_TOTAL_STEPS == 4
        assert state.total_steps == 4
        assert len(state.markers) == 4
        assert len(state.connectors) == 3

    @pytest.mark.parametrize("total", [1, 2, 4, 7])
    @pytest.mark.parametrize("current", [-1, 0, 1, 2, 4, 8])
    def test_classification(self, current, total):
        state = build_step_indicator(current, total)

        assert [m.index for m in state.markers] == list(range(1, total + 1))
        assert [c.index for c in state.connectors] == list(range(1, total))
        for marker in state.markers:
            assert marker.reached == (current >= marker.index)
        for connector in state.connectors:
            assert connector.highlighted == (current > connector.index)

    def test_single_step_has_no_connectors(self):
        state = build_step_indicator(1, total_steps=1)
        assert len(state.markers) == 1
        assert state.connectors == []

    def test_current_step_past_total_is_not_clamped(self):
        state = build_step_indicator(9, total_steps=3)
        assert state.current_step == 9
        assert all(m.reached for m in state.markers)
        assert all(c.highlighted for c in state.connectors)

    def test_zero_reaches_nothing(self):
        state = build_step_indicator(0)
        assert not any(m.reached for m in state.markers)

    def test_invalid_total_raises(self):
        with pytest.raises(ValueError):
            build_step_indicator(1, total_steps=0)

    def test_idempotent(self):
        assert build_step_indicator(2, 4) == build_step_indicator(2, 4)


class TestStepIndicatorHtml:
    def test_marker_and_connector_counts(self):
        html = step_indicator_html(2, 4)
        assert html.count('class="bm-step ') == 4
        assert html.count('class="bm-connector ') == 3

    def test_reached_markers(self):
        html = step_indicator_html(2, 4)
        assert html.count("bm-step-reached") == 2
        assert html.count("bm-step-pending") == 2
        assert html.count("bm-connector-active") == 1
        assert ACTIVE_BG in html

    def test_labels_become_titles(self):
        html = step_indicator_html(1, 2, labels=["Upload", "Results"])
        assert 'title="Upload"' in html
        assert 'title="Results"' in html

    def test_label_quotes_escaped_in_title(self):
        html = step_indicator_html(1, 1, labels=['Say "hi" <now>'])
        assert 'title="Say &quot;hi&quot; &lt;now&gt;"' in html


class TestRenderStepIndicator:
    @patch("buyermap.ui.components.step_indicator.st")
    def test_renders_html_via_markdown(self, mock_st):
        render_step_indicator(3, 4)

        mock_st.markdown.assert_called_once()
        args, kwargs = mock_st.markdown.call_args
        assert args[0] == step_indicator_html(3, 4)
        assert kwargs["unsafe_allow_html"] is True
