"""
Tests for the Streamlit wizard page.
"""

import pytest
import requests
from unittest.mock import patch
from streamlit.testing.v1 import AppTest

from article_machine.config import config
from article_machine.core.wizard import WizardState, STEP_CONFIGURE, STEP_SEARCH, SCROLL_TOP

APP_PATH = "../article_machine/frontend/streamlit_app.py"


@pytest.fixture
def app_backend(backend):
    """Backend double standing in for the HTTP API client."""
    backend.base_url = config.API_URL
    backend.health.return_value = {"status": "ok", "api_key_configured": True, "model": "gemini-test"}
    return backend


def _app(state, backend):
    at = AppTest.from_file(APP_PATH, default_timeout=10)
    at.session_state["wizard"] = state
    at.session_state["api_client"] = backend
    return at


def test_first_render(app_backend):
    at = _app(WizardState(), app_backend).run()

    assert not at.exception
    assert "gemini-test" in at.sidebar.success[0].value
    app_backend.search_videos.assert_not_called()


def test_api_unreachable(app_backend):
    app_backend.health.side_effect = requests.ConnectionError("refused")

    at = _app(WizardState(), app_backend).run()

    assert not at.exception
    assert "API indisponível" in at.sidebar.warning[0].value


def test_video_cards_selectable(app_backend, videos):
    state = WizardState()
    state.videos = videos

    at = _app(state, app_backend).run()

    assert at.button(key="select_0_vid001").disabled is False
    assert at.button(key="select_1_vid002").disabled is False


def test_video_cards_disabled_while_transcribing(app_backend, videos):
    state = WizardState()
    state.videos = videos
    state.is_transcribing = True

    at = _app(state, app_backend).run()

    assert not at.exception
    assert at.button(key="select_0_vid001").disabled is True
    assert at.button(key="select_1_vid002").disabled is True
    app_backend.generate_transcription.assert_not_called()


def test_reset_scrolls_to_top(app_backend, videos, transcribed_video):
    state = WizardState()
    state.videos = videos
    state.selected_video = transcribed_video
    state.current_step = STEP_CONFIGURE

    with patch("article_machine.frontend.components.scroll_to") as mock_scroll:
        at = _app(state, app_backend).run()
        assert at.button(key="select_0_vid001").disabled is True
        mock_scroll.assert_not_called()

        at.button(key="nav_reset").click().run()

    assert not at.exception
    wizard = at.session_state["wizard"]
    assert wizard.current_step == STEP_SEARCH
    assert wizard.videos == []
    assert wizard.selected_video is None
    mock_scroll.assert_called_once_with(SCROLL_TOP)
