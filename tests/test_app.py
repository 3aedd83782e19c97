"""Smoke tests for the Streamlit page."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_FILE = str(Path(__file__).resolve().parents[1] / "app" / "main.py")


class TestStreamlitPage:
    """Tests for the page script rendered by Streamlit's test harness."""

    def test_logged_out_page(self):
        """Test the first render asks the user to log in."""
        at = AppTest.from_file(APP_FILE, default_timeout=10).run()

        assert not at.exception
        assert at.title[0].value == "Log in to get started"

    def test_login_renders_countdown_without_blocking(self):
        """Test a login renders the dashboard and the countdown caption."""
        at = AppTest.from_file(APP_FILE, default_timeout=10).run()
        at.text_input[0].input("js")
        at.text_input[1].input("1111")
        at.button[0].click().run()

        assert not at.exception
        assert at.title[0].value == "Hello, Jonas"
        captions = [caption.value for caption in at.caption]
        assert any(c.startswith("You will be logged out in 0") for c in captions)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
