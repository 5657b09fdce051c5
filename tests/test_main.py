"""
Tests for the command line entry point.
"""

import tasklist.__main__ as entry
from tasklist.ui.app import TaskListApp


class TestMain:
    """Tests for main()."""

    def test_returns_zero_on_normal_exit(self, monkeypatch):
        calls = []
        monkeypatch.setattr(entry, "setup_logging", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr(TaskListApp, "run", lambda self: None)

        assert entry.main([]) == 0
        assert calls == [{"use_textual_handler": False}]

    def test_dev_mode_enables_textual_handler(self, monkeypatch):
        calls = []
        monkeypatch.setenv("TASKLIST_DEV", "true")
        monkeypatch.setattr(entry, "setup_logging", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr(TaskListApp, "run", lambda self: None)

        entry.main([])

        assert calls == [{"use_textual_handler": True}]

    def test_returns_one_on_error(self, monkeypatch):
        def fail(self):
            raise RuntimeError("boom")

        monkeypatch.setattr(entry, "setup_logging", lambda **kwargs: None)
        monkeypatch.setattr(TaskListApp, "run", fail)

        assert entry.main([]) == 1

    def test_keyboard_interrupt_is_clean_exit(self, monkeypatch):
        def interrupt(self):
            raise KeyboardInterrupt

        monkeypatch.setattr(entry, "setup_logging", lambda **kwargs: None)
        monkeypatch.setattr(TaskListApp, "run", interrupt)

        assert entry.main([]) == 0
