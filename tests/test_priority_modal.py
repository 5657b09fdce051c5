"""
Tests for the priority selection modal.

Tests cover:
- Initial selection
- Local selection not touching the task
- Save, cancel, Escape and click-outside behaviour
"""

import pytest
from textual.color import Color
from textual.widgets import Button, RadioButton

from tasklist.models import Priority
from tasklist.ui.app import TaskListApp
from tasklist.ui.components.priority_modal import PriorityModal
from tests.helpers import get_task_item, open_priority_dialog, settle


class TestPriorityModalState:
    """Tests for the modal's own state, without a running app."""

    def test_initial_selection_is_task_priority(self, make_task):
        modal = PriorityModal(task=make_task(priority=Priority.HIGH))

        assert modal.selected_priority == Priority.HIGH

    def test_select_priority_is_local(self, make_task):
        task = make_task(priority=Priority.HIGH)
        modal = PriorityModal(task=task)

        modal.select_priority(Priority.URGENT)

        assert modal.selected_priority == Priority.URGENT
        assert task.priority == Priority.HIGH
        assert modal.edit_task.priority == Priority.HIGH


class TestPriorityModalFlow:
    """Tests for the dialog opened from a task row."""

    @pytest.mark.asyncio
    async def test_dialog_preselects_current_priority(self, small_store):
        app = TaskListApp(store=small_store)
        async with app.run_test() as pilot:
            modal = await open_priority_dialog(pilot, 1)

            assert modal.query_one("#priority-high", RadioButton).value is True
            assert modal.query_one("#priority-low", RadioButton).value is False

    @pytest.mark.asyncio
    async def test_dialog_lists_every_priority(self, small_store):
        app = TaskListApp(store=small_store)
        async with app.run_test() as pilot:
            modal = await open_priority_dialog(pilot, 0)

            radios = list(modal.query(RadioButton))
            assert len(radios) == 4
            assert modal.query_one("#save-button", Button)
            assert modal.query_one("#cancel-button", Button)

    @pytest.mark.asyncio
    async def test_select_then_cancel_keeps_priority(self, small_store):
        """Test HIGH -> select URGENT -> cancel stays HIGH."""
        app = TaskListApp(store=small_store)
        async with app.run_test() as pilot:
            modal = await open_priority_dialog(pilot, 1)
            modal.select_priority(Priority.URGENT)
            await settle(pilot)

            modal.action_cancel()
            await settle(pilot)

            assert not isinstance(app.screen, PriorityModal)
            assert small_store.get_task(1).priority == Priority.HIGH

    @pytest.mark.asyncio
    async def test_select_then_save_changes_priority(self, small_store):
        """Test HIGH -> select URGENT -> save gives URGENT."""
        app = TaskListApp(store=small_store)
        async with app.run_test() as pilot:
            modal = await open_priority_dialog(pilot, 1)
            modal.select_priority(Priority.URGENT)
            await settle(pilot)

            modal.action_save()
            await settle(pilot)

            assert not isinstance(app.screen, PriorityModal)
            assert small_store.get_task(1).priority == Priority.URGENT
            assert small_store.get_task(1).name == "Call plumber"
            assert get_task_item(pilot, 1).styles.background == Color.parse("red")

    @pytest.mark.asyncio
    async def test_radio_click_then_save_button(self, small_store):
        """Test choosing a row and pressing Save."""
        app = TaskListApp(store=small_store)
        async with app.run_test() as pilot:
            modal = await open_priority_dialog(pilot, 0)
            modal.query_one("#priority-medium", RadioButton).value = True
            await settle(pilot)
            assert modal.selected_priority == Priority.MEDIUM

            modal.query_one("#save-button", Button).press()
            await settle(pilot)

            assert small_store.get_task(0).priority == Priority.MEDIUM

    @pytest.mark.asyncio
    async def test_cancel_button(self, small_store):
        app = TaskListApp(store=small_store)
        async with app.run_test() as pilot:
            modal = await open_priority_dialog(pilot, 0)
            modal.select_priority(Priority.HIGH)
            await settle(pilot)

            modal.query_one("#cancel-button", Button).press()
            await settle(pilot)

            assert not isinstance(app.screen, PriorityModal)
            assert small_store.get_task(0).priority == Priority.LOW

    @pytest.mark.asyncio
    async def test_escape_cancels(self, small_store):
        app = TaskListApp(store=small_store)
        async with app.run_test() as pilot:
            modal = await open_priority_dialog(pilot, 0)
            modal.select_priority(Priority.URGENT)
            await settle(pilot)

            await pilot.press("escape")
            await settle(pilot)

            assert not isinstance(app.screen, PriorityModal)
            assert small_store.get_task(0).priority == Priority.LOW

    @pytest.mark.asyncio
    async def test_ctrl_s_saves(self, small_store):
        app = TaskListApp(store=small_store)
        async with app.run_test() as pilot:
            modal = await open_priority_dialog(pilot, 0)
            modal.select_priority(Priority.HIGH)
            await settle(pilot)

            await pilot.press("ctrl+s")
            await settle(pilot)

            assert small_store.get_task(0).priority == Priority.HIGH

    @pytest.mark.asyncio
    async def test_click_outside_cancels(self, small_store):
        """Test that clicking the overlay behaves like cancel."""
        app = TaskListApp(store=small_store)
        async with app.run_test() as pilot:
            modal = await open_priority_dialog(pilot, 1)
            modal.select_priority(Priority.LOW)
            await settle(pilot)

            await pilot.click(offset=(0, 0))
            await settle(pilot)

            assert not isinstance(app.screen, PriorityModal)
            assert small_store.get_task(1).priority == Priority.HIGH
