"""Tests for the special days workflow against the Flask service."""

from datetime import date

import pytest

from roster.models.special_day import DEFAULT_COLOR, SpecialDayCreate, ViewMode
from roster.workflows.special_days import (
    SPECIAL_DAYS_KEY,
    SPECIAL_DAYS_MONTH_KEY,
    SpecialDaysWorkflow,
)

CHRISTMAS = {
    "date": "2025-12-25",
    "name": "Christmas",
    "description": "Christmas Day",
    "color": "#ff0000",
}


@pytest.fixture
def workflow(admin_api, cache, notifier):
    return SpecialDaysWorkflow(admin_api, cache, notifier, today=date(2025, 3, 10))


def last_message(notifier):
    notification = notifier.active()[-1]
    return notification.variant, notification.description


def test_create_then_list(workflow, notifier):
    result = workflow.create_special_day(CHRISTMAS)
    assert result.ok
    assert result.data["id"] == 1
    assert last_message(notifier) == ("default", "Special day added successfully")

    days = workflow.list_special_days().data
    assert len(days) == 1
    christmas = days[0]
    assert christmas.date == date(2025, 12, 25)
    assert christmas.name == "Christmas"
    assert christmas.description == "Christmas Day"
    assert christmas.color == "#ff0000"


def test_create_uses_default_color(workflow):
    workflow.create_special_day({"date": date(2025, 1, 26), "name": "Australia Day"})
    assert workflow.list_special_days().data[0].color == DEFAULT_COLOR


def test_list_is_ordered_by_date(workflow):
    workflow.create_special_day(CHRISTMAS)
    workflow.create_special_day({"date": "2025-01-01", "name": "New Year's Day"})
    workflow.create_special_day({"date": "2025-04-18", "name": "Good Friday"})

    names = [day.name for day in workflow.list_special_days().data]
    assert names == ["New Year's Day", "Good Friday", "Christmas"]


def test_mutations_invalidate_list_and_month_queries(workflow, cache):
    workflow.create_special_day(CHRISTMAS)
    workflow.list_special_days()
    workflow.special_days_for_month(2025, 12)
    month_key = SPECIAL_DAYS_MONTH_KEY + (2025, 12)
    assert not cache.peek(SPECIAL_DAYS_KEY).is_stale
    assert not cache.peek(month_key).is_stale

    workflow.update_special_day(1, {"name": "Christmas Day"})
    assert cache.peek(SPECIAL_DAYS_KEY).is_stale
    assert cache.peek(month_key).is_stale

    assert workflow.special_days_for_month(2025, 12).data[0].name == "Christmas Day"
    workflow.list_special_days()

    workflow.delete_special_day(1)
    assert cache.peek(SPECIAL_DAYS_KEY).is_stale
    assert cache.peek(month_key).is_stale
    assert workflow.special_days_for_month(2025, 12).data == []


def test_update_and_delete_round_trip(workflow, notifier):
    workflow.create_special_day(CHRISTMAS)

    result = workflow.update_special_day(1, {"color": "#00ff00", "description": None})
    assert result.ok
    assert last_message(notifier) == ("default", "Special day updated successfully")
    day = workflow.list_special_days().data[0]
    assert day.color == "#00ff00"
    assert day.description is None
    assert day.name == "Christmas"

    result = workflow.delete_special_day(1)
    assert result.ok
    assert last_message(notifier) == ("default", "Special day deleted successfully")
    assert workflow.list_special_days().data == []
    assert not workflow.has_special_days
    assert workflow.empty_message() == "No special days have been created yet"


def test_create_validation_failures_send_nothing(workflow, admin_session, notifier):
    result = workflow.create_special_day({**CHRISTMAS, "color": "crimson"})
    assert not result.ok
    assert "Invalid color" in result.error

    result = workflow.create_special_day({**CHRISTMAS, "name": "   "})
    assert not result.ok
    assert result.error == "name: Name is required"

    result = workflow.create_special_day({"name": "No date"})
    assert not result.ok

    assert admin_session.sent_with("POST") == []
    assert all(n.is_error for n in notifier.active())


def test_empty_update_is_rejected(workflow, admin_session):
    result = workflow.update_special_day(1, {})
    assert result.error == "Nothing to update"
    assert admin_session.sent_with("PATCH") == []


def test_update_unknown_id_reports_server_message(workflow, notifier):
    result = workflow.update_special_day(999, {"name": "Ghost"})
    assert not result.ok
    assert result.error == "Special day not found"
    assert last_message(notifier) == ("destructive", "Special day not found")


def test_delete_unknown_id_does_not_invalidate(workflow, cache):
    workflow.list_special_days()
    result = workflow.delete_special_day(42)
    assert result.error == "Special day not found"
    assert not cache.peek(SPECIAL_DAYS_KEY).is_stale


def test_member_can_read_but_not_write(member_api, cache, notifier, store):
    store.create_special_day(SpecialDayCreate(date=date(2025, 12, 25), name="Christmas"))
    workflow = SpecialDaysWorkflow(member_api, cache, notifier)

    assert [d.name for d in workflow.list_special_days().data] == ["Christmas"]
    result = workflow.create_special_day({"date": "2025-12-26", "name": "Boxing Day"})
    assert result.error == "Admin access required"


def test_month_view_filters_fetched_list(workflow, admin_session):
    workflow.create_special_day(CHRISTMAS)
    workflow.create_special_day({"date": "2026-01-01", "name": "New Year's Day"})

    workflow.set_view_mode("month")
    workflow.select_month(2025, 12)
    gets_before = len(admin_session.sent_with("GET"))

    first = workflow.visible_special_days()
    second = workflow.visible_special_days()
    assert [d.name for d in first] == ["Christmas"]
    assert first == second
    # Filtering is local after the one list fetch
    assert len(admin_session.sent_with("GET")) == gets_before + 1

    workflow.set_view_mode(ViewMode.ALL)
    assert [d.name for d in workflow.visible_special_days()] == [
        "Christmas",
        "New Year's Day",
    ]


def test_month_view_empty_message(workflow):
    workflow.create_special_day(CHRISTMAS)
    workflow.set_view_mode(ViewMode.MONTH)
    assert workflow.selected_month == (2025, 3)
    assert workflow.visible_special_days() == []
    assert workflow.empty_message() == "No special days marked for March 2025"


def test_month_navigation_crosses_years(workflow):
    workflow.select_month(2025, 12)
    assert workflow.next_month() == (2026, 1)
    workflow.select_month(2025, 1)
    assert workflow.previous_month() == (2024, 12)

    with pytest.raises(ValueError):
        workflow.select_month(2025, 13)


def test_toggle_view_mode(workflow):
    assert workflow.view_mode == ViewMode.ALL
    assert workflow.toggle_view_mode() == ViewMode.MONTH
    assert workflow.toggle_view_mode() == ViewMode.ALL


def test_server_month_query(workflow):
    workflow.create_special_day(CHRISTMAS)
    workflow.create_special_day({"date": "2025-12-31", "name": "New Year's Eve"})
    workflow.create_special_day({"date": "2025-11-30", "name": "St Andrew's Day"})

    result = workflow.special_days_for_month(2025, 12)
    assert [d.name for d in result.data] == ["Christmas", "New Year's Eve"]


def test_empty_description_is_kept_as_empty_string(workflow, store):
    christmas = {
        "date": "2025-12-25",
        "name": "Christmas",
        "description": "",
        "color": "#ff0000",
    }
    assert workflow.create_special_day(christmas).ok

    day = workflow.list_special_days().data[0]
    assert day.date == date(2025, 12, 25)
    assert day.name == "Christmas"
    assert day.description == ""
    assert day.color == "#ff0000"
    assert store.get_special_day(1).description == ""
