"""Tests for the roster store."""

from datetime import date

import pytest

from roster.exceptions import (
    InitialsTakenError,
    SpecialDayNotFoundError,
    UserNotFoundError,
)
from roster.models.settings import NameFormat, SettingsUpdate
from roster.models.special_day import SpecialDayCreate, SpecialDayUpdate
from roster.server.store import RosterStore


def christmas(**overrides):
    fields = {"date": date(2025, 12, 25), "name": "Christmas"} | overrides
    return SpecialDayCreate(**fields)


def test_store_persists_and_reloads(tmp_path):
    path = tmp_path / "nested" / "roster.json"
    store = RosterStore(path)
    store.create_user("Jane", "Smith", is_admin=True)
    store.create_special_day(christmas())
    store.update_settings(SettingsUpdate(deadline_day=9, name_format=NameFormat.LAST))

    reloaded = RosterStore(path)
    assert reloaded.get_settings().deadline_day == 9
    assert reloaded.get_name_format() == NameFormat.LAST
    assert [d.name for d in reloaded.list_special_days()] == ["Christmas"]
    assert reloaded.get_user(1).is_admin

    # Ids keep counting after a reload
    assert reloaded.create_special_day(christmas(name="Boxing Day")).id == 2


def test_in_memory_store_writes_nothing(tmp_path):
    store = RosterStore()
    store.create_special_day(christmas())
    assert list(tmp_path.iterdir()) == []


def test_update_settings_leaves_unset_fields():
    store = RosterStore()
    store.update_settings(SettingsUpdate(name_format=NameFormat.INITIALS))
    store.update_settings(SettingsUpdate(deadline_day=3))
    settings = store.get_settings()
    assert settings.name_format == NameFormat.INITIALS
    assert settings.deadline_day == 3


def test_special_days_ordered_by_date_then_id():
    store = RosterStore()
    store.create_special_day(christmas(name="Second"))
    store.create_special_day(christmas(date=date(2025, 1, 1), name="First"))
    store.create_special_day(christmas(name="Third"))

    assert [d.name for d in store.list_special_days()] == ["First", "Second", "Third"]
    assert [d.name for d in store.special_days_by_month(2025, 12)] == ["Second", "Third"]


def test_update_special_day_merges_fields():
    store = RosterStore()
    store.create_special_day(christmas(description="Day off", color="#ff0000"))

    updated = store.update_special_day(1, SpecialDayUpdate(name="Christmas Day"))
    assert updated.name == "Christmas Day"
    assert updated.description == "Day off"
    assert updated.color == "#ff0000"
    assert store.get_special_day(1) == updated


def test_missing_records_raise():
    store = RosterStore()
    with pytest.raises(SpecialDayNotFoundError):
        store.get_special_day(1)
    with pytest.raises(SpecialDayNotFoundError):
        store.update_special_day(1, SpecialDayUpdate(name="x"))
    with pytest.raises(SpecialDayNotFoundError):
        store.delete_special_day(1)
    with pytest.raises(UserNotFoundError):
        store.get_user(1)


def test_create_user_generates_unique_initials():
    store = RosterStore()
    assert store.create_user("Chris", "Martin").initials == "CM"
    assert store.create_user("Claire", "Moore").initials == "CM2"
    assert store.create_user("Carl", "Mason", initials="CAM").initials == "CAM"


def test_update_user_name_regenerates_initials_unless_taken(tmp_path):
    store = RosterStore(tmp_path / "roster.json")
    store.create_user("Chris", "Martin")
    store.create_user("Jane", "Smith")

    renamed = store.update_user_name(2, "Jane", "Moore")
    assert (renamed.first_name, renamed.last_name, renamed.initials) == (
        "Jane",
        "Moore",
        "JM",
    )

    # CM belongs to user 1, so user 2 keeps JM
    assert store.update_user_name(2, "Claire", "Moore").initials == "JM"
    assert RosterStore(tmp_path / "roster.json").get_user(2).first_name == "Claire"

    with pytest.raises(UserNotFoundError):
        store.update_user_name(9, "No", "One")


def test_update_user_initials_rejects_duplicates():
    store = RosterStore()
    store.create_user("Chris", "Martin")
    store.create_user("Claire", "Moore")

    assert store.update_user_initials(2, "CLM").initials == "CLM"
    assert store.update_user_initials(2, "CLM").initials == "CLM"
    with pytest.raises(InitialsTakenError):
        store.update_user_initials(2, "CM")
    assert store.get_user(2).initials == "CLM"
    with pytest.raises(UserNotFoundError):
        store.update_user_initials(9, "XX")
