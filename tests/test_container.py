from __future__ import annotations

from datetime import timezone
from types import SimpleNamespace

import pytest

from config import get_settings_module
from src.barber_timeclock.barber_timeclock.container import build_container
from src.barber_timeclock.barber_timeclock.core.exceptions import ValidationError
from src.barber_timeclock.barber_timeclock.main import create_container
from src.barber_timeclock.barber_timeclock.reports.service import TimeTrackingReportService
from src.barber_timeclock.barber_timeclock.timeclock.service import TimeClockService


class NoEntries:
    def list_entries(self, *, start, end, barber_id=None):
        return []

    def add_entry(self, **kwargs):
        raise AssertionError("not expected")


class NoBarbers:
    def get_display_names(self):
        return {}


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "config.production"),
        ("prod", "config.production"),
        ("testing", "config.testing"),
        ("dev", "config.development"),
        ("", "config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_build_container_wires_services():
    settings = SimpleNamespace(DAY_TIMEZONE="UTC", DISPLAY_TIMEZONE="America/Chicago", UNKNOWN_BARBER_NAME="N/A")

    container = build_container(NoEntries(), NoBarbers(), settings=settings)

    assert container.day_tz == timezone.utc
    assert str(container.display_tz) == "America/Chicago"
    assert isinstance(container.time_clock_service, TimeClockService)
    assert isinstance(container.report_service, TimeTrackingReportService)


def test_build_container_rejects_unknown_timezone():
    settings = SimpleNamespace(DAY_TIMEZONE="Nowhere/Land")

    with pytest.raises(ValidationError):
        build_container(NoEntries(), NoBarbers(), settings=settings)


def test_create_container_with_testing_settings():
    container = create_container(NoEntries(), NoBarbers(), settings_module="config.testing")

    assert container.day_tz == timezone.utc
    assert container.time_clock_service.clock_status("b1").allowed_actions
