"""Tests for ICS encoding."""

from datetime import date, timedelta

import pytest
from icalendar import Calendar

from diary_ics.exceptions import FeedEncodingError
from diary_ics.models.event import DiaryEvent
from diary_ics.output.ics_writer import PRODID, ICSWriter, event_uid


@pytest.fixture
def events():
    return [
        DiaryEvent(
            title="Morning",
            date=date(2024, 1, 15),
            description="Coffee\nRun\n\n",
            url="obsidian://open?vault=MyVault&file=2024-01-15.md%23Morning",
            source_path="2024-01-15.md",
        ),
        DiaryEvent(
            title="Evening",
            date=date(2024, 1, 15),
            url="obsidian://open?vault=MyVault&file=2024-01-15.md%23Evening",
            source_path="2024-01-15.md",
        ),
    ]


def parse(content: bytes) -> Calendar:
    return Calendar.from_ical(content)


def test_calendar_properties(events):
    """Test the calendar-level properties."""
    cal = parse(ICSWriter().to_ical(events, "MyVault"))

    assert str(cal["prodid"]) == PRODID
    assert str(cal["version"]) == "2.0"
    assert str(cal["calscale"]) == "GREGORIAN"
    assert str(cal["method"]) == "PUBLISH"
    assert str(cal["x-wr-calname"]) == "MyVault"


def test_all_day_events(events):
    """Test VEVENT fields for all-day entries."""
    cal = parse(ICSWriter().to_ical(events, "MyVault"))
    vevents = cal.walk("VEVENT")

    assert len(vevents) == 2
    first = vevents[0]
    assert str(first["summary"]) == "Morning"
    assert first["dtstart"].dt == date(2024, 1, 15)
    assert first["duration"].dt == timedelta(days=1)
    assert str(first["status"]) == "CONFIRMED"
    assert str(first["transp"]) == "TRANSPARENT"
    assert str(first["x-microsoft-cdo-busystatus"]) == "FREE"
    assert str(first["url"]) == events[0].url
    assert str(first["description"]) == "Coffee\nRun\n\n"


def test_dtstart_is_date_valued(events):
    content = ICSWriter().to_ical(events, "MyVault")
    assert b"DTSTART;VALUE=DATE:20240115" in content
    assert b"DURATION:P1D" in content


def test_empty_description_omitted(events):
    cal = parse(ICSWriter().to_ical(events, "MyVault"))
    assert "description" not in cal.walk("VEVENT")[1]


def test_uids_unique_and_stable(events):
    """Test that UIDs differ per event and repeat across builds."""
    first = [str(e["uid"]) for e in parse(ICSWriter().to_ical(events, "V")).walk("VEVENT")]
    second = [str(e["uid"]) for e in parse(ICSWriter().to_ical(events, "V")).walk("VEVENT")]

    assert len(set(first)) == 2
    assert first == second


def test_uid_distinguishes_duplicate_titles():
    event = DiaryEvent(title="Same", date=date(2024, 1, 1), source_path="a.md")
    assert event_uid(event, 0) != event_uid(event, 1)


def test_empty_feed():
    """Test that a feed with no events is still a valid calendar."""
    cal = parse(ICSWriter().to_ical([], "MyVault"))
    assert cal.walk("VEVENT") == []


def test_write(events, tmp_path):
    path = tmp_path / "out" / "diary.ics"
    ICSWriter().write(events, path, "MyVault")

    assert path.exists()
    assert len(parse(path.read_bytes()).walk("VEVENT")) == 2


def test_encoding_error(monkeypatch, events):
    """Test that serialization failures are wrapped."""
    writer = ICSWriter()

    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(writer, "build_calendar", broken)
    with pytest.raises(FeedEncodingError):
        writer.to_ical(events, "MyVault")
