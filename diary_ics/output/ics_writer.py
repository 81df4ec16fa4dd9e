"""ICS encoder for diary events."""

import logging
import uuid
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from pathlib import Path

from icalendar import Calendar, Event

from diary_ics.exceptions import FeedEncodingError
from diary_ics.models.event import DiaryEvent

logger = logging.getLogger(__name__)

PRODID = "-//Diary ICS//EN"
UID_DOMAIN = "diary-ics"


def event_uid(event: DiaryEvent, index: int) -> str:
    """Stable UID from the event's source note, position and title."""
    key = f"{event.source_path or ''}|{event.date.isoformat()}|{index}|{event.title}"
    return f"{uuid.uuid5(uuid.NAMESPACE_URL, key)}@{UID_DOMAIN}"


class ICSWriter:
    """Writer for ICS calendar documents."""

    def build_calendar(self, events: list[DiaryEvent], calendar_name: str) -> Calendar:
        """Build an icalendar Calendar with one all-day VEVENT per diary event."""
        cal = Calendar()
        cal.add("prodid", PRODID)
        cal.add("version", "2.0")
        cal.add("calscale", "GREGORIAN")
        cal.add("method", "PUBLISH")
        cal.add("X-WR-CALNAME", calendar_name)

        dtstamp = datetime.now(timezone.utc)
        # Position of each event within its source note
        positions: dict[str, int] = defaultdict(int)

        for event_model in events:
            source = event_model.source_path or ""
            index = positions[source]
            positions[source] += 1

            event = Event()
            event.add("uid", event_uid(event_model, index))
            event.add("dtstamp", dtstamp)
            event.add("summary", event_model.title)
            if event_model.url:
                event.add("url", event_model.url)
            if event_model.description:
                event.add("description", event_model.description)

            # All-day event: date-valued DTSTART plus a whole-day duration
            event.add("dtstart", event_model.date)
            event.add("duration", timedelta(days=event_model.duration_days))

            event.add("status", event_model.status)
            event.add("transp", "TRANSPARENT")
            event.add("X-MICROSOFT-CDO-BUSYSTATUS", event_model.busy_status)

            cal.add_component(event)

        return cal

    def to_ical(self, events: list[DiaryEvent], calendar_name: str) -> bytes:
        """Encode events as an ICS document.

        Raises:
            FeedEncodingError: If the calendar cannot be serialized
        """
        try:
            ical_content = self.build_calendar(events, calendar_name).to_ical()
        except Exception as e:
            raise FeedEncodingError(f"Cannot encode calendar: {e}") from e

        if not ical_content:
            raise FeedEncodingError("Calendar.to_ical() returned empty content")
        return ical_content

    def write(self, events: list[DiaryEvent], path: Path, calendar_name: str) -> None:
        """Write events to an ICS file.

        Raises:
            FeedEncodingError: If the calendar cannot be serialized
        """
        ical_content = self.to_ical(events, calendar_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(ical_content)
        logger.info(f"Wrote {len(events)} events to {path}")
