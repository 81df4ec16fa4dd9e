"""Output layer for calendar documents."""

from diary_ics.output.ics_writer import ICSWriter

__all__ = ["ICSWriter"]
