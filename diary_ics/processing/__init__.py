"""Diary processing: matching, extraction, rendering and feed assembly."""

from diary_ics.processing.date_format import compile_format, parse_date
from diary_ics.processing.deep_link import build_deep_link
from diary_ics.processing.diary_matcher import DiaryMatcher
from diary_ics.processing.entry_extractor import extract_entries
from diary_ics.processing.feed_assembler import FeedAssembler, build_feed
from diary_ics.processing.frontmatter_renderer import render_frontmatter

__all__ = [
    "DiaryMatcher",
    "FeedAssembler",
    "build_deep_link",
    "build_feed",
    "compile_format",
    "extract_entries",
    "parse_date",
    "render_frontmatter",
]
