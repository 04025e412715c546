"""Date strings shown in report headers and on the title slide."""

from __future__ import annotations

from datetime import datetime


def format_report_date(moment: datetime) -> str:
    """Long US date without zero padding, e.g. 'March 5, 2024'."""
    return f"{moment:%B} {moment.day}, {moment.year}"


def format_report_time(moment: datetime) -> str:
    """Two-digit 12-hour time, e.g. '09:07 AM'."""
    return moment.strftime("%I:%M %p")


def generated_on(moment: datetime, *, with_time: bool = True) -> str:
    """'Generated on: <date>' line, optionally with ' at <time>'."""
    text = f"Generated on: {format_report_date(moment)}"
    if with_time:
        text += f" at {format_report_time(moment)}"
    return text
