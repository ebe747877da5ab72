"""
Document shapes used by the quiz read API.

Questions travel through the service as plain dicts straight from
Firestore (see ``firestore_dao``); only the static timetable reference
data is modelled with dataclasses, since it is parsed and validated once
at start-up.

Question fields:
  - docId: Firestore document ID (stamped on read)
  - topic, author, lang, question, options
  - date: publish/schedule instant as a unix timestamp (ordering key)
  - week, year: quota-week partition, derived from ``date`` at creation
  - approved: bool, defaults to False
  - poll_id: set once published to the chat-bot group
  - correct_option, explanation, screenshot, admin_message_id: restricted
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


WEEKDAYS = (
    "Monday", "Tuesday", "Wednesday", "Thursday",
    "Friday", "Saturday", "Sunday",
)

# Stripped from a single question for public callers
RESTRICTED_FIELDS = (
    "admin_message_id",
    "correct_option",
    "explanation",
    "screenshot",
    "approved",
    "schedule",
    "poll_id",
    "week",
    "year",
)

# The only fields public callers see in a listing
PUBLIC_LIST_FIELDS = ("docId", "question", "author", "topic", "date")


@dataclass(frozen=True)
class SlotConfig:
    code: str
    start_hr: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SlotConfig:
        return cls(code=data["code"], start_hr=int(data["startHr"]))


@dataclass(frozen=True)
class SlotAssignment:
    day: str
    slot: str
    topic: str
    assignee: Optional[str] = None

    @property
    def weekday(self) -> int:
        """Python weekday index (Monday == 0)."""
        return WEEKDAYS.index(self.day)

    @classmethod
    def from_dict(cls, day: str, slot: str, data: Dict[str, Any]) -> SlotAssignment:
        return cls(
            day=day,
            slot=slot,
            topic=data.get("topic", ""),
            assignee=data.get("assignee"),
        )
