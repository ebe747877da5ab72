"""Static weekly slot timetable: day x slot -> {topic, assignee}."""

import json
import logging

from app.errors import ConfigurationError
from app.models import WEEKDAYS, SlotAssignment, SlotConfig

logger = logging.getLogger(__name__)


class SlotTimetable:
    """Read-only weekly grid plus slot start-hour config."""

    def __init__(self, assignments, slots, topics=(), langs=()):
        self._assignments = tuple(assignments)
        self._slots = {s.code: s for s in slots}
        self.topics = tuple(topics)
        self.langs = tuple(langs)

        for entry in self._assignments:
            if entry.day not in WEEKDAYS:
                raise ConfigurationError(f'Unknown weekday in timetable: {entry.day}')
            if entry.slot not in self._slots:
                raise ConfigurationError(f'Slot {entry.slot} on {entry.day} has no config entry')
        for slot in self._slots.values():
            if not 0 <= slot.start_hr <= 23:
                raise ConfigurationError(f'Slot {slot.code} startHr out of range: {slot.start_hr}')

    @classmethod
    def from_dicts(cls, timetable, configs):
        assignments = [
            SlotAssignment.from_dict(day, slot, data)
            for day, slots in timetable.items()
            for slot, data in slots.items()
        ]
        slots = [SlotConfig.from_dict(s) for s in configs.get('slots', [])]
        return cls(
            assignments,
            slots,
            topics=configs.get('topics', []),
            langs=configs.get('langs', []),
        )

    @classmethod
    def load(cls, timetable_path, config_path):
        try:
            with open(timetable_path, encoding='utf-8') as f:
                timetable = json.load(f)
            with open(config_path, encoding='utf-8') as f:
                configs = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f'Cannot read timetable data: {e}') from e

        try:
            table = cls.from_dicts(timetable, configs)
        except (KeyError, TypeError, AttributeError) as e:
            raise ConfigurationError(f'Malformed timetable data: {e}') from e

        logger.info('Loaded timetable with %d slot assignments', len(table))
        return table

    def __len__(self):
        return len(self._assignments)

    def entries(self):
        """Flattened (day, slot) sequence in file order: day order, then slot order."""
        return iter(self._assignments)

    def start_hour(self, code):
        return self._slots[code].start_hr
