"""Date parsing for deadline and event clauses.

Only a small, fixed set of numeric formats is recognized. Anything else is
left unparsed and the task keeps showing the text the user typed.
"""

import re
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


class DateStructure(Enum):
    """Shape of a recognized date clause."""
    DATE = "date"
    DATE_TIME = "date-time"


@dataclass(frozen=True)
class StructuredDate:
    """A decoded date clause and the format it was recognized as."""
    structure: DateStructure
    value: datetime

    @property
    def has_time(self) -> bool:
        return self.structure is DateStructure.DATE_TIME


class DateParser:
    """Tries each known format in order; the first valid match wins."""

    def __init__(self):
        # (guard regex, strptime format, structure), in priority order
        self.patterns: List[Tuple[re.Pattern, str, DateStructure]] = [
            (re.compile(r'\d{4}-\d{2}-\d{2} \d{4}'), '%Y-%m-%d %H%M', DateStructure.DATE_TIME),
            (re.compile(r'\d{4}-\d{2}-\d{2}'), '%Y-%m-%d', DateStructure.DATE),
            (re.compile(r'\d{1,2}/\d{1,2}/\d{4} \d{4}'), '%d/%m/%Y %H%M', DateStructure.DATE_TIME),
            (re.compile(r'\d{1,2}/\d{1,2}/\d{4}'), '%d/%m/%Y', DateStructure.DATE),
        ]

    def parse(self, text: Optional[str]) -> Optional[StructuredDate]:
        """Parse a date clause, returning None when no format matches."""
        if not text:
            return None

        date_str = text.strip()

        for pattern, fmt, structure in self.patterns:
            if not pattern.fullmatch(date_str):
                continue
            try:
                value = datetime.strptime(date_str, fmt)
            except ValueError:
                # Right shape, impossible calendar value (e.g. month 13)
                continue
            return StructuredDate(structure=structure, value=value)

        logger.debug("Unrecognized date format, keeping raw text: %r", date_str)
        return None


_default_parser = DateParser()


def parse_date(text: Optional[str]) -> Optional[StructuredDate]:
    """Parse ``text`` with the shared default parser."""
    return _default_parser.parse(text)
