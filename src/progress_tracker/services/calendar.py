"""Inclusive calendar date ranges."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates.

    Iteration works on naive ``date`` values, so every step is exactly one
    calendar day regardless of time zone or daylight-saving transitions. Each
    call to ``iter()`` starts a fresh pass; an ``end`` before ``start`` yields
    nothing.
    """

    start: date
    end: date

    def __iter__(self) -> Iterator[date]:
        if self.end < self.start:
            return
        current = self.start
        yield current
        while current < self.end:
            current += ONE_DAY
            yield current

    def __len__(self) -> int:
        return max((self.end - self.start).days + 1, 0)

    def __contains__(self, day: object) -> bool:
        if isinstance(day, datetime) or not isinstance(day, date):
            return False
        return self.start <= day <= self.end
