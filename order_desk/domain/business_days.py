"""Business-day arithmetic: weekends and a configurable holiday set are skipped."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from .errors import InvalidArgumentError

SATURDAY = 5
SUNDAY = 6


class HolidayRecurrence(StrEnum):
    yearly = "yearly"  # same month/day every year
    fixed = "fixed"  # only the exact calendar date


class HolidaySet(BaseModel):
    """Read-only collection of non-business dates.

    With ``yearly`` recurrence only month and day of each entry matter, so a
    29 February holiday only ever matches in leap years.
    """

    model_config = ConfigDict(frozen=True)

    dates: frozenset[date] = frozenset()
    recurrence: HolidayRecurrence = HolidayRecurrence.yearly

    def contains(self, day: date) -> bool:
        if self.recurrence is HolidayRecurrence.fixed:
            return day in self.dates
        return any((h.month, h.day) == (day.month, day.day) for h in self.dates)

    @classmethod
    def from_strings(
        cls,
        values: Iterable[str],
        recurrence: HolidayRecurrence = HolidayRecurrence.yearly,
    ) -> "HolidaySet":
        """Build a set from ``MM-DD`` (yearly only) or ``YYYY-MM-DD`` strings.

        Raises:
            ValueError: on a malformed entry, or ``MM-DD`` with ``fixed`` recurrence.
        """
        dates: set[date] = set()
        for raw in values:
            text = raw.strip()
            parts = text.split("-")
            if len(parts) == 2:
                if recurrence is HolidayRecurrence.fixed:
                    raise ValueError(
                        f"Holiday {text!r} needs a year when recurrence is 'fixed'"
                    )
                # Leap year so that 02-29 is representable
                dates.add(datetime.strptime(f"2000-{text}", "%Y-%m-%d").date())
            elif len(parts) == 3:
                dates.add(datetime.strptime(text, "%Y-%m-%d").date())
            else:
                raise ValueError(f"Unrecognised holiday {text!r}")
        return cls(dates=frozenset(dates), recurrence=recurrence)

    @classmethod
    def default(cls) -> "HolidaySet":
        """New Year's Day and Christmas Day, every year."""
        return cls.from_strings(["01-01", "12-25"])


def is_business_day(day: date, holidays: HolidaySet) -> bool:
    return day.weekday() not in (SATURDAY, SUNDAY) and not holidays.contains(day)


def compute_cutoff(
    reference: datetime, business_days: int, holidays: HolidaySet
) -> datetime:
    """Return the instant ``business_days`` business days before ``reference``.

    Steps back one calendar day at a time and counts a step only when the day
    it lands on is a business day. The time of day and tzinfo of ``reference``
    are preserved; ``business_days == 0`` returns ``reference`` itself.

    Counting stops at the earliest representable date (1 January of year 1),
    so a day count reaching past it yields a cutoff that admits every order.

    The precondition ``business_days >= 0`` is checked here as well as by the
    service.

    Raises:
        InvalidArgumentError: if ``business_days`` is negative.
    """
    if business_days < 0:
        raise InvalidArgumentError(
            f"business_days must be non-negative, got {business_days}"
        )

    cutoff = reference
    counted = 0
    while counted < business_days and cutoff.date() > date.min:
        cutoff -= timedelta(days=1)
        if is_business_day(cutoff.date(), holidays):
            counted += 1
    return cutoff
