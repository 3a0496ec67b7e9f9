from datetime import datetime, timedelta, timezone

import attrs


# Bookings are refused once the webinar starts within this window
MIN_BOOKING_LEAD_TIME = timedelta(days=3)


@attrs.define(frozen=True)
class Webinar:
    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    def is_too_soon(self, now: datetime) -> bool:
        """
        True when the webinar starts less than MIN_BOOKING_LEAD_TIME after ``now``.

        Naive datetimes on either side are read as UTC.
        """
        return self.start_date - _align_tz(now, like=self.start_date) < MIN_BOOKING_LEAD_TIME


def _align_tz(value: datetime, *, like: datetime) -> datetime:
    if like.tzinfo is None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    if like.tzinfo is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
