from datetime import date, datetime, time
from typing import Tuple, Union

from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[date, datetime]


def to_date(date_like: Union[str, date, datetime, Timestamp]) -> date:
    """
    Convert a string or datetime to a plain calendar date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_schedule_date(date_like: Union[str, date, datetime, Timestamp]) -> DateLike:
    """
    Normalise a date-like into a ``date`` or ``datetime``.

    Datetimes keep their time-of-day (pandas Timestamps become plain
    datetimes); strings are parsed into dates.
    """
    if isinstance(date_like, Timestamp):
        return date_like.to_pydatetime()
    if isinstance(date_like, (datetime, date)):
        return date_like
    return to_date(date_like)


def with_date(original: DateLike, new_date: date) -> DateLike:
    """Return ``new_date`` carrying the time-of-day and tzinfo of ``original``."""
    if isinstance(original, datetime):
        return original.replace(
            year=new_date.year, month=new_date.month, day=new_date.day
        )
    return new_date


def align_date_types(first: DateLike, second: DateLike) -> Tuple[DateLike, DateLike]:
    """Promote a plain date to midnight when the other value is a datetime.

    ``date`` and ``datetime`` do not compare with each other, so mixed pairs
    are brought onto the ``datetime`` side.
    """
    first_is_dt = isinstance(first, datetime)
    second_is_dt = isinstance(second, datetime)
    if first_is_dt and not second_is_dt:
        second = datetime.combine(second, time(), tzinfo=first.tzinfo)
    elif second_is_dt and not first_is_dt:
        first = datetime.combine(first, time(), tzinfo=second.tzinfo)
    return first, second
