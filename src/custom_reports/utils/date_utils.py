"""Interval sequencing and date-label utilities.

Interval labels are ISO-style strings whose shape depends on the report
granularity:

- Daily and Weekly: ``YYYY-MM-DD`` (a week is labelled by its first day)
- Monthly: ``YYYY-MM``
- Yearly: ``YYYY``

Labels of one granularity sort lexically in calendar order.
"""

from datetime import date, timedelta

from custom_reports.models.report import ReportInterval

# Index of the first day of the week, counted from Sunday (0) to Saturday (6)
SUNDAY = 0


def parse_date(raw_date: str | date) -> date:
    """Parse an ISO date string (YYYY-MM-DD) into a date.

    Args:
        raw_date: ISO date string or an existing date.

    Returns:
        Parsed date object.

    Raises:
        ValueError: If the date cannot be parsed.
    """
    if isinstance(raw_date, date):
        return raw_date
    if not raw_date or not raw_date.strip():
        raise ValueError("Empty date string")
    return date.fromisoformat(raw_date.strip())


def parse_label(label: str) -> date:
    """Return the first calendar day of an interval label."""
    if len(label) == 4:
        return date(int(label), 1, 1)
    if len(label) == 7:
        year, month = label.split("-")
        return date(int(year), int(month), 1)
    return date.fromisoformat(label)


def month_from_date(d: date) -> str:
    """Return the ``YYYY-MM`` label of the month containing a date."""
    return f"{d.year:04d}-{d.month:02d}"


def year_from_date(d: date) -> str:
    """Return the ``YYYY`` label of the year containing a date."""
    return f"{d.year:04d}"


def week_from_date(d: str | date, first_day_of_week_idx: int = SUNDAY) -> str:
    """Return the label of the week containing a date.

    Args:
        d: Day to re-bucket (date or ISO string).
        first_day_of_week_idx: First day of the week, 0 = Sunday ... 6 = Saturday.

    Returns:
        ISO date of the first day of that week.
    """
    day = parse_date(d)
    # date.weekday() counts from Monday; shift to a Sunday-based index
    sunday_based = (day.weekday() + 1) % 7
    offset = (sunday_based - first_day_of_week_idx) % 7
    return (day - timedelta(days=offset)).isoformat()


def month_number(label: str) -> int:
    """Convert a ``YYYY-MM`` (or longer) label into the integer ``YYYYMM``."""
    d = parse_label(label)
    return d.year * 100 + d.month


def sub_days(label: str, days: int) -> date:
    """Return the date ``days`` days before the first day of a label."""
    return parse_label(label) - timedelta(days=days)


def _check_range(start: date, end: date) -> None:
    if end < start:
        raise ValueError(f"End date {end} is before start date {start}")


def day_range_inclusive(start: date, end: date) -> list[str]:
    """Every day between start and end, both included."""
    _check_range(start, end)
    return [
        (start + timedelta(days=offset)).isoformat()
        for offset in range((end - start).days + 1)
    ]


def week_range_inclusive(
    start: date, end: date, first_day_of_week_idx: int = SUNDAY
) -> list[str]:
    """Labels of every week overlapping start..end."""
    _check_range(start, end)
    current = parse_date(week_from_date(start, first_day_of_week_idx))
    weeks = []
    while current <= end:
        weeks.append(current.isoformat())
        current += timedelta(days=7)
    return weeks


def month_range_inclusive(start: date, end: date) -> list[str]:
    """Labels of every month overlapping start..end."""
    _check_range(start, end)
    months = []
    current_year = start.year
    current_month = start.month

    while (current_year, current_month) <= (end.year, end.month):
        months.append(f"{current_year:04d}-{current_month:02d}")
        current_month += 1
        if current_month > 12:
            current_month = 1
            current_year += 1

    return months


def year_range_inclusive(start: date, end: date) -> list[str]:
    """Labels of every year overlapping start..end."""
    _check_range(start, end)
    return [f"{year:04d}" for year in range(start.year, end.year + 1)]


def interval_range(
    start: date,
    end: date,
    interval: ReportInterval,
    first_day_of_week_idx: int = SUNDAY,
) -> list[str]:
    """Produce the ordered interval labels covering start..end.

    Args:
        start: First day of the report.
        end: Last day of the report.
        interval: Report granularity.
        first_day_of_week_idx: First day of the week for Weekly reports.

    Returns:
        Non-empty, strictly increasing list of labels.

    Raises:
        ValueError: If end is before start.
    """
    match interval:
        case ReportInterval.DAILY:
            return day_range_inclusive(start, end)
        case ReportInterval.WEEKLY:
            return week_range_inclusive(start, end, first_day_of_week_idx)
        case ReportInterval.MONTHLY:
            return month_range_inclusive(start, end)
        case ReportInterval.YEARLY:
            return year_range_inclusive(start, end)


def bucket_date(
    d: date, interval: ReportInterval, first_day_of_week_idx: int = SUNDAY
) -> str:
    """Return the label of the interval a day belongs to."""
    match interval:
        case ReportInterval.DAILY:
            return d.isoformat()
        case ReportInterval.WEEKLY:
            return week_from_date(d, first_day_of_week_idx)
        case ReportInterval.MONTHLY:
            return month_from_date(d)
        case ReportInterval.YEARLY:
            return year_from_date(d)


def format_interval(label: str, interval: ReportInterval) -> str:
    """Format an interval label for display (e.g. "Jan 5", "Jan '24", "2024")."""
    d = parse_label(label)
    match interval:
        case ReportInterval.DAILY | ReportInterval.WEEKLY:
            return f"{d:%b} {d.day}"
        case ReportInterval.MONTHLY:
            return f"{d:%b} '{d:%y}"
        case ReportInterval.YEARLY:
            return f"{d:%Y}"


def interval_bounds(
    index: int, intervals: list[str], start: date, end: date
) -> tuple[date, date]:
    """Return the first and last day of the interval at ``index``.

    The first interval starts at the report start and the last one ends at
    the report end; every other interval ends the day before the next
    interval begins.
    """
    interval_start = start if index == 0 else parse_label(intervals[index])
    interval_end = end if index + 1 == len(intervals) else sub_days(intervals[index + 1], 1)
    return interval_start, interval_end
