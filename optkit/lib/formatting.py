"""
Small formatting helpers: timestamps and currency.
"""

from datetime import datetime


def date_get(format: str, now: datetime | None = None) -> str:
    """Return the current date in the specified format.

    Args:
        format: Any number of [dmyYHMS]; other characters are literals
        now: Moment to format (default: the current local time)

    Returns:
        The formatted date

    Note:
        "y" is always two digits, zero padded (2005 => "05"). The C library
        tm_year - 100 form printed "5" there and "-1" for 1999.

    Eg:
        date_get("d/m/y-H:M:S") => "03/04/15-01:23:45"
    """
    now = datetime.now() if now is None else now
    fields: dict[str, str] = {
        "d": f"{now.day:02d}",
        "m": f"{now.month:02d}",
        "y": f"{now.year % 100:02d}",
        "Y": f"{now.year}",
        "H": f"{now.hour:02d}",
        "M": f"{now.minute:02d}",
        "S": f"{now.second:02d}",
    }
    return "".join(fields.get(char, char) for char in format)


def currency_format(cents: int) -> str:
    """Format integer cents as dollars, e.g. 1234 => "12.34", -5 => "-0.05"."""
    sign: str = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), 100)
    return f"{sign}{dollars}.{remainder:02d}"
