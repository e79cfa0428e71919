"""Date and timestamp rendering.

Pure integer proleptic-Gregorian arithmetic, so that day counts far outside
the range of ``datetime`` still render.  Encode-only: nothing here parses
timestamp text back into numbers.
"""

import datetime
import math

from .error import InvalidTemporalValueError

SECONDS_PER_DAY = 86400

EPOCH_ORDINAL = datetime.date(1970, 1, 1).toordinal()
EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

# Fractions at or above this are clamped to zero instead of carried into the
# seconds field.
FRACTION_CLAMP = 0.9999995


def civil_from_days(days):
    """Convert a day count from 1970-01-01 to (year, month, day).

    Uses era / year-of-era / day-of-year decomposition (400-year eras of
    146097 days, years starting on March 1st), valid for any integer.
    """
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097                                  # [0, 146096]
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365  # [0, 399]
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)         # [0, 365]
    mp = (5 * doy + 2) // 153                               # [0, 11]
    day = doy - (153 * mp + 2) // 5 + 1                     # [1, 31]
    month = mp + 3 if mp < 10 else mp - 9                   # [1, 12]
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def _format_date(year, month, day):
    # the minus sign of a negative year counts towards the four digits
    return '%04d-%02d-%02d' % (year, month, day)


def encode_date(days):
    """Render a day offset from 1970-01-01 as ``YYYY-MM-DD``.

    Raises:
        InvalidTemporalValueError: if ``days`` is not finite or not integral
            within 1e-9.
    """
    try:
        days = float(days) if not isinstance(days, int) else days
    except (TypeError, ValueError, OverflowError):
        raise InvalidTemporalValueError("Invalid Date value %r" % (days,)) from None
    if isinstance(days, float):
        if not math.isfinite(days) or abs(days - round(days)) > 1e-9:
            raise InvalidTemporalValueError("Invalid Date value %r" % (days,))
        days = int(round(days))
    return _format_date(*civil_from_days(days))


def _format_fraction(fraction):
    if fraction >= FRACTION_CLAMP:
        fraction = 0.0
    if fraction <= 0.0:
        return ''
    digits = ('%.9f' % fraction)[2:].rstrip('0')
    return '.' + digits if digits else ''


def encode_timestamp(seconds):
    """Render seconds since the epoch as ``YYYY-MM-DDTHH:MM:SS[.fraction]Z``.

    The fraction is written only when non-zero, with at most nine digits and
    no trailing zeros.

    Raises:
        InvalidTemporalValueError: if ``seconds`` is not a finite number.
    """
    try:
        seconds = float(seconds)
    except (TypeError, ValueError, OverflowError):
        raise InvalidTemporalValueError(
            "Invalid timestamp value %r" % (seconds,)) from None
    if not math.isfinite(seconds):
        raise InvalidTemporalValueError(
            "Invalid timestamp value %r" % (seconds,))

    days = math.floor(seconds / SECONDS_PER_DAY)
    remainder = seconds - days * SECONDS_PER_DAY
    if remainder < 0:
        days -= 1
        remainder += SECONDS_PER_DAY
    elif remainder >= SECONDS_PER_DAY:
        days += 1
        remainder -= SECONDS_PER_DAY
    if not 0 <= remainder < SECONDS_PER_DAY:
        # float spacing at this magnitude exceeds a day
        raise InvalidTemporalValueError(
            "Invalid timestamp value %r" % (seconds,))

    hour = int(remainder // 3600)
    remainder -= hour * 3600
    minute = int(remainder // 60)
    remainder -= minute * 60
    second = int(remainder)
    fraction = remainder - second

    return '%sT%02d:%02d:%02d%sZ' % (
        _format_date(*civil_from_days(days)), hour, minute, second,
        _format_fraction(fraction))


def date_to_days(value):
    """Day offset of a ``datetime.date`` from 1970-01-01."""
    return value.toordinal() - EPOCH_ORDINAL


def datetime_to_seconds(value):
    """Seconds since the epoch of a ``datetime.datetime``; naive means UTC."""
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    delta = value - EPOCH
    return delta.days * SECONDS_PER_DAY + delta.seconds \
        + delta.microseconds / 1e6
