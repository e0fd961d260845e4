"""Time stamp display settings used by the dissection options."""

from __future__ import annotations

from enum import Enum


class TimestampType(str, Enum):
    """How packet time stamps are displayed."""

    NOT_SET = "not_set"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    ABSOLUTE_WITH_YMD = "absolute_with_ymd"
    ABSOLUTE_WITH_YDOY = "absolute_with_ydoy"
    DELTA = "delta"
    DELTA_DISPLAYED = "delta_displayed"
    EPOCH = "epoch"
    UTC = "utc"
    UTC_WITH_YMD = "utc_with_ymd"
    UTC_WITH_YDOY = "utc_with_ydoy"


class TimestampPrecision(str, Enum):
    """Number of fractional digits shown for time stamps."""

    NOT_SET = "not_set"
    AUTO = "auto"
    FIXED_SEC = "fixed_sec"
    FIXED_DSEC = "fixed_dsec"
    FIXED_CSEC = "fixed_csec"
    FIXED_MSEC = "fixed_msec"
    FIXED_USEC = "fixed_usec"
    FIXED_NSEC = "fixed_nsec"


class TimestampSecondsType(str, Enum):
    """How the seconds part of a time stamp is displayed."""

    DEFAULT = "s"
    HOUR_MIN_SEC = "hms"


# Ordered as listed in the "-t" help text.
TIMESTAMP_TYPE_TOKENS: dict[str, tuple[TimestampType, str]] = {
    "a": (TimestampType.ABSOLUTE, "absolute"),
    "ad": (TimestampType.ABSOLUTE_WITH_YMD, "absolute with YYYY-MM-DD date"),
    "adoy": (TimestampType.ABSOLUTE_WITH_YDOY, "absolute with YYYY/DOY date"),
    "d": (TimestampType.DELTA, "delta"),
    "dd": (TimestampType.DELTA_DISPLAYED, "delta displayed"),
    "e": (TimestampType.EPOCH, "epoch"),
    "r": (TimestampType.RELATIVE, "relative"),
    "u": (TimestampType.UTC, "absolute UTC"),
    "ud": (TimestampType.UTC_WITH_YMD, "absolute UTC with YYYY-MM-DD date"),
    "udoy": (TimestampType.UTC_WITH_YDOY, "absolute UTC with YYYY/DOY date"),
}

# Suffix after the "." -> precision; the empty suffix means automatic.
TIMESTAMP_PRECISION_SUFFIXES: dict[str, TimestampPrecision] = {
    "": TimestampPrecision.AUTO,
    "0": TimestampPrecision.FIXED_SEC,
    "1": TimestampPrecision.FIXED_DSEC,
    "2": TimestampPrecision.FIXED_CSEC,
    "3": TimestampPrecision.FIXED_MSEC,
    "6": TimestampPrecision.FIXED_USEC,
    "9": TimestampPrecision.FIXED_NSEC,
}

SECONDS_TYPE_TOKENS: dict[str, tuple[TimestampSecondsType, str]] = {
    "s": (TimestampSecondsType.DEFAULT, "seconds"),
    "hms": (TimestampSecondsType.HOUR_MIN_SEC, "hours, minutes and seconds"),
}
