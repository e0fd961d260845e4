# Domain package

from .dissect_options import DissectionOptions
from .name_resolution import NameResolutionFlags
from .timestamp import TimestampPrecision, TimestampSecondsType, TimestampType

__all__ = [
    "DissectionOptions",
    "NameResolutionFlags",
    "TimestampPrecision",
    "TimestampSecondsType",
    "TimestampType",
]
