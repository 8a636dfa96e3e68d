"""Value enums shared by the ORM tables, the pure core and the DTOs."""
from __future__ import annotations
from enum import Enum


class Currency(str, Enum):
    USD = "USD"
    IDR = "IDR"
    SEK = "SEK"


class AttendanceStatus(str, Enum):
    WORKED = "worked"
    SICK = "sick"
    VACATION = "vacation"


class Platform(str, Enum):
    IOS = "ios"
    ANDROID = "android"
