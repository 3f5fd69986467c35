"""Query options; each one validates and writes a single query parameter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..core.errors import (
    CallsignExclusivityError,
    FlowStartPositiveError,
    FlowStartTooOldError,
    FrequencyRangeInvertedError,
)
from .params import ParameterSet

MAX_FLOW_START_AGE_SECONDS = 24 * 60 * 60
CALLSIGN_PARAMS = ("callsign", "senderCallsign", "receiverCallsign")

CALLSIGN_EXCLUSIVE_MESSAGE = (
    "only one of callsign, senderCallsign, or receiverCallsign can be specified at a time"
)


class QueryOption(Protocol):
    def apply(self, params: ParameterSet) -> None: ...


def require_int(name: str, value: int | bool) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def _format_int(name: str, value: int | bool) -> str:
    return str(int(require_int(name, value)))


def check_flow_start_seconds(value: int) -> None:
    require_int("flowStartSeconds", value)
    if value > 0:
        raise FlowStartPositiveError("flowStartSeconds must be negative")
    if value < -MAX_FLOW_START_AGE_SECONDS:
        raise FlowStartTooOldError("flowStartSeconds cannot be greater than 24 hours")


def check_frequency_range(lower: int, upper: int) -> None:
    require_int("frange lower bound", lower)
    require_int("frange upper bound", upper)
    if lower > upper:
        raise FrequencyRangeInvertedError("lower frequency must be less than upper frequency")


def _set_callsign_param(params: ParameterSet, name: str, value: str) -> None:
    for other in CALLSIGN_PARAMS:
        if other != name and params.has(other):
            raise CallsignExclusivityError(CALLSIGN_EXCLUSIVE_MESSAGE)
    params.set(name, value)


@dataclass(slots=True, frozen=True)
class SenderCallsign:
    """Reports where this station was the transmitter."""

    value: str

    def apply(self, params: ParameterSet) -> None:
        _set_callsign_param(params, "senderCallsign", self.value)


@dataclass(slots=True, frozen=True)
class ReceiverCallsign:
    """Reports where this station was the receiver."""

    value: str

    def apply(self, params: ParameterSet) -> None:
        _set_callsign_param(params, "receiverCallsign", self.value)


@dataclass(slots=True, frozen=True)
class Callsign:
    """Reports where this station was either side."""

    value: str

    def apply(self, params: ParameterSet) -> None:
        _set_callsign_param(params, "callsign", self.value)


@dataclass(slots=True, frozen=True)
class Mode:
    value: str

    def apply(self, params: ParameterSet) -> None:
        params.set("mode", self.value)


@dataclass(slots=True, frozen=True)
class ReportLimit:
    value: int

    def apply(self, params: ParameterSet) -> None:
        params.set("rptlimit", _format_int("rptlimit", self.value))


@dataclass(slots=True, frozen=True)
class FlowStartSeconds:
    """Negative offset from now bounding how far back reports are returned."""

    value: int

    def apply(self, params: ParameterSet) -> None:
        check_flow_start_seconds(self.value)
        params.set("flowStartSeconds", _format_int("flowStartSeconds", self.value))


@dataclass(slots=True, frozen=True)
class AppContact:
    """Contact address the service operators can use to reach the app author."""

    email: str

    def apply(self, params: ParameterSet) -> None:
        params.set("appcontact", self.email)


@dataclass(slots=True, frozen=True)
class FrequencyRange:
    """Frequency bounds in Hz, e.g. 14000000-14100000."""

    lower: int
    upper: int

    def apply(self, params: ParameterSet) -> None:
        check_frequency_range(self.lower, self.upper)
        params.set("frange", f"{int(self.lower)}-{int(self.upper)}")


@dataclass(slots=True, frozen=True)
class LastSeqNo:
    value: str

    def apply(self, params: ParameterSet) -> None:
        params.set("lastseqno", self.value)


@dataclass(slots=True, frozen=True)
class NoActive:
    value: int = 1

    def apply(self, params: ParameterSet) -> None:
        params.set("noactive", _format_int("noactive", self.value))


@dataclass(slots=True, frozen=True)
class NoLocator:
    value: int = 1

    def apply(self, params: ParameterSet) -> None:
        params.set("nolocator", _format_int("nolocator", self.value))


@dataclass(slots=True, frozen=True)
class ReceptionReportsOnly:
    value: int = 1

    def apply(self, params: ParameterSet) -> None:
        params.set("rronly", _format_int("rronly", self.value))


@dataclass(slots=True, frozen=True)
class Statistics:
    value: int = 1

    def apply(self, params: ParameterSet) -> None:
        params.set("statistics", _format_int("statistics", self.value))


__all__ = [
    "MAX_FLOW_START_AGE_SECONDS",
    "CALLSIGN_PARAMS",
    "QueryOption",
    "require_int",
    "check_flow_start_seconds",
    "check_frequency_range",
    "SenderCallsign",
    "ReceiverCallsign",
    "Callsign",
    "Mode",
    "ReportLimit",
    "FlowStartSeconds",
    "AppContact",
    "FrequencyRange",
    "LastSeqNo",
    "NoActive",
    "NoLocator",
    "ReceptionReportsOnly",
    "Statistics",
]
