"""Query models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.errors import CallsignExclusivityError
from .options import (
    CALLSIGN_EXCLUSIVE_MESSAGE,
    AppContact,
    Callsign,
    FlowStartSeconds,
    FrequencyRange,
    LastSeqNo,
    Mode,
    NoActive,
    NoLocator,
    QueryOption,
    ReceiverCallsign,
    ReceptionReportsOnly,
    ReportLimit,
    SenderCallsign,
    Statistics,
    check_flow_start_seconds,
    check_frequency_range,
)


@dataclass(slots=True, frozen=True)
class ReceptionQuery:
    """Whole-query form of the options; unset fields are omitted."""

    sender_callsign: str | None = None
    receiver_callsign: str | None = None
    callsign: str | None = None
    mode: str | None = None
    report_limit: int | None = None
    flow_start_seconds: int | None = None
    app_contact: str | None = None
    frequency_range: tuple[int, int] | None = None
    last_sequence_number: str | None = None
    no_active: int | bool | None = None
    no_locator: int | bool | None = None
    reception_reports_only: int | bool | None = None
    statistics: int | bool | None = None

    def __post_init__(self) -> None:
        if self.frequency_range is not None:
            if isinstance(self.frequency_range, (str, bytes)) or len(self.frequency_range) != 2:
                raise TypeError("frequency_range must be a (lower, upper) pair")
            object.__setattr__(self, "frequency_range", tuple(self.frequency_range))

    def validate(self) -> None:
        identities = [
            value
            for value in (self.sender_callsign, self.receiver_callsign, self.callsign)
            if value is not None
        ]
        if len(identities) > 1:
            raise CallsignExclusivityError(CALLSIGN_EXCLUSIVE_MESSAGE)
        if self.flow_start_seconds is not None:
            check_flow_start_seconds(self.flow_start_seconds)
        if self.frequency_range is not None:
            check_frequency_range(*self.frequency_range)

    def to_options(self) -> tuple[QueryOption, ...]:
        self.validate()
        options: list[QueryOption] = []
        if self.sender_callsign is not None:
            options.append(SenderCallsign(self.sender_callsign))
        if self.receiver_callsign is not None:
            options.append(ReceiverCallsign(self.receiver_callsign))
        if self.callsign is not None:
            options.append(Callsign(self.callsign))
        if self.mode is not None:
            options.append(Mode(self.mode))
        if self.report_limit is not None:
            options.append(ReportLimit(self.report_limit))
        if self.flow_start_seconds is not None:
            options.append(FlowStartSeconds(self.flow_start_seconds))
        if self.app_contact is not None:
            options.append(AppContact(self.app_contact))
        if self.frequency_range is not None:
            options.append(FrequencyRange(*self.frequency_range))
        if self.last_sequence_number is not None:
            options.append(LastSeqNo(self.last_sequence_number))
        if self.no_active is not None:
            options.append(NoActive(self.no_active))
        if self.no_locator is not None:
            options.append(NoLocator(self.no_locator))
        if self.reception_reports_only is not None:
            options.append(ReceptionReportsOnly(self.reception_reports_only))
        if self.statistics is not None:
            options.append(Statistics(self.statistics))
        return tuple(options)


__all__ = [
    "ReceptionQuery",
]
