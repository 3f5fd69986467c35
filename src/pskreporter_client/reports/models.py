"""Reception report response models.

Every attribute is kept as the text the service sent; nothing is coerced to
numbers. Attributes missing from the document decode to ``""``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class ActiveReceiver:
    callsign: str = ""
    locator: str = ""
    frequency: str = ""
    region: str = ""
    dxcc: str = ""
    decoder_software: str = ""
    antenna_information: str = ""
    mode: str = ""
    bands: str = ""


@dataclass(slots=True, frozen=True)
class ReceptionReport:
    receiver_callsign: str = ""
    receiver_locator: str = ""
    sender_callsign: str = ""
    sender_locator: str = ""
    frequency: str = ""
    flow_start_seconds: str = ""
    mode: str = ""
    is_sender: str = ""
    receiver_dxcc: str = ""
    receiver_dxcc_code: str = ""
    snr: str = ""


@dataclass(slots=True, frozen=True)
class ActiveCallsign:
    callsign: str = ""
    reports: str = ""
    dxcc: str = ""
    dxcc_code: str = ""
    frequency: str = ""


@dataclass(slots=True, frozen=True)
class LastSequenceNumber:
    value: str = ""


@dataclass(slots=True, frozen=True)
class MaxFlowStartSeconds:
    value: str = ""


@dataclass(slots=True, frozen=True)
class SenderSearch:
    callsign: str = ""
    recent_flow_start_seconds: str = ""


@dataclass(slots=True, frozen=True)
class QueryResult:
    current_seconds: str = ""
    active_receivers: tuple[ActiveReceiver, ...] | list[ActiveReceiver] = ()
    reception_reports: tuple[ReceptionReport, ...] | list[ReceptionReport] = ()
    active_callsigns: tuple[ActiveCallsign, ...] | list[ActiveCallsign] = ()
    last_sequence_number: LastSequenceNumber = field(default_factory=LastSequenceNumber)
    max_flow_start_seconds: MaxFlowStartSeconds = field(default_factory=MaxFlowStartSeconds)
    sender_search: SenderSearch = field(default_factory=SenderSearch)

    def __post_init__(self) -> None:
        for name in ("active_receivers", "reception_reports", "active_callsigns"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))


__all__ = [
    "ActiveReceiver",
    "ReceptionReport",
    "ActiveCallsign",
    "LastSequenceNumber",
    "MaxFlowStartSeconds",
    "SenderSearch",
    "QueryResult",
]
