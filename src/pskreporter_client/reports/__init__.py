"""Reception report query package."""

from .models import (
    ActiveCallsign,
    ActiveReceiver,
    LastSequenceNumber,
    MaxFlowStartSeconds,
    QueryResult,
    ReceptionReport,
    SenderSearch,
)
from .options import (
    AppContact,
    Callsign,
    FlowStartSeconds,
    FrequencyRange,
    LastSeqNo,
    Mode,
    NoActive,
    NoLocator,
    ReceiverCallsign,
    ReceptionReportsOnly,
    ReportLimit,
    SenderCallsign,
    Statistics,
)
from .params import ParameterSet, build_query
from .queries import ReceptionQuery

__all__ = [
    "ReceptionQuery",
    "ParameterSet",
    "build_query",
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
    "QueryResult",
    "ActiveReceiver",
    "ReceptionReport",
    "ActiveCallsign",
    "LastSequenceNumber",
    "MaxFlowStartSeconds",
    "SenderSearch",
]
