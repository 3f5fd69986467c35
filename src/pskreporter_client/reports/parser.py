"""Parsers from PSK Reporter XML into typed response objects."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from ..core.response_parsing import parse_xml_payload
from .models import (
    ActiveCallsign,
    ActiveReceiver,
    LastSequenceNumber,
    MaxFlowStartSeconds,
    QueryResult,
    ReceptionReport,
    SenderSearch,
)

ROOT_TAG = "receptionReports"

FieldMap = tuple[tuple[str, str], ...]
_ACTIVE_RECEIVER_FIELD_MAP: FieldMap = (
    ("callsign", "callsign"),
    ("locator", "locator"),
    ("frequency", "frequency"),
    ("region", "region"),
    ("dxcc", "DXCC"),
    ("decoder_software", "decoderSoftware"),
    ("antenna_information", "antennaInformation"),
    ("mode", "mode"),
    ("bands", "bands"),
)
_RECEPTION_REPORT_FIELD_MAP: FieldMap = (
    ("receiver_callsign", "receiverCallsign"),
    ("receiver_locator", "receiverLocator"),
    ("sender_callsign", "senderCallsign"),
    ("sender_locator", "senderLocator"),
    ("frequency", "frequency"),
    ("flow_start_seconds", "flowStartSeconds"),
    ("mode", "mode"),
    ("is_sender", "isSender"),
    ("receiver_dxcc", "receiverDXCC"),
    ("receiver_dxcc_code", "receiverDXCCCode"),
    ("snr", "sNR"),
)
_ACTIVE_CALLSIGN_FIELD_MAP: FieldMap = (
    ("callsign", "callsign"),
    ("reports", "reports"),
    ("dxcc", "DXCC"),
    ("dxcc_code", "DXCCcode"),
    ("frequency", "frequency"),
)
_VALUE_FIELD_MAP: FieldMap = (("value", "value"),)
_SENDER_SEARCH_FIELD_MAP: FieldMap = (
    ("callsign", "callsign"),
    ("recent_flow_start_seconds", "recentFlowStartSeconds"),
)


def _attributes(element: ET.Element, field_map: FieldMap) -> dict[str, Any]:
    return {name: element.get(attr, "") for name, attr in field_map}


def _records(root: ET.Element, tag: str, model: type, field_map: FieldMap) -> tuple:
    return tuple(model(**_attributes(element, field_map)) for element in root.findall(tag))


def _singleton(root: ET.Element, tag: str, model: type, field_map: FieldMap) -> Any:
    # Later occurrences overwrite earlier ones.
    found = root.findall(tag)
    if not found:
        return model()
    return model(**_attributes(found[-1], field_map))


def parse_query_result(root: ET.Element) -> QueryResult:
    return QueryResult(
        current_seconds=root.get("currentSeconds", ""),
        active_receivers=_records(root, "activeReceiver", ActiveReceiver, _ACTIVE_RECEIVER_FIELD_MAP),
        reception_reports=_records(
            root,
            "receptionReport",
            ReceptionReport,
            _RECEPTION_REPORT_FIELD_MAP,
        ),
        active_callsigns=_records(root, "activeCallsign", ActiveCallsign, _ACTIVE_CALLSIGN_FIELD_MAP),
        last_sequence_number=_singleton(
            root,
            "lastSequenceNumber",
            LastSequenceNumber,
            _VALUE_FIELD_MAP,
        ),
        max_flow_start_seconds=_singleton(
            root,
            "maxFlowStartSeconds",
            MaxFlowStartSeconds,
            _VALUE_FIELD_MAP,
        ),
        sender_search=_singleton(root, "senderSearch", SenderSearch, _SENDER_SEARCH_FIELD_MAP),
    )


def decode_query_result(body: bytes) -> QueryResult:
    """Decode a raw response body; raises PskReporterProtocolError."""

    return parse_query_result(parse_xml_payload(body, root_tag=ROOT_TAG))


__all__ = [
    "ROOT_TAG",
    "parse_query_result",
    "decode_query_result",
]
