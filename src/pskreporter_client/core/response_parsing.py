"""Shared response parsing helpers for sync/async services."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .errors import PskReporterProtocolError


def parse_xml_payload(body: bytes, *, root_tag: str) -> ET.Element:
    """Parse response XML and map parse failures to domain errors."""

    try:
        root = ET.fromstring(body)
    except (ET.ParseError, LookupError, ValueError) as exc:
        raise PskReporterProtocolError(f"response body is not valid XML: {exc}") from exc

    if root.tag != root_tag:
        raise PskReporterProtocolError(
            f"expected root element <{root_tag}>, got <{root.tag}>",
        )
    return root


__all__ = [
    "parse_xml_payload",
]
