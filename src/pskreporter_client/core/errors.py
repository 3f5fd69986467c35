"""Error types for query validation and fetching."""

from __future__ import annotations


class PskReporterError(Exception):
    """Base exception for this package."""

    kind: str | None = None

    def __init__(
        self,
        message: str,
        *,
        kind: str | None = None,
        http_status: int | None = None,
    ) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        self.http_status = http_status


class PskReporterValidationError(PskReporterError):
    """Invalid input; raised before any I/O."""

    kind = "invalid_input"


class CallsignExclusivityError(PskReporterValidationError):
    """More than one of callsign, senderCallsign, receiverCallsign was set."""

    kind = "exclusivity_violation"


class FlowStartPositiveError(PskReporterValidationError):
    """flowStartSeconds was greater than zero."""

    kind = "flow_start_positive"


class FlowStartTooOldError(PskReporterValidationError):
    """flowStartSeconds reached further back than one day."""

    kind = "flow_start_too_old"


class FrequencyRangeInvertedError(PskReporterValidationError):
    """Lower frequency bound was above the upper bound."""

    kind = "frequency_range_inverted"


class PskReporterClientClosedError(PskReporterError):
    """Raised when client is used after close."""

    kind = "client_closed"


class PskReporterFetchError(PskReporterError):
    """Failure while talking to the service."""


class PskReporterTransportError(PskReporterFetchError):
    """Network/transport-level failure."""

    kind = "transport"


class PskReporterStatusError(PskReporterFetchError):
    """Service answered with a non-200 status."""

    kind = "unexpected_status"


class PskReporterProtocolError(PskReporterFetchError):
    """Response body could not be decoded."""

    kind = "malformed_response"


__all__ = [
    "PskReporterError",
    "PskReporterValidationError",
    "CallsignExclusivityError",
    "FlowStartPositiveError",
    "FlowStartTooOldError",
    "FrequencyRangeInvertedError",
    "PskReporterClientClosedError",
    "PskReporterFetchError",
    "PskReporterTransportError",
    "PskReporterStatusError",
    "PskReporterProtocolError",
]
