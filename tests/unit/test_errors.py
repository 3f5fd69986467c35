from __future__ import annotations

import pytest

from pskreporter_client.core.errors import (
    CallsignExclusivityError,
    FlowStartPositiveError,
    FlowStartTooOldError,
    FrequencyRangeInvertedError,
    PskReporterClientClosedError,
    PskReporterError,
    PskReporterFetchError,
    PskReporterProtocolError,
    PskReporterStatusError,
    PskReporterTransportError,
    PskReporterValidationError,
)


@pytest.mark.parametrize(
    ("error_type", "kind", "parent"),
    [
        (CallsignExclusivityError, "exclusivity_violation", PskReporterValidationError),
        (FlowStartPositiveError, "flow_start_positive", PskReporterValidationError),
        (FlowStartTooOldError, "flow_start_too_old", PskReporterValidationError),
        (FrequencyRangeInvertedError, "frequency_range_inverted", PskReporterValidationError),
        (PskReporterTransportError, "transport", PskReporterFetchError),
        (PskReporterStatusError, "unexpected_status", PskReporterFetchError),
        (PskReporterProtocolError, "malformed_response", PskReporterFetchError),
        (PskReporterClientClosedError, "client_closed", PskReporterError),
    ],
)
def test_error_kinds_and_hierarchy(error_type, kind, parent):
    err = error_type("boom")
    assert err.kind == kind
    assert isinstance(err, parent)
    assert isinstance(err, PskReporterError)
    assert str(err) == "boom"


def test_validation_and_fetch_errors_are_disjoint():
    assert not issubclass(PskReporterValidationError, PskReporterFetchError)
    assert not issubclass(PskReporterFetchError, PskReporterValidationError)


def test_kind_can_be_overridden_per_instance():
    err = PskReporterValidationError("bad config", kind="invalid_config")
    assert err.kind == "invalid_config"
    assert PskReporterValidationError("x").kind == "invalid_input"


def test_status_error_carries_http_status():
    err = PskReporterStatusError("unexpected http response 500", http_status=500)
    assert err.http_status == 500
