from __future__ import annotations

import itertools

import pytest

from pskreporter_client.core.errors import (
    CallsignExclusivityError,
    FlowStartPositiveError,
    FlowStartTooOldError,
    FrequencyRangeInvertedError,
    PskReporterValidationError,
)
from pskreporter_client.reports.options import (
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
from pskreporter_client.reports.params import ParameterSet, apply_options
from pskreporter_client.reports.queries import ReceptionQuery


@pytest.mark.parametrize(
    ("option", "name", "expected"),
    [
        (SenderCallsign("ABCD"), "senderCallsign", "ABCD"),
        (ReceiverCallsign("ABCD"), "receiverCallsign", "ABCD"),
        (Callsign("ABCD"), "callsign", "ABCD"),
        (Mode("FT8"), "mode", "FT8"),
        (ReportLimit(10), "rptlimit", "10"),
        (FlowStartSeconds(-10), "flowStartSeconds", "-10"),
        (AppContact("foo@example.com"), "appcontact", "foo@example.com"),
        (FrequencyRange(123, 456), "frange", "123-456"),
        (LastSeqNo("abc123"), "lastseqno", "abc123"),
        (NoActive(2), "noactive", "2"),
        (NoLocator(2), "nolocator", "2"),
        (ReceptionReportsOnly(2), "rronly", "2"),
        (Statistics(2), "statistics", "2"),
    ],
    ids=lambda value: type(value).__name__ if not isinstance(value, str) else value,
)
def test_option_writes_expected_parameter(option, name, expected):
    params = ParameterSet()
    option.apply(params)
    assert params.get(name) == expected
    assert len(params) == 1


def test_flag_options_default_to_one_and_render_bools():
    params = apply_options([NoActive(), NoLocator(True), ReceptionReportsOnly(False), Statistics()])
    assert params.get("noactive") == "1"
    assert params.get("nolocator") == "1"
    assert params.get("rronly") == "0"
    assert params.get("statistics") == "1"


def test_report_limit_has_no_bound_check():
    assert apply_options([ReportLimit(-5)]).get("rptlimit") == "-5"


def test_app_contact_is_not_format_checked():
    assert apply_options([AppContact("not an email")]).get("appcontact") == "not an email"


_IDENTITY_FACTORIES = (SenderCallsign, ReceiverCallsign, Callsign)


@pytest.mark.parametrize(
    ("first", "second"),
    list(itertools.permutations(_IDENTITY_FACTORIES, 2)),
    ids=lambda factory: factory.__name__,
)
def test_any_two_identity_options_conflict_in_either_order(first, second):
    with pytest.raises(CallsignExclusivityError) as excinfo:
        apply_options([first("AG6K"), second("K1ABC")])
    assert excinfo.value.kind == "exclusivity_violation"


@pytest.mark.parametrize("factory", _IDENTITY_FACTORIES, ids=lambda factory: factory.__name__)
def test_single_identity_option_never_conflicts(factory):
    params = apply_options([Mode("FT8"), factory("AG6K"), ReportLimit(5)])
    assert len(params) == 3


@pytest.mark.parametrize("factory", _IDENTITY_FACTORIES, ids=lambda factory: factory.__name__)
def test_repeating_same_identity_option_is_last_write_wins(factory):
    params = apply_options([factory("AG6K"), factory("K1ABC")])
    assert list(params.items())[0][1] == "K1ABC"


def test_identity_conflict_against_seeded_parameter():
    base = ParameterSet([("receiverCallsign", "foo")])
    with pytest.raises(CallsignExclusivityError):
        apply_options([SenderCallsign("a")], base_params=base)


@pytest.mark.parametrize("value", [0, -1, -1800, -86400])
def test_flow_start_seconds_accepts_values_within_one_day(value):
    assert apply_options([FlowStartSeconds(value)]).get("flowStartSeconds") == str(value)


@pytest.mark.parametrize("value", [1, 3600])
def test_flow_start_seconds_rejects_positive_values(value):
    with pytest.raises(FlowStartPositiveError):
        apply_options([FlowStartSeconds(value)])


@pytest.mark.parametrize("value", [-86401, -172800])
def test_flow_start_seconds_rejects_values_older_than_one_day(value):
    with pytest.raises(FlowStartTooOldError):
        apply_options([FlowStartSeconds(value)])


@pytest.mark.parametrize(
    ("lower", "upper", "fails"),
    [
        (14_000_000, 14_100_000, False),
        (14_000_000, 14_000_000, False),
        (2, 1, True),
        (14_100_000, 14_000_000, True),
    ],
)
def test_frequency_range_fails_only_when_lower_exceeds_upper(lower, upper, fails):
    if fails:
        with pytest.raises(FrequencyRangeInvertedError):
            apply_options([FrequencyRange(lower, upper)])
    else:
        assert apply_options([FrequencyRange(lower, upper)]).get("frange") == f"{lower}-{upper}"


def test_application_stops_at_first_failing_option():
    params = ParameterSet()
    with pytest.raises(FlowStartPositiveError):
        apply_options([Mode("FT8"), FlowStartSeconds(5), FrequencyRange(2, 1)], base_params=params)
    assert len(params) == 0


def test_validation_errors_share_a_common_base():
    for error_type in (
        CallsignExclusivityError,
        FlowStartPositiveError,
        FlowStartTooOldError,
        FrequencyRangeInvertedError,
    ):
        assert issubclass(error_type, PskReporterValidationError)


@pytest.mark.parametrize(
    "option",
    [
        FlowStartSeconds(-0.5),
        FrequencyRange(1.9, 1.1),
        FrequencyRange(14_000_000, 14_100_000.0),
        ReportLimit(2.5),
        NoActive(1.0),
        FlowStartSeconds("-60"),
    ],
    ids=["flow-start-float", "frange-floats", "frange-float-upper", "rptlimit-float", "flag-float", "flow-start-str"],
)
def test_non_integral_numeric_values_are_rejected(option):
    params = ParameterSet()
    with pytest.raises(TypeError, match="must be an integer"):
        option.apply(params)
    assert len(params) == 0


def test_reception_query_validate_rejects_non_integral_flow_start():
    with pytest.raises(TypeError, match="flowStartSeconds must be an integer"):
        ReceptionQuery(flow_start_seconds=-0.5).validate()
