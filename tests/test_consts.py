import pytest

from statusname.consts import (
    REGISTRY,
    STATUS_CODE_TO_NAME,
    STATUS_NAME_TO_CODE,
    STATUS_TABLE,
    Status,
    _check_generated,
    code_of,
    name_of,
)


def test_status_mapping():
    # This is a pure regression test to protect against accidental renames.
    assert dict(STATUS_CODE_TO_NAME) == {
        0: "OK",
        -1: "NOT_FOUND",
        -2: "OUT_OF_RANGE",
        -3: "NO_MEMORY",
        -4: "NOT_PERMITTED",
        -5: "UNSPECIFIED_ERROR",
        -6: "COMMUNICATION_ERROR",
        -7: "TIMEOUT",
        -8: "WOULD_BLOCK",
        -9: "DEADLOCK",
        -10: "BAD_FORMAT",
        -11: "DUPLICATE",
        -12: "BAD_PARAMETER",
        -13: "CLOSED",
        -14: "IO_ERROR",
        -15: "NOT_IMPLEMENTED",
        -16: "BUSY",
        -17: "NOT_INITIALIZED",
        -18: "END",
        -19: "NOT_AVAILABLE",
    }


def test_name_to_code_is_inverse():
    assert {v: k for k, v in STATUS_NAME_TO_CODE.items()} == dict(STATUS_CODE_TO_NAME)


def test_table_order():
    assert STATUS_TABLE[0] == ("OK", 0)
    assert [e.code for e in STATUS_TABLE] == list(range(0, -20, -1))
    assert REGISTRY.entries == STATUS_TABLE


def test_code_of():
    assert code_of("OK") == 0
    assert code_of("OK") is not None
    assert code_of("TIMEOUT") == -7
    assert code_of("") is None
    assert code_of("__not_a_real_status__") is None
    assert code_of("timeout") is None


def test_name_of():
    assert name_of(0) == "OK"
    assert name_of(-19) == "NOT_AVAILABLE"
    assert name_of(1) is None
    assert name_of(-20) is None
    assert name_of(999999) is None


def test_round_trip():
    for code in STATUS_CODE_TO_NAME:
        assert code_of(name_of(code)) == code
    for name in STATUS_NAME_TO_CODE:
        assert name_of(code_of(name)) == name


def test_parse_status():
    assert Status.parse("OK") == Status.OK
    assert Status.parse("OK") is not None
    assert Status.parse("BUSY") == Status.BUSY
    assert Status.parse("") is None
    assert Status.parse(None) is None
    assert Status.parse("something completely different") is None


def test_status_api_name():
    assert Status.TIMEOUT.api_name() == "TIMEOUT"
    assert Status(-13).api_name() == "CLOSED"


def test_status_compatibility():
    assert 0 == Status.OK
    assert -7 == Status.TIMEOUT
    assert Status.BUSY in (-16, -17)
    assert name_of(Status.IO_ERROR) == "IO_ERROR"


def test_check_generated_passes():
    _check_generated()


def test_check_generated_reports_drift(monkeypatch):
    from statusname import consts
    from statusname.registry import build

    monkeypatch.setattr(
        consts, "REGISTRY", build(list(STATUS_TABLE) + [("ASYNC", 1)])
    )
    with pytest.raises(AssertionError) as excinfo:
        consts._check_generated()
    assert "    ASYNC = 1\n    OK = 0\n" in str(excinfo.value)
