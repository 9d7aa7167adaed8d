import logging

from weather_lookup.core.error import (
    DecodeError,
    ErrorType,
    MissingCredentialError,
    TransportError,
    classify_error,
    format_error,
    log_error,
)


def test_classify_error():
    assert classify_error(MissingCredentialError("x")) is ErrorType.MISSING_CREDENTIAL
    assert classify_error(TransportError("x")) is ErrorType.TRANSPORT
    assert classify_error(DecodeError("x")) is ErrorType.DECODE
    assert classify_error(RuntimeError("x")) is ErrorType.UNKNOWN


def test_format_error_names_expectation():
    assert format_error(DecodeError("body is not valid JSON")) == (
        "expected the body to be json: body is not valid JSON"
    )
    assert format_error(KeyError("k")) == "KeyError: 'k'"


def test_to_dict():
    err = TransportError("refused", details={"endpoint": "http://x"})
    assert err.to_dict() == {
        "error_type": "transport",
        "expectation": "a successful request",
        "message": "refused",
        "details": {"endpoint": "http://x"},
    }


def test_log_error_returns_info():
    logger = logging.getLogger("tests.error_logging")
    info = log_error(DecodeError("bad body"), logger=logger, context={"keyword": "beijing"})
    assert info["error_type"] == "decode"
    assert info["error_class"] == "DecodeError"
    assert info["context"] == {"keyword": "beijing"}
