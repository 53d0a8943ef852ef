"""tests/unit/test_exceptions.py"""

import pytest

from paylink.exceptions import (
    ConnectTimeout,
    MappingError,
    NetworkError,
    PaylinkError,
    TimeoutError,
    TlsError,
    TransportError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of Paylink exceptions."""
    assert issubclass(MappingError, PaylinkError)
    assert issubclass(TransportError, PaylinkError)
    assert issubclass(NetworkError, TransportError)
    assert issubclass(TlsError, NetworkError)
    assert issubclass(TimeoutError, TransportError)
    assert issubclass(ConnectTimeout, TimeoutError)


def test_mapping_error_message():
    """Verify that MappingError names the field and the reason."""
    err = MappingError("Amount", "unsupported type.", "Charge")

    assert str(err) == "cannot map field `Amount`, unsupported type."
    assert err.field_name == "Amount"
    assert err.reason == "unsupported type."
    assert err.record == "Charge"


def test_mapping_error_without_record():
    """Verify that the record name is optional."""
    err = MappingError("amount", "unsupported type.")
    assert err.record is None


def test_timeout_error_default_message():
    """Verify that TimeoutError has a default message."""
    with pytest.raises(TimeoutError) as exc_info:
        raise TimeoutError()
    assert "Operation timed out" in str(exc_info.value)


@pytest.mark.parametrize(
    "exception_class",
    [PaylinkError, TransportError, NetworkError, TlsError, ConnectTimeout],
)
def test_generic_exceptions_accept_message(exception_class):
    """Verify that generic exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)
