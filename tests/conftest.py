import pytest

from paylink.transport import bootstrap
from paylink.transport.tls import load_ca_bundle


@pytest.fixture
def ca_bundle() -> str:
    """Fixture providing the PEM bundle shipped with the package."""
    return load_ca_bundle()


@pytest.fixture
def fresh_bootstrap(monkeypatch):
    """Fixture clearing the shared transport for the duration of a test."""
    monkeypatch.setattr(bootstrap, "_transport", None)
    return bootstrap
