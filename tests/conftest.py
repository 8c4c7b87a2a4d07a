"""
Pytest configuration and fixtures
"""
import pytest

from directives.composer import DirectiveComposer
from directives.entities import BackendCredentials, BackendIntegration, Configuration


@pytest.fixture
def composer() -> DirectiveComposer:
    return DirectiveComposer()


@pytest.fixture
def backend() -> BackendIntegration:
    return BackendIntegration(
        is_connected=True,
        has_selected_project=True,
        credentials=BackendCredentials(
            supabase_url="https://demo.supabase.co",
            anon_key="anon-demo-key",
        ),
    )


@pytest.fixture
def backend_config(backend) -> Configuration:
    return Configuration(working_directory="/repo", backend_integration=backend)


@pytest.fixture(autouse=True)
def _no_directive_env(monkeypatch):
    # keep a developer's .env from leaking into settings tests
    for name in ("DIRECTIVES_CONFIG_PATH", "DIRECTIVES_WORKING_DIRECTORY"):
        monkeypatch.delenv(name, raising=False)
