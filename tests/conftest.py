"""
Global pytest configuration and fixtures for Happy Config testing.
"""

import os
import pytest
from pathlib import Path
from unittest.mock import patch

# Add the project root to sys.path for imports
import sys
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from happy_config.core.kv_store import JsonFileStore, MemoryStore
from happy_config.core.server_config import SERVER_CONFIG_NAMESPACE, ServerConfigStore
from tests.fixtures.mocks import MockConfirm, MockProber


@pytest.fixture(scope="function")
def memory_store():
    """Empty in-memory key-value store."""
    return MemoryStore()


@pytest.fixture(scope="function")
def server_config(memory_store):
    """Config store with no build-time default."""
    return ServerConfigStore(memory_store)


@pytest.fixture(scope="function")
def app_dir(tmp_path):
    """Temporary application directory."""
    directory = tmp_path / "happy"
    directory.mkdir()
    return directory


@pytest.fixture(scope="function")
def file_store(app_dir):
    """JSON-file store over the server-config namespace."""
    return JsonFileStore(app_dir, SERVER_CONFIG_NAMESPACE)


@pytest.fixture(scope="function")
def mock_environment(app_dir):
    """Point the CLI at the temporary app directory with no build-time default."""
    env_vars = {"HAPPY_CONFIG_DIR": str(app_dir)}

    with patch.dict(os.environ, env_vars):
        os.environ.pop("HAPPY_SERVER_URL", None)
        os.environ.pop("HAPPY_CONFIG_DEBUG", None)
        yield env_vars


@pytest.fixture(scope="function")
def confirm_yes():
    return MockConfirm(answer=True)


@pytest.fixture(scope="function")
def confirm_no():
    return MockConfirm(answer=False)


@pytest.fixture(scope="function")
def ok_prober():
    return MockProber()
