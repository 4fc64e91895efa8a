"""
Pytest configuration and shared fixtures for the test suite.
Ensures proper Python path and provides common fixtures for unit and integration tests.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Keep test logs out of the working tree; must happen before api modules configure logging.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="apex-test-logs-"))
os.environ.setdefault("JWT_SECRET", "test-secret")


# ----- Temporary data directory (tests never touch ./data) -----
@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def repo(data_dir):
    """Repository over an empty temporary data directory."""
    from api.storage import Repository
    return Repository(data_dir)


@pytest.fixture
def settings(data_dir):
    """Settings with no LLM key so generation always uses the library."""
    from api.config import Settings
    return Settings(data_dir=data_dir, gemini_api_key=None, llm_provider="gemini", _env_file=None)


@pytest.fixture
def sample_user(repo):
    """A registered user stored in the temporary repository."""
    from api.utils.auth import create_user
    return create_user("Test User", "test@example.com", "testpass123", repo)
