"""
Pytest configuration and shared fixtures for the kernelmon test suite.
"""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Core Fixtures
# ============================================================================


SAMPLE_PROC_STAT = (
    b"cpu  10 20 30 40 50 60 70 0 0 0\n"
    b"cpu0 5 10 15 20 25 30 35 0 0 0\n"
    b"intr 1500 23 0 0 9 0 0 0\n"
    b"ctxt 300\n"
    b"btime 1600000000\n"
    b"processes 42\n"
    b"procs_running 2\n"
    b"procs_blocked 0\n"
    b"page 5 7\n"
    b"softirq 100 1 2 3 4 5 6 7 8 9 10\n"
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sample_proc_stat():
    """A /proc/stat buffer carrying every recognized keyword."""
    return SAMPLE_PROC_STAT


@pytest.fixture
def kernel_files(temp_dir):
    """
    Write a stat file and an entropy file into temp_dir.

    Returns a function taking (stat_bytes, entropy_bytes) that returns the
    (stat_path, entropy_path) pair. Passing None for either content leaves
    that file absent.
    """

    def _write(stat_bytes=SAMPLE_PROC_STAT, entropy_bytes=b"128\n"):
        stat_path = temp_dir / "stat"
        entropy_path = temp_dir / "entropy_avail"
        if stat_bytes is not None:
            stat_path.write_bytes(stat_bytes)
        if entropy_bytes is not None:
            entropy_path.write_bytes(entropy_bytes)
        return str(stat_path), str(entropy_path)

    return _write


@pytest.fixture
def write_config(temp_dir):
    """Write a config.toml into temp_dir and return its path."""

    def _write(content: str) -> Path:
        config_path = temp_dir / "config.toml"
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def restore_config():
    """Restore the configuration singleton after a test changes it."""
    from kernelmon.config import manager

    original_path = manager._CONFIG_FILE_PATH
    yield
    manager._CONFIG_FILE_PATH = original_path
    manager.clear_config_cache()
