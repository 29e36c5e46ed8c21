"""
Root test configuration and fixtures for propconf.

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from propconf.settings import get_settings  # noqa: E402


# Properties file shared by accessor and builder tests
SAMPLE_PROPERTIES = """\
# sample configuration
app.name=Batch Loader
app.mode=fast
batch.size=42
batch.bad=notanumber
batch.negative=-5
batch.big=99999999999
batch.huge=99999999999999999999
batch.blank=
feature.on=Y
feature.lower=y
feature.off=N
feature.true=TRUE
colours=A, B,C
colours.bad=A,X
"""


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached library settings so environment patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_properties(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing a properties file into tmp_path and returning its path."""

    def _write(content: str, name: str = "test.properties") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_file(write_properties) -> Path:
    return write_properties(SAMPLE_PROPERTIES, "sample.properties")
