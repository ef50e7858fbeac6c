import pytest

from quickcompile.utils.config import ConfigManager


@pytest.fixture
def config(tmp_path):
    """ConfigManager backed by a throwaway directory."""
    return ConfigManager(config_dir=tmp_path / ".quickcompile")
