from configparser import ConfigParser

import pytest

from utils.config import Config
from tagcloud.tokenizer import make_separators


@pytest.fixture
def config():
    """Defaults only: no config file, no log directory."""
    return Config(ConfigParser())


@pytest.fixture
def separators(config):
    return make_separators(config.separators)


@pytest.fixture
def write_text(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
