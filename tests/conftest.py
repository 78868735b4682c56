"""Pytest configuration and fixtures for confform tests."""

import pytest

from confform.config import SettingsManager
from confform.parser.config_file import ConfigParser


@pytest.fixture
def parser():
    """Parser with a fixed line separator so header text is predictable."""
    return ConfigParser(line_separator="\n")


@pytest.fixture
def settings_manager(tmp_path):
    """Settings manager isolated in a temporary directory."""
    return SettingsManager(tmp_path / "settings")


@pytest.fixture
def sample_config_text():
    """Sample annotated configuration for parser testing."""
    return """# Uncrustify 0.72
# General options

# The type of line endings
newlines = auto # lf/crlf/cr/auto

# The original size of tabs in the input
input_tab_size = 8 # number

# Whether to keep the utf8 BOM
utf8_bom_keep = true # false/true

# Indenting

# The number of columns to indent per level
indent_columns = 4 # number

# Comment banner
cmt_insert_file_header = header.txt # string
this line is not a setting

# Orphaned trailing header

"""


@pytest.fixture
def sample_config_file(tmp_path, sample_config_text):
    path = tmp_path / "uncrustify.cfg"
    path.write_text(sample_config_text, encoding="utf-8")
    return path
