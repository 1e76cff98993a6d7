"""Shared pytest fixtures for PySeam tests."""
import pytest
from pathlib import Path

from pyseam.data import SAMPLES_DIR
from pyseam.parsing.config.settings_yaml_parser import ResolverSettings
from pyseam.parsing.material.material_file_parser import MaterialFileParser


@pytest.fixture
def samples_dir():
    """Path to the bundled sample input deck."""
    return SAMPLES_DIR


@pytest.fixture
def panel_mat_path():
    """Path to the sample material file."""
    return SAMPLES_DIR / "panel.mat"


@pytest.fixture
def parser():
    """Fresh material file parser."""
    return MaterialFileParser()


@pytest.fixture
def write_file(tmp_path):
    """Factory writing text content to a file under tmp_path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def steel_record_text():
    """Formatted two-line record from the material file template."""
    return ("1011 ISOELASTIC steel\n"
            "7.85e-6 2.07e8 8.0e7 0.3\n")


@pytest.fixture
def input_folder_settings(tmp_path):
    """Resolver settings that look up manifest entries in tmp_path."""
    return ResolverSettings(drive_letters=('C',), input_folder=tmp_path)
