"""Shared pytest fixtures for the KML to CZML converter test suite."""

from pathlib import Path

import pytest

from kml_czml.core.config import ConverterConfig

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def document_overlays_kml(data_dir: Path) -> Path:
    """Two overlays directly under <Document>, TimeStamp then TimeSpan."""
    return data_dir / "01_document_overlays.kml"


@pytest.fixture()
def folder_overlays_kml(data_dir: Path) -> Path:
    """Two unnamed overlays under a top-level <Folder>, KML 2.1 namespace."""
    return data_dir / "02_folder_overlays.kml"


@pytest.fixture()
def document_folder_overlays_kml(data_dir: Path) -> Path:
    """Overlays split across two <Folder>s inside <Document>, no namespace."""
    return data_dir / "03_document_folder_overlays.kml"


# ---------------------------------------------------------------------------
# Edge-case KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_kml(edge_cases_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return edge_cases_dir / "11_malformed_not_xml.kml"


@pytest.fixture()
def no_overlays_kml(edge_cases_dir: Path) -> Path:
    """Path to a valid KML with placemarks but no GroundOverlay."""
    return edge_cases_dir / "13_no_overlays.kml"


@pytest.fixture()
def non_numeric_bounds_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML whose second overlay has a non-numeric LatLonBox edge."""
    return edge_cases_dir / "14_non_numeric_bounds.kml"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture()
def config() -> ConverterConfig:
    """Default converter configuration."""
    return ConverterConfig()
