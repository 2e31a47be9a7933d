"""Shared pytest fixtures for the KML → GeoJSON test suite."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from pathlib import Path

import pytest

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
# Sample KML document fixtures (as text)
# ---------------------------------------------------------------------------


@pytest.fixture()
def folder_point_kml(data_dir: Path) -> str:
    """One folder "A" holding one Point placemark "P1" at 10,20,5."""
    return (data_dir / "01_folder_point.kml").read_text(encoding="utf-8")


@pytest.fixture()
def styled_kml(data_dir: Path) -> str:
    """Styles, style maps and a gx:CascadingStyle applied to every geometry kind."""
    return (data_dir / "02_styled_features.kml").read_text(encoding="utf-8")


@pytest.fixture()
def extended_data_kml(data_dir: Path) -> str:
    """Schema-typed and untyped ExtendedData on Point placemarks."""
    return (data_dir / "03_extended_data.kml").read_text(encoding="utf-8")


@pytest.fixture()
def nested_folders_kml(data_dir: Path) -> str:
    """Placemarks at the root and inside two levels of folders."""
    return (data_dir / "04_nested_folders.kml").read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Edge-case fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_kml(edge_cases_dir: Path) -> str:
    """Text that is not well-formed XML."""
    return (edge_cases_dir / "11_malformed_not_xml.kml").read_text(encoding="utf-8")


@pytest.fixture()
def no_kml_root_xml(edge_cases_dir: Path) -> str:
    """Well-formed XML without a <kml> element."""
    return (edge_cases_dir / "12_no_kml_root.xml").read_text(encoding="utf-8")


@pytest.fixture()
def geometry_edge_cases_kml(edge_cases_dir: Path) -> str:
    """Placemarks with missing, empty, unsupported and messy geometry."""
    return (edge_cases_dir / "13_geometry_edge_cases.kml").read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Identifier fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sequential_ids() -> Callable[[], str]:
    """Zero-argument id generator yielding ``id-1``, ``id-2``, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"
