"""Shared pytest fixtures for gdtfkit tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
import zipfile

import pytest

from gdtfkit.core.parsers.gdtf import GdtfParser
from gdtfkit.core.parsers.xml import XmlCursor

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_description_path(fixtures_dir: Path) -> Path:
    """Path to a complete sample description.xml."""
    return fixtures_dir / "gdtf" / "description.xml"


@pytest.fixture
def sample_description_bytes(sample_description_path: Path) -> bytes:
    return sample_description_path.read_bytes()


# ============================================================================
# Archive Fixtures
# ============================================================================


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a .gdtf zip archive into tmp_path."""

    def _make(
        members: dict[str, bytes],
        name: str = "fixture.gdtf",
    ) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as archive:
            for member, data in members.items():
                archive.writestr(member, data)
        return path

    return _make


@pytest.fixture
def sample_archive(make_archive: Callable[..., Path], sample_description_bytes: bytes) -> Path:
    """A .gdtf archive holding the sample description plus a thumbnail."""
    return make_archive(
        {
            "description.xml": sample_description_bytes,
            "spot300.png": b"\x89PNG\r\n\x1a\n",
        }
    )


# ============================================================================
# Decoder Fixtures
# ============================================================================


@pytest.fixture
def parser() -> GdtfParser:
    return GdtfParser()


@pytest.fixture
def open_element() -> Callable[[str], tuple[XmlCursor, object]]:
    """Factory returning a cursor and its root element for an XML snippet."""

    def _open(xml: str, chunk_size: int = 7) -> tuple[XmlCursor, object]:
        # Small chunks force events to arrive across many feeds
        cursor = XmlCursor(xml, chunk_size=chunk_size)
        return cursor, cursor.root()

    return _open


@pytest.fixture
def minimal_document() -> str:
    """Smallest document with one of each attribute-definition entity."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<GDTF DataVersion="1.1">
  <FixtureType Name="Minimal" ShortName="Min" LongName="Minimal Fixture" Manufacturer="Acme"
               Description="Minimal test fixture" FixtureTypeID="8F54E11C-4C91-11EC-81D3-0242AC130003">
    <AttributeDefinitions>
      <ActivationGroups>
        <ActivationGroup Name="PanTilt"/>
      </ActivationGroups>
      <FeatureGroups>
        <FeatureGroup Name="Position" Pretty="PositionP">
          <Feature Name="PanTilt"/>
        </FeatureGroup>
      </FeatureGroups>
      <Attributes>
        <Attribute Name="Pan" Pretty="P" Feature="Position.PanTilt" PhysicalUnit="Angle"/>
      </Attributes>
    </AttributeDefinitions>
  </FixtureType>
</GDTF>
"""
