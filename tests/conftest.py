from __future__ import annotations

import io
import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image

MARS_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<GameData>
  <World Id="Mars2">
    <Gravity>-3.71</Gravity>
    <TerrainSettings WorldSize="4096">
      <MiniMap Path="Worlds\\Mars2\\Mars2Minimap.png" />
    </TerrainSettings>
    <StartLocation Id="MarsSpawnCanyonOverlook">
      <Name Key="CanyonOverlookName" />
      <Description Key="CanyonOverlookDescription" />
      <Position x="-1048.5" y="522" />
      <SpawnRadius Value="10" />
    </StartLocation>
    <StartLocation Id="MarsSpawnButchersFlat">
      <Position x="900" y="-300" />
    </StartLocation>
    <RegionSet Id="MarsDeepMiningRegions">
      <Texture Path="Worlds/Mars2/DeepMining.png" />
      <Region Id="DeepMinerRegionReference" R="0" G="0" B="0" />
      <Region Id="MarsDeepMiningRegionIron" R="200" G="50" B="10" />
      <Region Id="MarsDeepMiningRegionGoldSilver" R="10" G="200" B="50" />
    </RegionSet>
    <RegionSet Id="MarsNamedRegions">
      <Texture Path="Worlds/Mars2/NamedRegions.png" />
      <Region Id="MarsNamedRegionHellasBasin" R="1" G="2" B="3">
        <Name Key="HellasBasinName" />
      </Region>
      <Region Id="MarsNamedRegionUnused" />
    </RegionSet>
    <RegionSet Id="MarsPointsOfInterest">
      <Texture Path="Worlds/Mars2/Poi.png" />
      <Region Id="Crater" R="9" G="9" B="9" />
    </RegionSet>
  </World>
</GameData>
"""

IRON = (200, 50, 10)
HELLAS = (1, 2, 3)


def write_png(path: Path, size: tuple[int, int], pixels: dict[tuple[int, int], tuple[int, int, int]]) -> Path:
    """Write an RGB PNG; ``pixels`` uses image coordinates (row 0 at the top)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    img = Image.new("RGB", size, (0, 0, 0))
    for xy, color in pixels.items():
        img.putpixel(xy, color)
    img.save(path)
    return path


@pytest.fixture
def mars_xml() -> bytes:
    return MARS_XML


@pytest.fixture
def oversized_png() -> bytes:
    """A tiny PNG whose header claims 20000x20000, past Pillow's pixel limit."""
    buffer = io.BytesIO()
    Image.new("RGB", (1, 1)).save(buffer, format="PNG")
    data = bytearray(buffer.getvalue())
    data[16:24] = struct.pack(">II", 20000, 20000)
    data[29:33] = struct.pack(">I", zlib.crc32(bytes(data[12:29])))
    return bytes(data)


@pytest.fixture
def game_dir(tmp_path: Path) -> Path:
    """A minimal install with Mars2 only; textures are 4x4 with one colored bottom-left pixel."""
    assets = tmp_path / "rocketstation_Data" / "StreamingAssets"
    world_dir = assets / "Worlds" / "Mars2"
    world_dir.mkdir(parents=True)
    (world_dir / "Mars2.xml").write_bytes(MARS_XML)
    write_png(world_dir / "Mars2Minimap.png", (8, 4), {})
    write_png(world_dir / "DeepMining.png", (4, 4), {(0, 3): IRON})
    write_png(world_dir / "NamedRegions.png", (4, 4), {(3, 0): HELLAS})
    return tmp_path
