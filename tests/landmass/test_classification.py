"""Tests for elevation blending and land/water classification."""

import numpy as np
import pytest

from hexmap.config import MapType
from hexmap.landmass import classification
from hexmap.landmass.classification import (
    ARCHIPELAGO_THRESHOLD_OFFSET,
    blend_elevation,
    classify,
    create_land_mask,
    effective_water_threshold,
    spawn_land_or_water,
)
from hexmap.terrain_types import TerrainType
from hexmap.tile_map import TileMap


class TestEffectiveWaterThreshold:
    """Tests for per map type thresholds."""

    def test_archipelago_offset(self) -> None:
        """Archipelago raises the threshold by 0.25."""
        assert effective_water_threshold(MapType.ARCHIPELAGO, 0.1) == pytest.approx(
            0.1 + ARCHIPELAGO_THRESHOLD_OFFSET
        )

    @pytest.mark.parametrize(
        "map_type", [t for t in MapType if t != MapType.ARCHIPELAGO]
    )
    def test_other_types_unchanged(self, map_type: MapType) -> None:
        """Every other map type uses the threshold as given."""
        assert effective_water_threshold(map_type, -0.2) == -0.2


class TestBlendElevation:
    """Tests for noise/bias blending."""

    noise = np.array([0.4, -0.2])
    bias = np.array([0.2, -1.0])

    def test_noise_only_types(self) -> None:
        """Default and archipelago ignore the bias."""
        for map_type in (MapType.DEFAULT, MapType.ARCHIPELAGO):
            result = blend_elevation(map_type, self.noise, self.bias)
            np.testing.assert_allclose(result, self.noise)

    def test_pangaea(self) -> None:
        """Pangaea weights noise 3:1 over bias."""
        result = blend_elevation(MapType.PANGAEA, self.noise, self.bias)
        np.testing.assert_allclose(result, [0.35, -0.4])

    def test_inner_sea(self) -> None:
        """Inner sea subtracts the scaled bias."""
        result = blend_elevation(MapType.INNER_SEA, self.noise, self.bias)
        np.testing.assert_allclose(result, [0.34, 0.1])

    @pytest.mark.parametrize(
        "map_type",
        [
            MapType.CONTINENT_AND_ISLANDS,
            MapType.TWO_CONTINENTS,
            MapType.THREE_CONTINENTS,
            MapType.FOUR_CORNERS,
        ],
    )
    def test_separators_average(self, map_type: MapType) -> None:
        """Separator templates average noise and bias."""
        result = blend_elevation(map_type, self.noise, self.bias)
        np.testing.assert_allclose(result, [0.3, -0.6])


class TestClassify:
    """Tests for threshold classification."""

    def test_below_threshold_is_water(self) -> None:
        """Values below the threshold are water."""
        assert classify(-0.1, 0.0) == TerrainType.WATER

    def test_threshold_is_land(self) -> None:
        """A value equal to the threshold is land."""
        assert classify(0.0, 0.0) == TerrainType.LAND

    def test_mask_matches_classify(self) -> None:
        """The vectorised mask agrees with scalar classification."""
        elevation = np.linspace(-1, 1, 21)
        mask = create_land_mask(elevation, 0.3)
        expected = [classify(e, 0.3) == TerrainType.LAND for e in elevation]
        assert list(mask) == expected

    def test_mask_delegates_to_classify(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The mask is built from per-value classification."""
        monkeypatch.setattr(
            classification, "classify", lambda elevation, threshold: TerrainType.WATER
        )
        mask = create_land_mask(np.array([0.5, 0.9]), 0.0)
        assert mask.dtype == bool
        assert not mask.any()


class TestSpawnLandOrWater:
    """Tests for writing the mask onto tiles."""

    def test_assigns_in_order(self, hex_map: TileMap) -> None:
        """Mask entries map onto tiles in canonical order."""
        mask = np.arange(len(hex_map)) % 2 == 0
        spawn_land_or_water(hex_map.values, mask, "Grassland", "Ocean")
        for i, tile in enumerate(hex_map):
            assert tile.base_terrain == ("Grassland" if i % 2 == 0 else "Ocean")

    def test_length_mismatch(self, hex_map: TileMap) -> None:
        """A mask of the wrong length is rejected."""
        with pytest.raises(ValueError, match="doesn't match"):
            spawn_land_or_water(hex_map.values, np.ones(3, bool), "Grassland", "Ocean")
