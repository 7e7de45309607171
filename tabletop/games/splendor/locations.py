"""
Location Tiles - Bonus objectives.

A tile is worth 3 points to the first player whose owned cards meet
its requirement: four cards in each of two neighbouring colors, or
three in each of three.
"""

from __future__ import annotations

from ...engine_core.gems import GemColor, GemCounts
from ...engine_core.state import LocationTile


LOCATION_POINTS = 3

_NAMES = [
    "Harbor",
    "Observatory",
    "Citadel",
    "Bazaar",
    "Sanctum",
    "Foundry",
    "Library",
    "Orchard",
    "Arena",
    "Lighthouse",
]


def _build_tiles() -> list[LocationTile]:
    colors = GemColor.standard()
    requirements = []
    for i in range(len(colors)):
        requirements.append({colors[i]: 4, colors[(i + 1) % len(colors)]: 4})
    for i in range(len(colors)):
        requirements.append({colors[(i + k) % len(colors)]: 3 for k in range(3)})

    return [
        LocationTile(
            tile_id=f"loc-{index + 1}",
            name=_NAMES[index],
            requirement=GemCounts.from_dict(requirement),
            points=LOCATION_POINTS,
        )
        for index, requirement in enumerate(requirements)
    ]


LOCATION_TILES: list[LocationTile] = _build_tiles()


def get_tile_by_id(tile_id: str) -> LocationTile | None:
    for tile in LOCATION_TILES:
        if tile.tile_id == tile_id:
            return tile
    return None
