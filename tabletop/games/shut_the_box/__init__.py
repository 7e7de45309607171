"""
Shut the Box - The dice/tile game.

Best-move advice comes from a remote service; see tabletop.advisory.
"""

from .state import (
    D6,
    Tile,
    ShutTheBoxState,
    create_game_state,
    toggle_tile,
    set_die,
    tile_combos,
    legal_tile_actions,
    shut_tiles,
)

__all__ = [
    "D6",
    "Tile",
    "ShutTheBoxState",
    "create_game_state",
    "toggle_tile",
    "set_die",
    "tile_combos",
    "legal_tile_actions",
    "shut_tiles",
]
