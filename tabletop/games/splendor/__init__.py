"""
Splendor-style gem/card game.

Key mechanics:
- Take gems from a shared bank (five colors plus a gold joker)
- Buy tiered development cards; owned cards discount later purchases
- Reserve cards for later, receiving a gold gem
- Claim location tiles once owned cards meet their requirement
- First to 15 points triggers the final round

This module contains:
- Card and location tile catalogs
- Game setup from the catalog
- Board metrics for the UI
"""

from .cards import ALL_CARDS, TIER_1_CARDS, TIER_2_CARDS, TIER_3_CARDS, get_card_by_id
from .locations import LOCATION_TILES, get_tile_by_id
from .setup import setup_game, MIN_PLAYERS, MAX_PLAYERS
from .metrics import total_gem_costs, tier_cost_totals

__all__ = [
    "ALL_CARDS",
    "TIER_1_CARDS",
    "TIER_2_CARDS",
    "TIER_3_CARDS",
    "get_card_by_id",
    "LOCATION_TILES",
    "get_tile_by_id",
    "setup_game",
    "MIN_PLAYERS",
    "MAX_PLAYERS",
    "total_gem_costs",
    "tier_cost_totals",
]
