"""
Pydantic schemas for the best-move advisory service.

Responses are validated here, at the network boundary, so a malformed
payload never reaches game logic.
"""

from typing import Annotated, Optional
from pydantic import BaseModel, Field

from ..games.shut_the_box.state import ShutTheBoxState


TileValue = Annotated[int, Field(strict=True, ge=1, le=9)]


class BestActionRequest(BaseModel):
    """Body of POST /find-best-action."""
    dice_value: int = Field(..., ge=2, le=12, description="Sum of both dice")
    tiles_open: list[bool] = Field(
        ..., min_length=9, max_length=9, description="Open flags for tiles 1-9, indexed 0-8"
    )

    @classmethod
    def from_state(cls, state: ShutTheBoxState) -> "BestActionRequest":
        return cls(dice_value=state.dice_value, tiles_open=state.tiles_open)


class BestActionResponse(BaseModel):
    """
    Advisory answer.

    The ``action`` key is required; null means there is no legal move.
    """
    action: Optional[list[TileValue]] = Field(..., description="Tile values to shut")
