"""
Player Data Model

Pydantic models for representing league players and their skill ratings.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

DEFAULT_RATING = 50


class PlayerPosition(str, Enum):
    """Player position enumeration."""

    CENTER = "C"
    LEFT_WING = "LW"
    RIGHT_WING = "RW"
    DEFENSEMAN = "D"
    GOALIE = "G"


class PlayerStatus(str, Enum):
    """Roster status of a player."""

    ACTIVE = "active"
    INJURED = "injured"
    SUSPENDED = "suspended"
    RETIRED = "retired"


def rating_of(entity: Any, field: str, default: int = DEFAULT_RATING) -> int:
    """
    Read a rating attribute, substituting the default when it is absent.

    Args:
        entity: Player or Coach (anything with rating attributes)
        field: Attribute name, e.g. "shooting"
        default: Value used when the attribute is missing or None

    Returns:
        The rating value
    """
    value = getattr(entity, field, None)
    if value is None:
        return default
    return value


class Player(BaseModel):
    """
    Player model with identity and skill ratings.

    Ratings are integers on a 0-99 scale. Any rating may be absent,
    in which case the simulator treats it as 50. Values outside the
    scale are accepted as-is.
    """

    model_config = ConfigDict(use_enum_values=True)

    # Identification
    player_id: str
    first_name: str = ""
    last_name: str = ""
    position: PlayerPosition
    team_id: str | None = None
    status: PlayerStatus = PlayerStatus.ACTIVE

    # Offensive ratings
    shooting: int | None = None
    passing: int | None = None
    puck_control: int | None = None
    vision: int | None = None
    poise: int | None = None

    # Defensive / physical ratings
    defense: int | None = None
    checking: int | None = None
    movement: int | None = None
    aggressiveness: int | None = None
    discipline: int | None = None
    fighting: int | None = None
    flexibility: int | None = None
    injury_resistance: int | None = None
    fatigue: int | None = None

    # Goaltending
    rebound_control: int | None = None

    overall_rating: int | None = None

    @property
    def full_name(self) -> str:
        """Display name."""
        return f"{self.first_name} {self.last_name}".strip() or self.player_id

    @property
    def is_goalie(self) -> bool:
        """Check if player is a goalie."""
        return self.position == PlayerPosition.GOALIE

    @property
    def is_skater(self) -> bool:
        """Check if player is a skater (any non-goalie)."""
        return not self.is_goalie

    @property
    def is_forward(self) -> bool:
        """Check if player is a forward."""
        return self.position in {
            PlayerPosition.CENTER,
            PlayerPosition.LEFT_WING,
            PlayerPosition.RIGHT_WING,
        }

    @property
    def is_defenseman(self) -> bool:
        """Check if player is a defenseman."""
        return self.position == PlayerPosition.DEFENSEMAN

    @property
    def is_available(self) -> bool:
        """Check if player can be dressed for a game."""
        return self.status == PlayerStatus.ACTIVE

    def rating(self, field: str) -> int:
        """Rating value with the 50 default applied."""
        return rating_of(self, field)
