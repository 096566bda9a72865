"""
Coach Data Model
"""

from pydantic import BaseModel


class Coach(BaseModel):
    """Head coach with 0-99 specialty ratings (absent values count as 50)."""

    coach_id: str | None = None
    first_name: str = ""
    last_name: str = ""
    team_id: str | None = None

    offense_specialty: int | None = None
    defense_specialty: int | None = None
    powerplay_specialty: int | None = None
    penalty_kill_specialty: int | None = None
    line_management: int | None = None
    motivation: int | None = None

    @property
    def full_name(self) -> str:
        """Display name."""
        return f"{self.first_name} {self.last_name}".strip()
