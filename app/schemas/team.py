from pydantic import BaseModel, Field

from app.core.enums import TeamAction


class ActiveBond(BaseModel):
    name: str
    description: str
    bonus: float = 0.0
    """Amount added to the team multiplier, 0 for display-only bonds"""


class BondEvaluation(BaseModel):
    active_bonds: list[ActiveBond] = Field(default_factory=list)
    multiplier: float = 1.0


class TeamPowerResponse(BaseModel):
    """Team power as shown before a battle, without skill procs."""

    members: int
    raw_power: int
    multiplier: float
    final_power: int
    active_bonds: list[ActiveBond]


class TeamChangeRequest(BaseModel):
    owned_general_id: int = Field(description="Owned general instance to add or remove")


class TeamChangeResponse(BaseModel):
    action: TeamAction
    owned_general_id: int
    team_size: int


class AutoTeamResponse(BaseModel):
    team_size: int
    owned_general_ids: list[int]
