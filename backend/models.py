"""Response models for the arena API."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class AgentData(BaseModel):
    """One agent as presented to clients (arena-local coordinates)."""

    id: int
    kind: str  # 'rock', 'paper', 'scissors'
    x: float
    y: float


class ArenaData(BaseModel):
    width: float
    height: float
    agent_size: float


class StatePayload(BaseModel):
    """Full arena state for one frame."""

    frame: int
    elapsed: float
    paused: bool
    arena: ArenaData
    counts: Dict[str, int]
    agents: List[AgentData]


class StatsPayload(BaseModel):
    """Population statistics."""

    frame_count: int
    decision_count: int
    elapsed_sim_time: float
    paused: bool
    counts: Dict[str, int]
    total_population: int
    total_conversions: int
    last_frame_conversions: int
    conversions: Dict[str, int]
    monoculture: bool
    last_decision_goals: Dict[str, int]


class CommandResponse(BaseModel):
    """Result of a control command."""

    command: str
    success: bool
    paused: bool
    frame: int
    message: str = ""


# Upper bound on frames per step request; the engine lock is held for all of them.
MAX_STEP_FRAMES = 600


class StepRequest(BaseModel):
    """Body of ``POST /api/control/step``. ``dt`` defaults to the headless frame dt."""

    frames: int = Field(1, ge=1, le=MAX_STEP_FRAMES)
    dt: Optional[float] = Field(None, ge=0)
