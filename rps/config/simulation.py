"""Simulation constants.

Per-kind radii live with the kinds themselves (``rps.kinds``). The values
here are shared by every kind.
"""

# =============================================================================
# AGENT GEOMETRY
# =============================================================================
# Agents are treated as discs. The footprint diameter doubles as the
# collision threshold and as the minimum spacing at spawn time.

AGENT_SIZE = 52.0
COLLISION_THRESHOLD = AGENT_SIZE


# =============================================================================
# MOVEMENT
# =============================================================================

AGENT_SPEED = 150.0  # Units per second along the intent direction


# =============================================================================
# TIMING
# =============================================================================
# Decisions run on their own fixed clock, independent of the frame rate.

DECISION_RATE_HZ = 5.0

# Fixed dt used by headless runs (seconds per frame)
HEADLESS_FRAME_DT = 1.0 / 60.0


# =============================================================================
# POPULATION
# =============================================================================

AGENTS_PER_KIND = 10

# Consecutive rejected candidates allowed for one agent before spawn
# placement gives up and reports a configuration error.
SPAWN_MAX_ATTEMPTS = 10_000

# Number of population samples kept by the tracker
POPULATION_HISTORY_LENGTH = 600
