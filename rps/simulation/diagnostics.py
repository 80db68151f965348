"""Simulation diagnostics and reporting.

Separates "running the simulation" from "reporting on the simulation".
"""

import json
import logging
import time
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from rps.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)


def format_stats(stats: Dict[str, Any]) -> str:
    """One-line population summary."""
    counts = stats.get("counts", {})
    population = " / ".join(f"{name}={n}" for name, n in counts.items())
    return (
        f"Frame {stats.get('frame_count', 0)} "
        f"(t={stats.get('elapsed_sim_time', 0.0):.1f}s) | {population} | "
        f"conversions={stats.get('total_conversions', 0)}"
    )


def log_simulation_stats(engine: "SimulationEngine") -> None:
    """Log current simulation statistics."""
    stats = engine.get_stats()
    wall_time = time.time() - engine.start_time
    logger.info(format_stats(stats))
    logger.info(
        "Decisions: %d | wall time %.1fs (%.0f frames/s)",
        stats.get("decision_count", 0),
        wall_time,
        engine.frame_count / wall_time if wall_time > 0 else 0.0,
    )
    transitions = stats.get("conversions", {})
    if transitions:
        logger.info(
            "Conversions by transition: %s",
            ", ".join(f"{k}: {v}" for k, v in transitions.items()),
        )
    logger.debug("Engine state: %s", engine.get_debug_info())


def export_stats_json(engine: "SimulationEngine", filename: str) -> None:
    """Export simulation statistics to a JSON file.

    Raises:
        OSError: If the file cannot be written
    """
    stats = engine.get_stats()
    stats["elapsed_real_time"] = time.time() - engine.start_time
    with open(filename, "w") as f:
        json.dump(stats, f, indent=2)
    logger.info("Exported stats to %s", filename)
