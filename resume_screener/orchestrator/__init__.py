# orchestrator package
"""Orchestrator for evaluating a resume batch against one job."""

from resume_screener.orchestrator.screening_orchestrator import (
    ScreeningOrchestrator,
    ScreeningResult,
    screen_candidates,
)

__all__ = [
    "ScreeningOrchestrator",
    "ScreeningResult",
    "screen_candidates",
]
