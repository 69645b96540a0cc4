"""Pipeline execution modules for background and operator-triggered matching."""

from .runner import run_matching_pipeline, run_matching_task, MatchingPipelineResult
from .dispatcher import MatchingDispatcher

__all__ = ['run_matching_pipeline', 'run_matching_task', 'MatchingPipelineResult', 'MatchingDispatcher']
