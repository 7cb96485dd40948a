"""
BBRC Screening - Source Package
"""

from .config import ScoringConfig
from .transcriber import FinalTranscriptGate, TranscriptEvent
from .evaluators import get_evaluator, get_scorer, list_evaluators, list_scorers

__all__ = [
    'ScoringConfig',
    'FinalTranscriptGate',
    'TranscriptEvent',
    'get_evaluator',
    'get_scorer',
    'list_evaluators',
    'list_scorers',
]
