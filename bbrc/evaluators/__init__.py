"""
Evaluators Registry

Maps evaluator names to their classes and scorer names to the
per-utterance scoring functions.
"""

from .screening import ScreeningSession, score_fluency, score_recall, score_recognition

# Registry: name -> evaluator class
EVALUATORS = {
    'screening': ScreeningSession,
}

# Registry: name -> phase scorer
SCORERS = {
    'recall': score_recall,
    'recognition': score_recognition,
    'fluency': score_fluency,
}

def get_evaluator(name: str):
    """Get evaluator class by name"""
    if name not in EVALUATORS:
        available = ', '.join(EVALUATORS.keys())
        raise ValueError(f"Unknown evaluator: '{name}'. Available: {available}")
    return EVALUATORS[name]

def list_evaluators():
    """List available evaluator names"""
    return list(EVALUATORS.keys())

def get_scorer(name: str):
    """Get phase scorer by name"""
    if name not in SCORERS:
        available = ', '.join(SCORERS.keys())
        raise ValueError(f"Unknown scorer: '{name}'. Available: {available}")
    return SCORERS[name]

def list_scorers():
    """List available scorer names"""
    return list(SCORERS.keys())

__all__ = ['EVALUATORS', 'SCORERS', 'get_evaluator', 'list_evaluators', 'get_scorer', 'list_scorers']
