"""
BBRC Feedback - Cutoff interpretation

Compares each domain score with its published cutoff. Verbal fluency
cutoffs depend on years of schooling.
"""

from enum import Enum
from typing import Dict, Union

from .evaluator import ScreeningScores
from .taxonomies import CUTOFF_SCORES, FLUENCY_CUTOFFS, MAX_SCORES


class EducationLevel(str, Enum):
    ILLITERATE = 'ILLITERATE'
    LOW = 'LOW'    # 1-7 years
    HIGH = 'HIGH'  # >= 8 years


DOMAIN_LABELS = {
    'naming': 'Nomeação',
    'incidental_memory': 'Memória Incidental',
    'immediate_memory': 'Memória Imediata',
    'learning': 'Aprendizado',
    'verbal_fluency': 'Fluência Verbal',
    'clock_drawing': 'Desenho do Relógio',
    'delayed_memory': 'Memória Tardia',
    'recognition': 'Reconhecimento',
}


def interpret_scores(
    scores: ScreeningScores,
    education: Union[EducationLevel, str] = EducationLevel.LOW
) -> Dict[str, Dict]:
    """
    Flag every domain that has a cutoff.

    Returns:
        domain -> {'score', 'cutoff', 'below_cutoff'}
    """
    education = EducationLevel(education)
    cutoffs = dict(CUTOFF_SCORES)
    cutoffs['verbal_fluency'] = FLUENCY_CUTOFFS[education.value]

    interpretation = {}
    for domain, cutoff in cutoffs.items():
        score = getattr(scores, domain)
        interpretation[domain] = {
            'score': score,
            'cutoff': cutoff,
            'below_cutoff': score < cutoff,
        }
    return interpretation


def _format_score(domain: str, score: int) -> str:
    max_score = MAX_SCORES.get(domain)
    return f"{score}/{max_score}" if max_score else str(score)


def generate_feedback(
    scores: ScreeningScores,
    education: Union[EducationLevel, str] = EducationLevel.LOW
) -> Dict[str, str]:
    """
    Generate one line per domain plus a summary

    Returns:
        Dict with one key per domain and 'summary'
    """
    interpretation = interpret_scores(scores, education)
    feedback = {}

    for domain, label in DOMAIN_LABELS.items():
        score = getattr(scores, domain)
        line = f"{label}: {_format_score(domain, score)}"
        info = interpretation.get(domain)
        if info:
            if info['below_cutoff']:
                line += f" ⚠ below cutoff ({info['cutoff']})"
            else:
                line += f" ✓ within expected range (cutoff {info['cutoff']})"
        feedback[domain] = line

    flagged = [d for d, info in interpretation.items() if info['below_cutoff']]
    if flagged:
        names = ', '.join(DOMAIN_LABELS[d] for d in flagged)
        feedback['summary'] = f"{len(flagged)} domain(s) below cutoff: {names}"
    else:
        feedback['summary'] = "All domains within expected range"

    return feedback
