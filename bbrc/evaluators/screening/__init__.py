"""
BBRC Screening Evaluator Package

Scores spoken responses from the Bateria Breve de Rastreio Cognitivo:
- Naming, incidental/immediate/learning/delayed memory (recall scorer)
- Recognition sheet (targets vs shown foils)
- Verbal fluency (animals, multi-word names)
- Clock drawing (Shulman criteria via Claude vision)

Usage:
    from bbrc.evaluators.screening import ScreeningSession, Phase

    session = ScreeningSession()
    session.start_phase(Phase.NAMING)
    session.process_speech("sapato casa pente")
    print(session.scores.naming)  # 3
"""

from .components import SpokenToken, make_token, normalize, tokenize
from .vocabulary import (
    AnimalDictionary,
    Vocabulary,
    VocabularyConflictError,
    build_vocabulary,
    default_vocabulary,
    load_vocabulary_config
)
from .classifier import classify_token
from .scoring import (
    FluencyScore,
    RecallScore,
    RecognitionScore,
    score_fluency,
    score_recall,
    score_recognition
)
from .evaluator import Phase, ScreeningScores, ScreeningSession, StageCapture
from .feedback import EducationLevel, generate_feedback, interpret_scores
from .api_evaluator import ClockAnalysisResult, analyze_clock_drawing

__version__ = '1.0.0'

__all__ = [
    'SpokenToken',
    'make_token',
    'normalize',
    'tokenize',
    'AnimalDictionary',
    'Vocabulary',
    'VocabularyConflictError',
    'build_vocabulary',
    'default_vocabulary',
    'load_vocabulary_config',
    'classify_token',
    'FluencyScore',
    'RecallScore',
    'RecognitionScore',
    'score_fluency',
    'score_recall',
    'score_recognition',
    'Phase',
    'ScreeningScores',
    'ScreeningSession',
    'StageCapture',
    'EducationLevel',
    'generate_feedback',
    'interpret_scores',
    'ClockAnalysisResult',
    'analyze_clock_drawing',
]
