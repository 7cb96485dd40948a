"""
BBRC Evaluator - Session-level score aggregation

This is the primary interface for a running screening. It coordinates:
- Phase lifecycle (found words and captures reset on phase start)
- Routing final utterances to the phase scorer
- Merging incremental hits into cumulative scores
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Union

from ...config import ScoringConfig
from ...transcriber import FinalTranscriptGate, TranscriptEvent
from .components import SpokenToken
from .scoring import (
    FluencyScore, RecallScore, RecognitionScore,
    score_fluency, score_recall, score_recognition
)
from .taxonomies import MAX_SCORES
from .vocabulary import Vocabulary, build_vocabulary, default_vocabulary


class Phase(str, Enum):
    NAMING = 'NAMING'
    INCIDENTAL_MEMORY = 'INCIDENTAL_MEMORY'
    IMMEDIATE_MEMORY = 'IMMEDIATE_MEMORY'
    LEARNING = 'LEARNING'
    VERBAL_FLUENCY = 'VERBAL_FLUENCY'
    CLOCK_DRAWING = 'CLOCK_DRAWING'
    DELAYED_MEMORY = 'DELAYED_MEMORY'
    RECOGNITION = 'RECOGNITION'


# Battery order
PHASE_ORDER = list(Phase)

RECALL_PHASES = (
    Phase.NAMING, Phase.INCIDENTAL_MEMORY, Phase.IMMEDIATE_MEMORY,
    Phase.LEARNING, Phase.DELAYED_MEMORY
)

SCORE_KEYS = {
    Phase.NAMING: 'naming',
    Phase.INCIDENTAL_MEMORY: 'incidental_memory',
    Phase.IMMEDIATE_MEMORY: 'immediate_memory',
    Phase.LEARNING: 'learning',
    Phase.VERBAL_FLUENCY: 'verbal_fluency',
    Phase.CLOCK_DRAWING: 'clock_drawing',
    Phase.DELAYED_MEMORY: 'delayed_memory',
    Phase.RECOGNITION: 'recognition',
}

PhaseResult = Union[RecallScore, RecognitionScore, FluencyScore]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


@dataclass
class ScreeningScores:
    """Numeric score per battery domain"""
    naming: int = 0
    incidental_memory: int = 0
    immediate_memory: int = 0
    learning: int = 0
    verbal_fluency: int = 0
    clock_drawing: int = 0
    delayed_memory: int = 0
    recognition: int = 0
    date: str = field(default_factory=_utc_now_iso)

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass
class StageCapture:
    """Every response heard during one phase attempt"""
    tokens: List[SpokenToken] = field(default_factory=list)
    intrusions: List[SpokenToken] = field(default_factory=list)
    repeats: List[SpokenToken] = field(default_factory=list)
    distractor_hits: List[SpokenToken] = field(default_factory=list)

    def extend(self, result: PhaseResult) -> None:
        self.tokens.extend(result.tokens)
        self.repeats.extend(result.repeats)
        if isinstance(result, FluencyScore):
            self.intrusions.extend(result.invalid)
        else:
            self.intrusions.extend(result.intrusions)
        if isinstance(result, RecognitionScore):
            self.distractor_hits.extend(result.distractor_hits)


class ScreeningSession:
    """Cumulative state for one patient's screening"""

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        config: Optional[ScoringConfig] = None,
        min_confidence: Optional[float] = None
    ):
        self.config = config or ScoringConfig()
        if vocabulary is None:
            vocabulary = build_vocabulary(config=config) if config else default_vocabulary()
        self.vocabulary = vocabulary
        self.gate = FinalTranscriptGate(min_confidence)
        self.reset()

    def reset(self) -> None:
        """Restart the whole session"""
        self.phase: Optional[Phase] = None
        self.scores = ScreeningScores()
        self.found_words: List[str] = []
        self.captures: Dict[Phase, StageCapture] = {}
        self.found_by_phase: Dict[Phase, List[str]] = {}
        self.clock_reasoning: Optional[str] = None
        self.gate.clear()

    def start_phase(self, phase: Union[Phase, str]) -> None:
        """Enter (or restart) a phase; its found words, capture and score start empty"""
        phase = Phase(phase)
        self.phase = phase
        self.found_words = []
        self.found_by_phase[phase] = self.found_words
        self.captures[phase] = StageCapture()
        if phase != Phase.CLOCK_DRAWING:
            setattr(self.scores, SCORE_KEYS[phase], 0)
        self.gate.clear()

    @property
    def capture(self) -> Optional[StageCapture]:
        return self.captures.get(self.phase) if self.phase else None

    @property
    def current_score(self) -> int:
        if self.phase is None:
            return 0
        return getattr(self.scores, SCORE_KEYS[self.phase])

    def handle_transcript(self, event: TranscriptEvent) -> Optional[PhaseResult]:
        """Feed a recognizer event; only final utterances are scored"""
        text = self.gate.push(event)
        if text is None:
            return None
        return self.process_speech(text, confidence=event.confidence)

    def process_speech(self, text: str, confidence: Optional[float] = None) -> Optional[PhaseResult]:
        """
        Score one final utterance in the current phase and merge the hits.

        Returns:
            The phase scorer's result, or None outside a speech phase
        """
        if self.phase in RECALL_PHASES:
            result = score_recall(text, self.found_words, self.vocabulary, confidence)
            credited = result.hits
        elif self.phase == Phase.RECOGNITION:
            result = score_recognition(text, self.found_words, self.vocabulary, confidence)
            credited = result.hits
        elif self.phase == Phase.VERBAL_FLUENCY:
            result = score_fluency(
                text, self.vocabulary.animals, self.found_words,
                max_ngram=self.config.max_ngram, confidence=confidence
            )
            credited = result.animals
        else:
            return None

        for identity in credited:
            if identity not in self.found_words:
                self.found_words.append(identity)
        setattr(self.scores, SCORE_KEYS[self.phase], len(self.found_words))
        self.captures[self.phase].extend(result)
        return result

    def update_score(self, key: str, value: int) -> None:
        """Set a domain score scored outside the speech path, clamped to 0..max"""
        if key == 'date' or not hasattr(self.scores, key):
            available = ', '.join(SCORE_KEYS.values())
            raise ValueError(f"Unknown score key: '{key}'. Available: {available}")
        value = max(0, int(value))
        if key in MAX_SCORES:
            value = min(MAX_SCORES[key], value)
        setattr(self.scores, key, value)

    def record_clock_result(self, result) -> None:
        """Store a ClockAnalysisResult from the clock evaluator"""
        self.update_score('clock_drawing', result.score)
        self.clock_reasoning = result.reasoning
