"""
BBRC Components - Normalize and tokenize spoken utterances

This module handles the text side of classification:
- Canonical form (accent-insensitive, case-insensitive, trimmed)
- Word tokenization preserving spoken order
- The SpokenToken record produced for every classified word or phrase
"""

import re
import time
import unicodedata
from dataclasses import dataclass, field, replace
from typing import List, Optional

# Classification tags
TARGET = 'target'
DISTRACTOR = 'distractor'
INTRUSION = 'intrusion'
REPEAT = 'repeat'

CLASSIFICATIONS = (TARGET, DISTRACTOR, INTRUSION, REPEAT)

_SPLIT_RE = re.compile(r'[\s,.;!?]+')


@dataclass(frozen=True)
class SpokenToken:
    """One classified word (or multi-word animal name) from an utterance"""
    raw: str
    normalized: str
    classification: str = INTRUSION
    mapped_id: Optional[str] = None
    timestamp: float = field(default_factory=time.time)
    confidence: Optional[float] = None

    def tagged(self, classification: str, mapped_id: Optional[str] = None) -> 'SpokenToken':
        """Copy of this token with a classification (and identity) applied"""
        if classification not in CLASSIFICATIONS:
            available = ', '.join(CLASSIFICATIONS)
            raise ValueError(f"Unknown classification: '{classification}'. Available: {available}")
        return replace(self, classification=classification, mapped_id=mapped_id)


def normalize(text: str) -> str:
    """
    Canonical form used for every comparison.

    Lower-cases before decomposing so that lower-casing cannot reintroduce
    a combining mark (e.g. 'İ'); this keeps normalize() idempotent.
    """
    if not text:
        return ''
    decomposed = unicodedata.normalize('NFD', text.lower())
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.strip()


def tokenize(utterance: str) -> List[str]:
    """Split an utterance into words, left to right"""
    if not utterance:
        return []
    return [w.strip() for w in _SPLIT_RE.split(utterance) if w.strip()]


def make_token(raw: str, confidence: Optional[float] = None) -> SpokenToken:
    """Unclassified record for a raw word or phrase"""
    return SpokenToken(raw=raw, normalized=normalize(raw), confidence=confidence)
