"""
BBRC Classifier - Tag a single spoken word

Target table lookup always wins; recognition vocabulary and distractor
forms are consulted only when the word is not a target form.
"""

from typing import Optional, Set

from .components import (
    DISTRACTOR, INTRUSION, REPEAT, TARGET,
    SpokenToken, make_token
)
from .vocabulary import Vocabulary


def classify_token(
    token: str,
    seen: Set[str],
    vocabulary: Vocabulary,
    allow_distractors: bool = False,
    confidence: Optional[float] = None
) -> SpokenToken:
    """
    Classify one word against the vocabulary and the already-seen set.

    Args:
        token: Raw word as transcribed
        seen: Canonical primaries already credited in this phase. A newly
            credited target is added to it.
        vocabulary: Lookup tables
        allow_distractors: True during recognition only
        confidence: Optional recognizer confidence carried onto the record

    Returns:
        SpokenToken tagged target, repeat, distractor or intrusion
    """
    base = make_token(token, confidence)
    normalized = base.normalized

    target = vocabulary.target_forms.get(normalized)
    if target:
        if target.canonical in seen:
            return base.tagged(REPEAT, target.identity)
        seen.add(target.canonical)
        return base.tagged(TARGET, target.identity)

    if allow_distractors:
        entry = vocabulary.recognition.get(normalized)
        if entry:
            if not entry.is_target:
                return base.tagged(DISTRACTOR, entry.identity)
            if entry.canonical in seen:
                return base.tagged(REPEAT, entry.identity)
            seen.add(entry.canonical)
            return base.tagged(TARGET, entry.identity)
        if normalized in vocabulary.distractor_forms:
            return base.tagged(DISTRACTOR, normalized)

    # A foil named during recall is never creditable
    if normalized in vocabulary.distractor_forms:
        return base.tagged(INTRUSION, normalized)

    return base
