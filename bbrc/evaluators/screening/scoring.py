"""
BBRC Scoring - Per-utterance phase scorers

Three entry points:
- score_recall: naming, incidental, immediate, learning and delayed memory
- score_recognition: recognition sheet (targets vs shown foils)
- score_fluency: animal naming with multi-word names

Each scorer is a pure function of (utterance, already-credited list);
merging the result into session state is the caller's job.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple, Union

from .classifier import classify_token
from .components import (
    DISTRACTOR, INTRUSION, REPEAT, TARGET,
    SpokenToken, make_token, tokenize
)
from .vocabulary import AnimalDictionary, Vocabulary, default_vocabulary


@dataclass
class RecallScore:
    tokens: List[SpokenToken] = field(default_factory=list)
    hits: List[str] = field(default_factory=list)
    intrusions: List[SpokenToken] = field(default_factory=list)
    repeats: List[SpokenToken] = field(default_factory=list)


@dataclass
class RecognitionScore:
    tokens: List[SpokenToken] = field(default_factory=list)
    hits: List[str] = field(default_factory=list)
    distractor_hits: List[SpokenToken] = field(default_factory=list)
    intrusions: List[SpokenToken] = field(default_factory=list)
    repeats: List[SpokenToken] = field(default_factory=list)


@dataclass
class FluencyScore:
    tokens: List[SpokenToken] = field(default_factory=list)
    animals: List[str] = field(default_factory=list)
    invalid: List[SpokenToken] = field(default_factory=list)
    repeats: List[SpokenToken] = field(default_factory=list)


def _credited(already: Optional[Iterable[str]]) -> List[str]:
    """Usable entries of an already-credited list; anything malformed counts as nothing seen"""
    if not isinstance(already, (list, tuple, set, frozenset)):
        return []
    return [identity for identity in already if isinstance(identity, str) and identity]


def _seed_seen(already_hit: Optional[Iterable[str]], vocabulary: Vocabulary) -> Set[str]:
    return {vocabulary.seen_key(identity) for identity in _credited(already_hit)}


def _first_hits(tokens: List[SpokenToken]) -> List[str]:
    hits: List[str] = []
    for t in tokens:
        if t.classification == TARGET and t.mapped_id not in hits:
            hits.append(t.mapped_id)
    return hits


def _classify_all(
    transcript: str,
    already_hit: Optional[Iterable[str]],
    vocabulary: Optional[Vocabulary],
    allow_distractors: bool,
    confidence: Optional[float]
) -> List[SpokenToken]:
    vocabulary = vocabulary or default_vocabulary()
    seen = _seed_seen(already_hit, vocabulary)
    return [
        classify_token(word, seen, vocabulary, allow_distractors, confidence)
        for word in tokenize(transcript)
    ]


def score_recall(
    transcript: str,
    already_hit: Optional[Iterable[str]] = None,
    vocabulary: Optional[Vocabulary] = None,
    confidence: Optional[float] = None
) -> RecallScore:
    """
    Score one final utterance from a naming or memory phase.

    Args:
        transcript: Final transcript text
        already_hit: Target identities already credited in this phase
        vocabulary: Lookup tables (default: built-in battery)
        confidence: Optional recognizer confidence for the utterance

    Returns:
        RecallScore with hits in first-occurrence order
    """
    tokens = _classify_all(transcript, already_hit, vocabulary, False, confidence)
    return RecallScore(
        tokens=tokens,
        hits=_first_hits(tokens),
        intrusions=[t for t in tokens if t.classification == INTRUSION],
        repeats=[t for t in tokens if t.classification == REPEAT]
    )


def score_recognition(
    transcript: str,
    already_hit: Optional[Iterable[str]] = None,
    vocabulary: Optional[Vocabulary] = None,
    confidence: Optional[float] = None
) -> RecognitionScore:
    """Score one final utterance from the recognition phase"""
    tokens = _classify_all(transcript, already_hit, vocabulary, True, confidence)
    return RecognitionScore(
        tokens=tokens,
        hits=_first_hits(tokens),
        distractor_hits=[t for t in tokens if t.classification == DISTRACTOR],
        intrusions=[t for t in tokens if t.classification == INTRUSION],
        repeats=[t for t in tokens if t.classification == REPEAT]
    )


def _match_spans(words: List[str], animals: AnimalDictionary, max_ngram: Optional[int]) -> List[Tuple[int, int, Optional[str]]]:
    """
    Greedy longest-first consumption of word positions.

    Returns (start, length, identity) spans sorted by start; unmatched
    single words carry identity None.
    """
    consumed = [False] * len(words)
    spans: List[Tuple[int, int, Optional[str]]] = []

    window = animals.max_words if max_ngram is None else min(max_ngram, animals.max_words)
    for n in range(window, 1, -1):
        for i in range(len(words) - n + 1):
            if any(consumed[i:i + n]):
                continue
            identity = animals.lookup(' '.join(words[i:i + n]))
            if identity:
                spans.append((i, n, identity))
                for j in range(i, i + n):
                    consumed[j] = True

    for i, word in enumerate(words):
        if not consumed[i]:
            spans.append((i, 1, animals.lookup(word)))

    return sorted(spans)


def score_fluency(
    transcript: str,
    animals: Union[AnimalDictionary, Iterable[str], None] = None,
    already_produced: Optional[Iterable[str]] = None,
    max_ngram: Optional[int] = None,
    confidence: Optional[float] = None
) -> FluencyScore:
    """
    Score one final utterance from the verbal fluency phase.

    The longest names are matched first, then shorter ones over the remaining
    words, then single words, so "mico leão dourado" is never split. Matches are
    reported left to right.

    Args:
        transcript: Final transcript text
        animals: AnimalDictionary, or any iterable of names (built on the
            fly), default: built-in animal list
        already_produced: Animal identities already credited in this phase
        max_ngram: Longest window tried (default: longest name in the dictionary)
        confidence: Optional recognizer confidence for the utterance

    Returns:
        FluencyScore with credited animals as canonical identities
    """
    if animals is None:
        animals = default_vocabulary().animals
    elif not isinstance(animals, AnimalDictionary):
        animals = AnimalDictionary.from_names(animals)

    seen = {animals.identity_of(a) for a in _credited(already_produced)}
    words = tokenize(transcript)
    result = FluencyScore()

    for start, length, identity in _match_spans(words, animals, max_ngram):
        base = make_token(' '.join(words[start:start + length]), confidence)
        if identity is None:
            token = base
            result.invalid.append(token)
        elif identity in seen:
            token = base.tagged(REPEAT, identity)
            result.repeats.append(token)
        else:
            seen.add(identity)
            token = base.tagged(TARGET, identity)
            result.animals.append(identity)
        result.tokens.append(token)

    return result
