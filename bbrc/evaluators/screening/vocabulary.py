"""
BBRC Vocabulary - Build-time lookup tables

Handles:
- Target table: canonical form (primary, synonyms, plurals) -> target identity
- Distractor form set
- Recognition vocabulary: targets + shown foils tagged with is_target
- Animal dictionary with multi-word names
- Loading a replacement battery configuration from JSON

Tables are built once and are read-only afterwards.
"""

import json
import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from ...config import ScoringConfig
from .components import normalize
from .taxonomies import (
    ANIMAL_LIST, DISTRACTOR_WORDS, RECOGNITION_ITEMS,
    TARGET_SYNONYMS, TARGET_WORDS
)

_SPACES_RE = re.compile(r'\s+')


class VocabularyConflictError(ValueError):
    """Two identities registered the same canonical form"""

    def __init__(self, table: str, form: str, existing: str, incoming: str):
        self.table = table
        self.form = form
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"{table}: form '{form}' already maps to '{existing}', cannot map it to '{incoming}'"
        )


@dataclass(frozen=True)
class TargetEntry:
    identity: str
    canonical: str


@dataclass(frozen=True)
class RecognitionEntry:
    identity: str
    is_target: bool
    canonical: str


def animal_identity(name: str) -> str:
    """Canonical animal identity: hyphens and runs of spaces fold to one space"""
    return _SPACES_RE.sub(' ', normalize(name).replace('-', ' ')).strip()


class AnimalDictionary:
    """Canonical animal names, single- or multi-word"""

    def __init__(self, forms: Mapping[str, str]):
        self._forms = MappingProxyType(dict(forms))
        self.max_words = max((len(i.split()) for i in self._forms.values()), default=1)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> 'AnimalDictionary':
        forms: Dict[str, str] = {}
        for name in names:
            identity = animal_identity(name)
            if not identity:
                continue
            forms[normalize(name)] = identity
            forms[identity] = identity
        return cls(forms)

    def lookup(self, phrase: str) -> Optional[str]:
        """Identity for a spoken phrase, or None"""
        key = normalize(phrase)
        return self._forms.get(key) or self._forms.get(animal_identity(key))

    def identity_of(self, name: str) -> str:
        """Identity used for already-produced bookkeeping, known or not"""
        return self.lookup(name) or animal_identity(name)

    def __contains__(self, phrase: str) -> bool:
        return self.lookup(phrase) is not None

    def __len__(self) -> int:
        return len(set(self._forms.values()))


@dataclass(frozen=True)
class Vocabulary:
    """Immutable lookup tables for one battery configuration"""
    targets: Tuple[str, ...]
    target_forms: Mapping[str, TargetEntry]
    distractor_forms: FrozenSet[str]
    recognition: Mapping[str, RecognitionEntry]
    animals: AnimalDictionary

    def resolve_target(self, text: str) -> Optional[TargetEntry]:
        return self.target_forms.get(normalize(text))

    def seen_key(self, identity: str) -> str:
        """Key an already-credited identity is deduplicated under"""
        entry = self.resolve_target(identity)
        return entry.canonical if entry else normalize(identity)


def _register(table: Dict, form: str, entry, policy: str, table_name: str) -> None:
    if not form:
        return
    existing = table.get(form)
    if existing is not None and existing.identity != entry.identity and policy == 'reject':
        raise VocabularyConflictError(table_name, form, existing.identity, entry.identity)
    table[form] = entry


def _is_target_item(item: Mapping) -> bool:
    return bool(item.get('is_target', item.get('isTarget', False)))


def build_vocabulary(
    targets: Optional[List[str]] = None,
    synonyms: Optional[Mapping[str, List[str]]] = None,
    distractors: Optional[List[str]] = None,
    recognition_items: Optional[List[Mapping]] = None,
    animals: Optional[Iterable[str]] = None,
    config: Optional[ScoringConfig] = None
) -> Vocabulary:
    """
    Build every lookup table from a battery configuration.

    Args:
        targets: Ordered target identities (default: TARGET_WORDS)
        synonyms: identity -> spoken synonyms (default: TARGET_SYNONYMS)
        distractors: Foils never shown (default: DISTRACTOR_WORDS)
        recognition_items: Recognition sheet entries with 'id', 'is_target'
            and optional 'synonyms' (default: RECOGNITION_ITEMS)
        animals: Animal names for fluency (default: ANIMAL_LIST)
        config: ScoringConfig (collision policy, plural suffixes)

    Returns:
        Vocabulary

    Raises:
        VocabularyConflictError: under the 'reject' policy, when two
            identities claim the same canonical form
    """
    config = config or ScoringConfig()
    policy = config.collision_policy

    targets = TARGET_WORDS if targets is None else targets
    synonyms = TARGET_SYNONYMS if synonyms is None else synonyms
    distractors = DISTRACTOR_WORDS if distractors is None else distractors
    recognition_items = RECOGNITION_ITEMS if recognition_items is None else recognition_items
    animals = ANIMAL_LIST if animals is None else animals

    # Target table: explicit forms first
    target_forms: Dict[str, TargetEntry] = {}
    entries: List[TargetEntry] = []
    for target in targets:
        entry = TargetEntry(identity=target, canonical=normalize(target))
        entries.append(entry)
        _register(target_forms, entry.canonical, entry, policy, 'target')
        for syn in synonyms.get(target, []):
            _register(target_forms, normalize(syn), entry, policy, 'target')

    # Plurals never displace an explicit form
    for entry in entries:
        for suffix in config.plural_suffixes:
            target_forms.setdefault(entry.canonical + suffix, entry)

    distractor_forms = frozenset(f for f in (normalize(d) for d in distractors) if f)

    # Recognition vocabulary: sheet targets resolve to target identities
    recognition: Dict[str, RecognitionEntry] = {}
    for item in recognition_items:
        key = normalize(item['id'])
        if _is_target_item(item):
            resolved = target_forms.get(key)
            entry = RecognitionEntry(
                identity=resolved.identity if resolved else item['id'],
                is_target=True,
                canonical=resolved.canonical if resolved else key
            )
        else:
            entry = RecognitionEntry(identity=item['id'], is_target=False, canonical=key)
        _register(recognition, key, entry, policy, 'recognition')
        for syn in item.get('synonyms') or []:
            _register(recognition, normalize(syn), entry, policy, 'recognition')

    return Vocabulary(
        targets=tuple(targets),
        target_forms=MappingProxyType(target_forms),
        distractor_forms=distractor_forms,
        recognition=MappingProxyType(recognition),
        animals=AnimalDictionary.from_names(animals)
    )


def load_vocabulary_config(path: str, config: Optional[ScoringConfig] = None) -> Vocabulary:
    """Build a vocabulary from a JSON battery configuration; missing keys use the built-ins"""

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    vocab = build_vocabulary(
        targets=data.get('targets'),
        synonyms=data.get('synonyms'),
        distractors=data.get('distractors'),
        recognition_items=data.get('recognition_items'),
        animals=data.get('animals'),
        config=config
    )

    print(f"✓ Loaded vocabulary: {len(vocab.targets)} targets, "
          f"{len(vocab.distractor_forms)} distractors, {len(vocab.animals)} animals")
    return vocab


@lru_cache(maxsize=None)
def default_vocabulary() -> Vocabulary:
    """Vocabulary for the built-in battery, built on first use"""
    return build_vocabulary()
