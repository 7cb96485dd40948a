"""
Scoring configuration

Tunables shared by the vocabulary build, the phase scorers and the
clock-drawing evaluator.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

COLLISION_POLICIES = ('last_wins', 'reject')


@dataclass(frozen=True)
class ScoringConfig:
    """
    Tunables for vocabulary construction and scoring.

    Notes:
    - collision_policy decides what happens when two identities register
      the same canonical form: 'last_wins' overwrites, 'reject' raises
    - plural forms derived from plural_suffixes never overwrite an
      explicitly registered form
    - max_ngram caps the animal-name window tried during fluency; None
      follows the longest name in the dictionary
    """

    # Vocabulary build
    collision_policy: str = 'last_wins'
    plural_suffixes: Tuple[str, ...] = ('s', 'es')

    # Fluency
    max_ngram: Optional[int] = None

    # Clock drawing (Claude vision)
    clock_model: str = field(
        default_factory=lambda: os.environ.get('BBRC_CLOCK_MODEL', 'claude-sonnet-4-20250514')
    )
    clock_max_tokens: int = 1024
    clock_max_image_side: int = 1568

    def __post_init__(self):
        if self.collision_policy not in COLLISION_POLICIES:
            available = ', '.join(COLLISION_POLICIES)
            raise ValueError(f"Unknown collision policy: '{self.collision_policy}'. Available: {available}")
        if self.max_ngram is not None and self.max_ngram < 1:
            raise ValueError(f"max_ngram must be >= 1, got {self.max_ngram}")
