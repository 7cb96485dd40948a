"""
Transcription boundary - continuous speech events in, final utterances out

The speech-to-text engine emits interim and final transcripts. Interim
text is display-only; only final segments are forwarded to the scorers
so an utterance is never scored twice while it is being refined.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TranscriptEvent:
    """One event from the recognizer"""
    text: str
    is_final: bool
    confidence: Optional[float] = None


class FinalTranscriptGate:
    """Forwards final, non-blank transcripts; tracks the live text for display"""

    def __init__(self, min_confidence: Optional[float] = None):
        self.min_confidence = min_confidence
        self.live_text = ''
        self.needs_repeat = False
        self.forwarded = 0

    def push(self, event: TranscriptEvent) -> Optional[str]:
        """
        Feed one recognizer event.

        Returns:
            The utterance text to score, or None when the event is interim,
            blank, or below min_confidence (then needs_repeat is set so the
            caller can ask the patient to repeat)
        """
        self.live_text = event.text or ''
        if not event.is_final:
            return None

        text = (event.text or '').strip()
        if not text:
            return None

        if (
            self.min_confidence is not None
            and event.confidence is not None
            and event.confidence < self.min_confidence
        ):
            self.needs_repeat = True
            return None

        self.needs_repeat = False
        self.forwarded += 1
        return text

    def clear(self) -> None:
        """Start over for a new phase"""
        self.live_text = ''
        self.needs_repeat = False
        self.forwarded = 0
