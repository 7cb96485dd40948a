"""
Transcriber Package

Handles recognizer events -> final utterances for scoring.
"""

from .core import FinalTranscriptGate, TranscriptEvent

__all__ = ['FinalTranscriptGate', 'TranscriptEvent']
