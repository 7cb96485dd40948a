#!/usr/bin/env python3
"""
Evaluate CLI - replay a recorded screening session

Feeds recorded recognizer events for each phase through the scoring
engine and prints the resulting scores and cutoff interpretation.

Usage:
    python evaluate.py --session session.json
    python evaluate.py --session session.json --education HIGH --clock clock.png
    python evaluate.py --session session.json --vocabulary battery.json

Session file:
    {
      "NAMING": ["sapato casa pente", {"text": "chave", "is_final": true}],
      "VERBAL_FLUENCY": [{"text": "gato", "is_final": false}, {"text": "gato cachorro", "is_final": true}]
    }
"""

import argparse
import json
import sys
from pathlib import Path

from bbrc import TranscriptEvent
from bbrc.evaluators import get_evaluator, list_evaluators
from bbrc.evaluators.screening import (
    EducationLevel, Phase, analyze_clock_drawing,
    generate_feedback, load_vocabulary_config
)
from bbrc.evaluators.screening.evaluator import PHASE_ORDER


def _to_event(item) -> TranscriptEvent:
    if isinstance(item, str):
        return TranscriptEvent(text=item, is_final=True)
    return TranscriptEvent(
        text=item.get('text', ''),
        is_final=item.get('is_final', True),
        confidence=item.get('confidence')
    )


def main():
    parser = argparse.ArgumentParser(
        description='Replay a recorded screening session through the scoring engine',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available evaluators: {', '.join(list_evaluators())}

Examples:
    # Basic replay
    python evaluate.py --session session.json

    # Fluency cutoff for >= 8 years of schooling, with clock drawing
    python evaluate.py --session session.json --education HIGH --clock clock.png

    # Custom battery configuration
    python evaluate.py --session session.json --vocabulary battery.json
        """
    )

    parser.add_argument(
        '--session',
        required=True,
        help='Path to session JSON file (phase -> utterances)'
    )
    parser.add_argument(
        '--evaluator',
        default='screening',
        choices=list_evaluators(),
        help='Evaluator to use (default: screening)'
    )
    parser.add_argument(
        '--education',
        default='LOW',
        choices=[e.value for e in EducationLevel],
        help='Education level for the fluency cutoff (default: LOW)'
    )
    parser.add_argument(
        '--vocabulary',
        help='Path to battery configuration JSON (optional)'
    )
    parser.add_argument(
        '--clock',
        help='Path to clock drawing image (optional)'
    )
    parser.add_argument(
        '--api-key',
        help='Anthropic API key (optional, can also use ANTHROPIC_API_KEY env var)'
    )

    args = parser.parse_args()

    session_path = Path(args.session)
    if not session_path.exists():
        print(f"ERROR: Session file not found: {session_path}")
        sys.exit(1)

    with open(session_path, 'r', encoding='utf-8') as f:
        session_data = json.load(f)

    vocabulary = None
    if args.vocabulary:
        if not Path(args.vocabulary).exists():
            print(f"ERROR: Vocabulary file not found: {args.vocabulary}")
            sys.exit(1)
        vocabulary = load_vocabulary_config(args.vocabulary)

    EvaluatorClass = get_evaluator(args.evaluator)
    session = EvaluatorClass(vocabulary=vocabulary)

    print(f"\n{'='*60}")
    print(f"REPLAYING SESSION: {session_path.name}")
    print(f"{'='*60}")

    for phase in PHASE_ORDER:
        if phase == Phase.CLOCK_DRAWING:
            if args.clock:
                if not Path(args.clock).exists():
                    print(f"ERROR: Clock image not found: {args.clock}")
                    sys.exit(1)
                session.start_phase(phase)
                result = analyze_clock_drawing(args.clock, api_key=args.api_key)
                session.record_clock_result(result)
                print(f"\n{phase.value}: {result.score}/5")
                print(f"  {result.reasoning}")
            continue

        utterances = session_data.get(phase.value)
        if utterances is None:
            continue

        session.start_phase(phase)
        for item in utterances:
            session.handle_transcript(_to_event(item))

        capture = session.capture
        print(f"\n{phase.value}: {session.current_score}")
        print(f"  Found: {', '.join(session.found_words) or '-'}")
        if capture.repeats:
            print(f"  Repeats: {', '.join(t.raw for t in capture.repeats)}")
        if capture.intrusions:
            print(f"  Intrusions: {', '.join(t.raw for t in capture.intrusions)}")
        if capture.distractor_hits:
            print(f"  Distractors: {', '.join(t.raw for t in capture.distractor_hits)}")

    feedback = generate_feedback(session.scores, args.education)

    print(f"\n{'='*60}")
    print("RESULTS")
    print(f"{'='*60}")
    for key, line in feedback.items():
        if key != 'summary':
            print(f"  {line}")
    print(f"\n{feedback['summary']}")


if __name__ == "__main__":
    main()
