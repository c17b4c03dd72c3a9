"""
Score one respondent's answers from a JSON file and print the diagnosis.

The file holds a JSON array of answer payloads:
    [{"questionId": "q-1", "score": 5, "category": "EXTRAVERSION", "isReverse": false}, ...]

Usage:
    python -m diagnosis_engine.scripts.score_answers answers.json
    python -m diagnosis_engine.scripts.score_answers answers.json --top 5
    python -m diagnosis_engine.scripts.score_answers answers.json --compact
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import structlog
from pydantic import TypeAdapter, ValidationError

from diagnosis_engine.config import settings
from diagnosis_engine.core.logging import configure_logging
from diagnosis_engine.models.answer import AnswerRecord
from diagnosis_engine.scoring.integration_service import calculate_diagnosis

logger = structlog.get_logger(__name__)

_ANSWERS_ADAPTER = TypeAdapter(List[AnswerRecord])


def load_answers(path: Path) -> List[AnswerRecord]:
    """Read and validate answer payloads; raises ValueError on bad input."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path} is not valid JSON: {e}") from e
    try:
        return _ANSWERS_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise ValueError(f"{path} contains invalid answers:\n{e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Score survey answers into a personality diagnosis")
    parser.add_argument("answers", type=Path, help="JSON file with an array of answers")
    parser.add_argument("--top", type=int, default=None, help="Only print the N best job matches")
    parser.add_argument("--compact", action="store_true", help="Single-line JSON output")
    args = parser.parse_args(argv)

    configure_logging(settings)

    try:
        answers = load_answers(args.answers)
    except (OSError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 2

    logger.info("answers_loaded", path=str(args.answers), answer_count=len(answers))

    result = calculate_diagnosis(answers).to_dict()
    if args.top is not None:
        result["potential_scores"] = result["potential_scores"][: max(0, args.top)]

    print(json.dumps(result, ensure_ascii=False, indent=None if args.compact else 2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
