from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from membership_engine.app.api.models.classification import ClassificationResponse, PlanPayload
from membership_engine.app.factory import create_classification_service
from membership_engine.application.errors import DateParseError, SectionCatalogError
from membership_engine.domain.classification.model import PlanDescriptor
from membership_engine.observability.logging import configure_logging
from membership_engine.settings import get_settings


def load_plan(path: str) -> PlanDescriptor:
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)
    return PlanPayload.model_validate(data).to_domain()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Membership change classification")
    subparsers = parser.add_subparsers(dest="command")

    classify_parser = subparsers.add_parser("classify", help="Classify candidate plans against a membership")
    classify_parser.add_argument("--current", required=True, help="JSON file with the current membership")
    classify_parser.add_argument(
        "--candidate", required=True, action="append", dest="candidates", help="JSON file with a candidate plan"
    )
    classify_parser.add_argument("--end-date", dest="current_end_date", help="Current membership end date")
    classify_parser.add_argument("--section-catalog", dest="section_catalog", help="Section -> groups JSON file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    # stdout carries the JSON results
    configure_logging(stream=sys.stderr)
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command != "classify":
        parser.print_help()
        return 0

    try:
        current = load_plan(args.current)
        candidates = [load_plan(path) for path in args.candidates]
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        print(f"error: cannot read plan: {e}", file=sys.stderr)
        return 2

    service = create_classification_service(get_settings(), catalog_path=args.section_catalog)
    try:
        results = service.classify_many(current, candidates, args.current_end_date)
    except (DateParseError, SectionCatalogError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for result in results:
        print(json.dumps(ClassificationResponse.from_result(result).model_dump(exclude_none=True)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
