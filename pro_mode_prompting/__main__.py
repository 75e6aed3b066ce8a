# pro_mode_prompting/__main__.py
import argparse
import random
import sys
from pathlib import Path

import orjson
from pydantic import ValidationError

from pro_mode_prompting import utils
from pro_mode_prompting.data.constants import PhotographyStyle
from pro_mode_prompting.services.prompt_assembler import build_pro_mode_prompt
from pro_mode_prompting.services.prompt_validator import validate_prompt
from pro_mode_prompting.utils.serialization import orjson_pretty

_PLACEHOLDER_REFERENCE = "reference-image"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pro_mode_prompting",
        description="Build and validate a Pro Mode prompt from a concept JSON file.",
    )
    parser.add_argument("concept", type=Path, help="Path to a concept JSON file.")
    parser.add_argument("--category", help="Content category, e.g. SEASONAL_CHRISTMAS.")
    parser.add_argument("--style", choices=[s.value for s in PhotographyStyle])
    parser.add_argument("--index", type=int, help="Position of the concept in its batch.")
    parser.add_argument("--request", help="The user's original request text.")
    parser.add_argument("--seed", type=int, help="Seed for brand rotation.")
    parser.add_argument(
        "--with-references",
        action="store_true",
        help="Use the identity-preserving introduction for reference images.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    log = utils.logging.setup_logger().bind(type="cli")
    args = _parse_args(argv)

    try:
        concept = orjson.loads(args.concept.read_bytes())
    except (OSError, orjson.JSONDecodeError):
        log.exception("Could not read concept file.", path=str(args.concept))
        return 1

    try:
        prompt = build_pro_mode_prompt(
            args.category,
            concept,
            reference_images=[_PLACEHOLDER_REFERENCE] if args.with_references else None,
            user_request=args.request,
            user_photography_style=args.style,
            item_index=args.index,
            rng=random.Random(args.seed) if args.seed is not None else None,
        )
    except ValidationError:
        log.exception("Concept file does not describe a concept.", path=str(args.concept))
        return 1

    report = validate_prompt(prompt.full_prompt, prompt.scene, args.request)
    sys.stdout.write(
        orjson_pretty(
            {
                **prompt.model_dump(by_alias=True, mode="json"),
                "warnings": report.warnings,
            }
        )
        + "\n"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
