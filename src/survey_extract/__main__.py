"""
Command line entry point for the survey extraction system.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from survey_extract.agents.sarah import explain, validate_explanation
from survey_extract.depot.service import DepotTranscriptionService, load_depot_config
from survey_extract.errors import SurveyExtractError
from survey_extract.models.explanation import Audience, Tone
from survey_extract.rocky.engine import RockyEngine
from survey_extract.utils.config import load_config

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def run_process(args, config) -> None:
    result = RockyEngine().process(args.session_id, _read_text(args.file), args.language)
    _print_json(result.to_json_dict())


def run_explain(args, config) -> None:
    result = RockyEngine().process(args.session_id, _read_text(args.file), args.language)
    explanation = explain(result.facts, args.audience, args.tone or config["default_tone"])
    validation = validate_explanation(explanation, result.facts)
    _print_json({
        "explanation": explanation.to_json_dict(),
        "validation": validation.to_json_dict(),
    })


def run_depot(args, config) -> None:
    with open(args.sections, "r", encoding="utf-8") as f:
        raw_sections = json.load(f)
    transcript = _read_text(args.transcript) if args.transcript else ""

    service = DepotTranscriptionService(load_depot_config(config["core_path"]))
    result = service.structure_transcript(transcript, raw_sections)
    _print_json(result.model_dump(mode="json"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="survey_extract",
        description="Deterministic fact extraction and explanation for heating survey notes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m survey_extract process notes.txt --session-id 42
  python -m survey_extract explain notes.txt --audience customer --tone friendly
  python -m survey_extract depot sections.json --transcript notes.txt
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    process = subparsers.add_parser("process", help="Extract facts from a transcript")
    explain_cmd = subparsers.add_parser("explain", help="Extract facts and explain them")
    for sub in (process, explain_cmd):
        sub.add_argument("file", help="Transcript text file")
        sub.add_argument("--session-id", default="cli", help="Session identifier")
        sub.add_argument("--language", help="Language tag of the transcript (e.g. en-GB)")
    process.set_defaults(handler=run_process)

    explain_cmd.add_argument(
        "--audience", required=True, help=", ".join(a.value for a in Audience)
    )
    explain_cmd.add_argument("--tone", help=", ".join(t.value for t in Tone))
    explain_cmd.set_defaults(handler=run_explain)

    depot = subparsers.add_parser("depot", help="Structure AI-proposed Depot sections")
    depot.add_argument("sections", help="JSON file mapping section names to text")
    depot.add_argument("--transcript", help="Transcript text file the sections came from")
    depot.set_defaults(handler=run_depot)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = load_config()

    logging.basicConfig(
        level=config["log_level"],
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        args.handler(args, config)
    except (SurveyExtractError, OSError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
