import argparse
import asyncio
import json
import mimetypes
import sys
from pathlib import Path

from health_insight.analysis.analyzer import build_analyzer
from health_insight.analysis.exceptions import AnalysisError
from health_insight.analysis.models import AnalysisRequest
from health_insight.config.settings import Settings
from health_insight.logging.logger import Log
from health_insight.policy.models import CallerRole


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze a medical report.")
    parser.add_argument("--text", help="report text or additional notes")
    parser.add_argument("--file", type=Path, help="report image or PDF")
    parser.add_argument(
        "--role",
        type=CallerRole.parse,
        default=CallerRole.USER,
        help="caller role: USER, HC or ADMIN",
    )
    parser.add_argument("--json", action="store_true", help="print the full JSON response")
    args = parser.parse_args(argv)
    if args.file is not None and not args.file.is_file():
        parser.error(f"file not found: {args.file}")
    return args


def build_request(args: argparse.Namespace) -> AnalysisRequest:
    file_bytes = None
    media_type = None
    if args.file is not None:
        file_bytes = args.file.read_bytes()
        media_type, _ = mimetypes.guess_type(args.file.name)
    return AnalysisRequest(
        caller_role=args.role,
        raw_text=args.text,
        file_bytes=file_bytes,
        file_media_type=media_type,
    )


async def run(args: argparse.Namespace, settings: Settings) -> int:
    try:
        analyzer = build_analyzer(settings)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    try:
        response = await analyzer.analyze(build_request(args))
    except AnalysisError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(response.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(response.text)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build analyzer -> analyze one report."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
