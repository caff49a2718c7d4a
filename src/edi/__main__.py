"""
CLI entry point for the EDI ingestion pipeline.

Usage:
    # Single file: prints summary and diagnostics
    python -m src.edi data/raw/po_850.edi

    # Several files, parsed in parallel, JSON saved per document
    python -m src.edi data/raw/*.edi --workers 4 --json-out data/parsed

    # Enable envelope balance / nesting / SE01 count checks
    python -m src.edi data/raw/po_850.edi --strict

Exit status is 0 when every document validated, 1 otherwise.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.config import settings
from src.utils.reporting import ReportFormatter

from .pipeline import BatchItemResult, EdiIngestionPipeline, PipelineConfig
from .summary import format_diagnostics, summarize

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.edi",
        description="Tokenize and validate EDI X12 interchange files",
    )
    parser.add_argument(
        "files", nargs="+", type=Path,
        help="EDI files to parse (.edi, .x12, .txt)"
    )
    parser.add_argument(
        "--json-out", type=Path, default=None,
        help="Directory to save each ParsedDocument as JSON"
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Check envelope trailer balance, nesting order and SE01 counts"
    )
    parser.add_argument(
        "--any-extension", action="store_true",
        help="Accept files regardless of extension"
    )
    parser.add_argument(
        "--workers", type=int, default=None,
        help="Parallel workers for multiple files (default: auto, 1 = sequential)"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true",
        help="Only print the batch report"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Debug logging and per-file batch results"
    )
    return parser


def _json_output_names(files: List[Path]) -> List[str]:
    """
    One "<stem>_parsed.json" name per input, unique within the run

    Inputs sharing a stem (e.g. a/po.edi and b/po.edi) get a numeric
    suffix in input order: po_parsed.json, po_2_parsed.json, ...
    """
    names: List[str] = []
    used = set()
    for file in files:
        stem = candidate = Path(file).stem
        counter = 2
        while candidate in used:
            candidate = f"{stem}_{counter}"
            counter += 1
        if candidate != stem:
            logger.warning("Output name for %s collides with an earlier input; using %s", file, candidate)
        used.add(candidate)
        names.append(f"{candidate}_parsed.json")
    return names


def _print_result(result: BatchItemResult) -> None:
    print(f"\n--- {result.file} ---")
    if result.document is None:
        print(f"Could not parse: {result.error}")
        return
    print(summarize(result.document))
    print()
    print(format_diagnostics(result.document))


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    # pylint: disable=no-member
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.logging.level,
        format=settings.logging.format,
    )
    # pylint: enable=no-member

    config = PipelineConfig(
        strict_envelope=True if args.strict else None,
        check_extension=not args.any_extension,
    )
    pipeline = EdiIngestionPipeline(config)

    logger.info("Parsing %d file(s)", len(args.files))
    results = pipeline.parse_batch(args.files, max_workers=args.workers)

    output_names = _json_output_names(args.files) if args.json_out else [None] * len(results)
    for result, output_name in zip(results, output_names):
        if not args.quiet:
            _print_result(result)
        if args.json_out and result.document is not None:
            out_path = args.json_out / output_name
            result.document.save_to_json(out_path, overwrite=True)
            logger.info("Saved %s", out_path)

    report = ReportFormatter.build_batch_report(results)
    if len(results) > 1 or args.quiet:
        ReportFormatter.print_summary(report, verbose=args.verbose)

    return 0 if report['status'] in ('PASS', 'WARN') else 1


if __name__ == "__main__":
    sys.exit(main())
