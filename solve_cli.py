#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
DocSolver command line - answer a question or a worksheet file locally.

Usage: python3 solve_cli.py (--question TEXT | --file PATH) [options]

Examples:
  # Quick question (brief profile, answer printed)
  python3 solve_cli.py --question "What is the derivative of x^2?"

  # Worksheet PDF (detailed profile, solution PDF written to ./solutions)
  python3 solve_cli.py --file homework.pdf --output-dir solutions

  # Photo of a worksheet with Tesseract instead of PaddleOCR
  python3 solve_cli.py --file page1.jpg --ocr-backend tesseract
"""

import argparse
import asyncio
import mimetypes
import sys
from pathlib import Path

from config.settings import settings
from docsolver import (
    AnswerPipeline,
    Attachment,
    ByteSource,
    InboundRequest,
    LocalDirectoryDestination,
    RunStatus,
)


def build_request(question: str = None, file_path: str = None) -> InboundRequest:
    """InboundRequest for a question string or a local file"""
    if not file_path:
        return InboundRequest.from_text(question)

    path = Path(file_path)
    content_type, _ = mimetypes.guess_type(path.name)

    async def _read() -> bytes:
        return path.read_bytes()

    return InboundRequest.from_attachment(Attachment(
        content_type=content_type or "application/octet-stream",
        declared_kind=path.suffix.lstrip(".").lower() or None,
        byte_source=ByteSource(_read),
        display_name=path.name,
    ))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Answer a question or solve a worksheet (PDF or image)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 solve_cli.py --question "Capital of France?"
  python3 solve_cli.py --file worksheet.pdf --mode both
  python3 solve_cli.py --file scan.png --provider anthropic

API keys are read from the environment or .env (OPENAI_API_KEY, ANTHROPIC_API_KEY).
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument('--question', '-q', help='Question text')
    source.add_argument('--file', '-f', help='PDF or image file to solve')

    parser.add_argument('--output-dir', '-o', default=None,
                        help=f'Where solution PDFs are written (default: {settings.output_dir})')
    parser.add_argument('--provider', choices=['openai', 'anthropic'], default=None,
                        help=f'AI provider (default: {settings.provider})')
    parser.add_argument('--ocr-backend', choices=['paddle', 'tesseract'], default=None,
                        help=f'OCR engine for images (default: {settings.ocr_backend})')
    parser.add_argument('--mode', choices=['document', 'chunked', 'both'], default=None,
                        help=f'How file answers are delivered (default: {settings.file_answer_mode})')
    parser.add_argument('--ocr-fallback', action='store_true',
                        help='OCR scanned PDFs that have no text layer')
    parser.add_argument('--show-config', action='store_true',
                        help='Print the effective configuration and exit')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.provider:
        overrides["provider"] = args.provider
    if args.ocr_backend:
        overrides["ocr_backend"] = args.ocr_backend
    if args.mode:
        overrides["file_answer_mode"] = args.mode
    if args.ocr_fallback:
        overrides["structural_ocr_fallback"] = True
    run_settings = settings.model_copy(update=overrides)

    if args.show_config:
        run_settings.print_config()
        return 0

    if args.file and not Path(args.file).is_file():
        print(f"❌ File not found: {args.file}", file=sys.stderr)
        return 2

    try:
        pipeline = AnswerPipeline.from_settings(run_settings)
    except ValueError as e:
        # missing API key or unknown provider
        print(f"❌ {e}", file=sys.stderr)
        return 2

    destination = LocalDirectoryDestination(Path(args.output_dir or run_settings.output_dir))
    request = build_request(question=args.question, file_path=args.file)

    outcome = asyncio.run(pipeline.run(request, destination))
    return 1 if outcome.status == RunStatus.FAILED else 0


if __name__ == "__main__":
    sys.exit(main())
