"""
Command line interface for the Veritas analyzer
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .config import SAMPLE_ARTICLES
from .detector import BACKENDS, EmptyArticleError, NewsDetector
from .preprocess import TextPreprocessor
from .utils import console, display_result, display_summary, save_results, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="veritas",
        description="Classify news articles as REAL or FAKE and explain the verdict"
    )

    parser.add_argument('--title', type=str, default='',
                        help='Article headline')

    parser.add_argument('--text', type=str, default='',
                        help='Article body text')

    parser.add_argument('--text-file', type=Path,
                        help='Read the article body from a file')

    parser.add_argument('--sample', type=str, choices=sorted(SAMPLE_ARTICLES),
                        help='Analyze a built-in example article')

    parser.add_argument('--csv', type=Path,
                        help='Batch mode: CSV with title and text columns')

    parser.add_argument('--output', type=Path,
                        help='Where to write batch results (CSV)')

    parser.add_argument('--backend', type=str, default='auto', choices=BACKENDS,
                        help='auto tries Gemini and falls back to the heuristic model')

    parser.add_argument('--clean', action='store_true',
                        help='Strip HTML tags and URLs and collapse whitespace before analysis')

    parser.add_argument('--json', action='store_true',
                        help='Print the raw JSON result instead of tables')

    parser.add_argument('--log-level', type=str, default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')

    return parser


def run_batch(detector: NewsDetector, args: argparse.Namespace) -> int:
    df = pd.read_csv(args.csv)
    results = detector.analyze_frame(df)

    if args.output:
        save_results(results, args.output)

    if args.json:
        print(results.to_json(orient='records', indent=2))
    else:
        display_summary(results)
    return 0


def run_single(detector: NewsDetector, args: argparse.Namespace) -> int:
    title, text = args.title, args.text

    if args.sample:
        title = SAMPLE_ARTICLES[args.sample]["title"]
        text = SAMPLE_ARTICLES[args.sample]["text"]

    if args.text_file:
        text = args.text_file.read_text(encoding='utf-8')

    try:
        if args.json:
            result = detector.analyze(title, text)
        else:
            with console.status("Analyzing text..."):
                result = detector.analyze(title, text)
    except EmptyArticleError:
        console.print("[yellow]Please enter some text to analyze.[/yellow]")
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    display_result(result, title=f"Analysis Result ({result.source})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("veritas", args.log_level)
    preprocessor = TextPreprocessor.for_pasted_text() if args.clean else None
    detector = NewsDetector(backend=args.backend, preprocessor=preprocessor)

    if args.csv:
        return run_batch(detector, args)
    return run_single(detector, args)


if __name__ == "__main__":
    sys.exit(main())
