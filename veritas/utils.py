"""
Utility functions for the Veritas news credibility analyzer
"""

import logging
import math
from pathlib import Path
from typing import Optional

import pandas as pd
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import LOGGING_CONFIG

# Initialize rich console for pretty printing
console = Console()


def setup_logging(name: str = "veritas", level: Optional[str] = None) -> logging.Logger:
    """
    Setup logging configuration

    Args:
        name: Logger name
        level: Logging level (defaults to LOGGING_CONFIG)

    Returns:
        Configured logger instance
    """
    level = (level or LOGGING_CONFIG["level"]).upper()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level))

    # Remove existing handlers
    logger.handlers.clear()

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(getattr(logging, level))

    # Formatter
    formatter = logging.Formatter(
        LOGGING_CONFIG["format"],
        datefmt=LOGGING_CONFIG["date_format"]
    )
    ch.setFormatter(formatter)

    logger.addHandler(ch)
    return logger


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives"""
    return int(math.floor(value + 0.5))


def display_result(result, title: str = "Analysis Result"):
    """
    Display an analysis result as a verdict panel plus feature table

    Args:
        result: AnalysisResult to render
        title: Panel title
    """
    label = result.classification.value
    color = "red" if result.is_fake else "green"

    console.print(Panel(
        f"[bold {color}]{label}[/bold {color}]  "
        f"confidence [bold]{result.confidence_score}%[/bold]\n\n"
        f"{result.explanation}",
        title=title,
        border_style=color
    ))

    if result.linguistic_patterns:
        console.print("[bold cyan]Detected Patterns:[/bold cyan]")
        for pattern in result.linguistic_patterns:
            console.print(f"  - {pattern}")

    table = Table(title="Top Features", show_header=True, header_style="bold magenta")
    table.add_column("Keyword", style="cyan", no_wrap=True)
    table.add_column("Impact", style="green")

    for feature in result.top_features:
        table.add_row(feature.word, str(feature.impact))

    console.print(table)


def display_summary(results: pd.DataFrame, title: str = "Batch Summary"):
    """
    Display verdict counts and mean confidence of a batch run

    Args:
        results: DataFrame produced by NewsDetector.analyze_frame
        title: Table title
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Verdict", style="cyan", no_wrap=True)
    table.add_column("Articles", style="green")
    table.add_column("Mean Confidence", style="green")

    analyzed = results.dropna(subset=["classification"])
    for label, group in analyzed.groupby("classification"):
        table.add_row(str(label), str(len(group)), f"{group['confidence_score'].mean():.1f}")

    skipped = len(results) - len(analyzed)
    if skipped:
        table.add_row("skipped", str(skipped), "-")

    console.print(table)


def save_results(results: pd.DataFrame, output_path: Path):
    """
    Save batch results to CSV file

    Args:
        results: DataFrame of analysis results
        output_path: Path to save results
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    results.to_csv(output_path, index=False)
    console.print(f"[green]✓[/green] Results saved to {output_path}")
