"""Stage 3: Output generation."""

import json
import sys
from typing import TextIO

from loguru import logger
import yaml

from ladderpy.core import Config
from ladderpy.processing.stages.data_models import LadderResult
from ladderpy.utils import Constants, write_output_file


def _limit(ladders: list[list[str]], max_ladders: int | None) -> list[list[str]]:
    return ladders[:max_ladders] if max_ladders else ladders


def results_to_records(
    results: list[LadderResult], max_ladders: int | None = None
) -> list[dict]:
    """Convert results to plain records for YAML/JSON serialization."""
    return [
        {
            "start": result.start,
            "end": result.end,
            "distance": result.distance,
            "ladders": _limit(result.ladders, max_ladders),
        }
        for result in results
    ]


def format_text(results: list[LadderResult], max_ladders: int | None = None) -> str:
    """Render results as human-readable text, one ladder per line."""
    lines = []
    for result in results:
        if not result.ladders:
            lines.append(f"{result.start} -> {result.end}: no ladder")
            continue
        count = len(result.ladders)
        noun = "ladder" if count == 1 else "ladders"
        lines.append(
            f"{result.start} -> {result.end}: {count} {noun} of length {result.distance + 1}"
        )
        for ladder in _limit(result.ladders, max_ladders):
            lines.append("  " + Constants.LADDER_SEPARATOR.join(ladder))
    return "\n".join(lines) + "\n"


def write_results_to_stream(
    results: list[LadderResult], stream: TextIO, output_format: str, max_ladders: int | None
) -> None:
    """Write results in the requested format to a stream (file or stdout)."""
    if output_format == "text":
        stream.write(format_text(results, max_ladders))
        return

    records = results_to_records(results, max_ladders)
    if output_format == "json":
        json.dump(records, stream, indent=2)
        stream.write("\n")
        return

    try:
        yaml.safe_dump(
            records,
            stream,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    except yaml.YAMLError as e:
        logger.error(f"✗ YAML serialization error: {e}")
        raise


def write_results(results: list[LadderResult], config: Config, verbose: bool = False) -> None:
    """Write results to config.output, or to stdout when no output path is set."""
    if not config.output:
        write_results_to_stream(results, sys.stdout, config.format, config.max_ladders)
        return

    write_output_file(
        config.output,
        lambda f: write_results_to_stream(results, f, config.format, config.max_ladders),
    )
    if verbose:
        logger.info(f"  Wrote {len(results)} results to {config.output}")
