"""
Command-line interface for yt-index.

Provides commands to segment a transcript, extract keywords from it, and
run the full pipeline for a YouTube video. Results are printed as JSON on
stdout; logs go to stderr.

Usage:
    yt-index segments transcript.txt
    yt-index keywords transcript.txt --preset programming --dynamic wikipedia
    cat transcript.txt | yt-index keywords --weight google_knowledge=1.2 --dynamic google_knowledge
    yt-index process https://www.youtube.com/watch?v=dQw4w9WgXcQ --max-segments 10
"""

import asyncio
import json
from typing import Any

import click

from yt_index.dictionaries.presets import DICTIONARY_CONFIGS
from yt_index.dictionaries.schemas import DYNAMIC_SOURCE_NAMES
from yt_index.observability.logging import setup_logging


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _parse_weights(values: tuple[str, ...]) -> dict[str, float]:
    weights: dict[str, float] = {}
    for value in values:
        source, sep, raw_weight = value.partition("=")
        if not sep or source not in DYNAMIC_SOURCE_NAMES:
            raise click.BadParameter(
                f"expected SOURCE=WEIGHT with SOURCE in {', '.join(DYNAMIC_SOURCE_NAMES)}",
                param_hint="--weight",
            )
        try:
            weight = float(raw_weight)
        except ValueError:
            raise click.BadParameter(f"invalid weight {raw_weight!r}", param_hint="--weight") from None
        if weight <= 0:
            raise click.BadParameter("weight must be positive", param_hint="--weight")
        weights[source] = weight
    return weights


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """yt-index - keyword and segment extraction for YouTube transcripts."""
    setup_logging("DEBUG" if debug else None)


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
def segments(file: Any) -> None:
    """Split a transcript (FILE or stdin) into segments."""
    from yt_index.segments.service import SegmentsService

    result = SegmentsService().extract(file.read())
    _echo_json({"segments": result, "total_segments": len(result)})


@main.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--preset",
    type=click.Choice(sorted(DICTIONARY_CONFIGS)),
    default=None,
    help="Preset dictionary configuration",
)
@click.option(
    "--dynamic",
    "dynamic_sources",
    multiple=True,
    type=click.Choice(DYNAMIC_SOURCE_NAMES),
    help="Dynamic dictionary source (repeatable)",
)
@click.option("--weight", "weights", multiple=True, help="Source weight as SOURCE=W (repeatable)")
@click.option("--no-ner", is_flag=True, help="Skip named-entity recognition")
def keywords(
    file: Any,
    preset: str | None,
    dynamic_sources: tuple[str, ...],
    weights: tuple[str, ...],
    no_ner: bool,
) -> None:
    """Extract keywords from a transcript (FILE or stdin)."""
    from yt_index.keywords.config import KeywordsConfig
    from yt_index.keywords.service import KeywordsService

    dynamic_weights = _parse_weights(weights)
    transcript = file.read()

    async def run() -> dict[str, Any]:
        service = KeywordsService(config=KeywordsConfig(enable_ner=not no_ner))
        result = await service.extract(
            transcript,
            dictionary_config=DICTIONARY_CONFIGS[preset] if preset else None,
            dynamic_sources=list(dynamic_sources) or None,
            dynamic_weights=dynamic_weights,
        )
        result.log_summary()
        return result.to_dict()

    _echo_json(asyncio.run(run()))


@main.command()
@click.argument("url")
@click.option("--no-keywords", is_flag=True, help="Skip keyword extraction")
@click.option("--no-segments", is_flag=True, help="Skip segment extraction")
@click.option("--max-segments", default=None, type=click.IntRange(min=0), help="Segments to return")
@click.option(
    "--dynamic",
    "dynamic_sources",
    multiple=True,
    type=click.Choice(DYNAMIC_SOURCE_NAMES),
    help="Dynamic dictionary source (repeatable)",
)
def process(
    url: str,
    no_keywords: bool,
    no_segments: bool,
    max_segments: int | None,
    dynamic_sources: tuple[str, ...],
) -> None:
    """Fetch a video's transcript and extract keywords and segments."""
    from yt_index.services.processing_service import VideoProcessingService
    from yt_index.transcripts.video import validate_video_url

    validation = validate_video_url(url)
    if not validation.is_valid:
        raise click.BadParameter(validation.error or "invalid URL", param_hint="URL")

    async def run() -> dict[str, Any]:
        service = VideoProcessingService()
        result = await service.process_video(
            url,
            include_keywords=not no_keywords,
            include_segments=not no_segments,
            max_segments=max_segments,
            dynamic_sources=list(dynamic_sources) or None,
        )
        return result.to_dict()

    data = asyncio.run(run())
    _echo_json(data)
    if not data["success"]:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
