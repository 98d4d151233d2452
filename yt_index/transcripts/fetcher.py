"""
Transcript fetching via yt-dlp.

yt-dlp is run with ``--skip-download --print-json`` to obtain video
metadata and subtitle track URLs; the first English subtitle track (manual
subtitles preferred over automatic captions) is downloaded with httpx and
converted to plain text.

Failures never raise out of fetch(); they produce a TranscriptResult with
success=False and a message.
"""

import asyncio
import json
import logging
from typing import Any

import httpx

from yt_index.http_client import HTTPClient
from yt_index.transcripts.config import TranscriptConfig
from yt_index.transcripts.schemas import TranscriptResult, VideoMetadata
from yt_index.transcripts.video import extract_video_id, watch_url
from yt_index.transcripts.vtt import parse_vtt

logger = logging.getLogger(__name__)


class TranscriptFetchError(Exception):
    """Raised when yt-dlp fails or returns unusable output."""


def create_summary(transcript: str, max_words: int = 200) -> str:
    """Return the first max_words words, with "..." appended if truncated."""
    words = transcript.split(" ")
    summary = " ".join(words[:max_words])
    return summary + "..." if len(words) > max_words else summary


class TranscriptFetcher:
    """
    Fetches transcripts for YouTube videos.

    Usage:
        fetcher = TranscriptFetcher()
        result = await fetcher.fetch("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        if result.success:
            print(result.transcript[:100])
    """

    def __init__(
        self,
        config: TranscriptConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize transcript fetcher.

        Args:
            config: Transcript configuration. If None, uses default config.
            http_client: Optional shared httpx client for subtitle/metadata requests.
        """
        self.config = config or TranscriptConfig()
        self._subtitles_http = HTTPClient(
            timeout=self.config.subtitle_timeout_seconds, http_client=http_client
        )
        self._metadata_http = HTTPClient(
            timeout=self.config.metadata_timeout_seconds, http_client=http_client
        )

    async def run_yt_dlp(self, video_id: str) -> dict[str, Any]:
        """
        Run yt-dlp and return its JSON output.

        Raises:
            TranscriptFetchError: If yt-dlp is missing, times out, exits
                non-zero or prints invalid JSON.
        """
        cmd = [
            self.config.yt_dlp_binary,
            "--skip-download",
            "--no-warnings",
            "--print-json",
            watch_url(video_id),
        ]
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise TranscriptFetchError(f"{self.config.yt_dlp_binary} not found") from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.config.command_timeout_seconds
            )
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise TranscriptFetchError(
                f"yt-dlp timed out after {self.config.command_timeout_seconds}s"
            ) from e

        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()[:500]
            raise TranscriptFetchError(f"yt-dlp exited with {process.returncode}: {message}")

        try:
            return json.loads(stdout)
        except ValueError as e:
            raise TranscriptFetchError("yt-dlp printed invalid JSON") from e

    def select_subtitle_url(self, data: dict[str, Any]) -> str | None:
        """Pick the first subtitle URL in a preferred English language."""
        for tracks_key in ("subtitles", "automatic_captions"):
            tracks = data.get(tracks_key) or {}
            for language in self.config.subtitle_languages:
                formats = tracks.get(language) or []
                # Prefer VTT, the format parse_vtt understands best
                for fmt in sorted(formats, key=lambda f: f.get("ext") != "vtt"):
                    if fmt.get("url"):
                        return fmt["url"]
        return None

    async def fetch_metadata(self, video_id: str) -> VideoMetadata:
        """Fetch title/author via oEmbed; unknown values on failure."""
        try:
            data = await self._metadata_http.get_json(
                self.config.oembed_url,
                params={"url": watch_url(video_id), "format": "json"},
            )
            return VideoMetadata.from_oembed(video_id, data)
        except Exception as e:
            logger.warning(f"Metadata lookup failed for {video_id}: {e}")
            return VideoMetadata(video_id=video_id)

    async def fetch(self, url: str) -> TranscriptResult:
        """
        Fetch the transcript for a video URL.

        Returns:
            TranscriptResult; success=False with a message on any failure.
        """
        video_id = extract_video_id(url)
        if not video_id:
            return TranscriptResult(
                success=False,
                message="Could not extract video ID from the provided URL.",
            )

        try:
            data = await self.run_yt_dlp(video_id)
        except TranscriptFetchError as e:
            logger.warning(f"Transcript fetch failed for {video_id}: {e}")
            metadata = await self.fetch_metadata(video_id)
            return self._unavailable(metadata)

        metadata = VideoMetadata.from_yt_dlp(video_id, data)
        subtitle_url = self.select_subtitle_url(data)
        if subtitle_url is None:
            logger.info(f"No English subtitles for {video_id}")
            return self._unavailable(metadata)

        try:
            content = await self._subtitles_http.get_text(subtitle_url)
        except Exception as e:
            logger.warning(f"Subtitle download failed for {video_id}: {e}")
            return self._unavailable(metadata)

        transcript = parse_vtt(content)
        if not transcript:
            return self._unavailable(metadata)

        logger.info(f"Fetched transcript for {video_id} ({len(transcript)} chars)")
        return TranscriptResult(
            success=True,
            message=(
                f"Video: {metadata.title}\n"
                f"Author: {metadata.author}\n"
                f"Video ID: {video_id}\n"
                f"Transcript Length: {len(transcript)} characters"
            ),
            transcript=transcript,
            video_id=video_id,
            title=metadata.title,
            author=metadata.author,
            summary=create_summary(transcript, self.config.summary_words),
        )

    def _unavailable(self, metadata: VideoMetadata) -> TranscriptResult:
        return TranscriptResult(
            success=False,
            message=(
                f"Transcript not available for {metadata.title!r} by {metadata.author}. "
                "The video may not have captions, or they may be restricted."
            ),
            video_id=metadata.video_id,
            title=metadata.title,
            author=metadata.author,
        )
