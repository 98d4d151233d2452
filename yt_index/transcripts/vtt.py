"""WebVTT subtitle parsing."""

import re

CUE_NUMBER_PATTERN = re.compile(r"^\d+$")
INLINE_TIMESTAMP_PATTERN = re.compile(r"<\d{2}:\d{2}:\d{2}\.\d{3}><c>")
CLOSE_TAG_PATTERN = re.compile(r"</c>")
TAG_PATTERN = re.compile(r"<[^>]*>")
TIMESTAMP_PATTERN = re.compile(r"\d{2}:\d{2}:\d{2}\.\d{3}")
WHITESPACE_PATTERN = re.compile(r"\s+")
HEADER_PREFIXES = ("Kind:", "Language:")


def parse_vtt(content: str) -> str:
    """
    Convert WebVTT (or SRT) subtitle content to plain transcript text.

    Header lines, cue timings, cue numbers and inline markup are removed;
    the remaining caption lines are joined with single spaces. Consecutive
    duplicate lines are kept once.
    """
    lines: list[str] = []
    for line in content.splitlines():
        if (
            not line.strip()
            or line.startswith("WEBVTT")
            or "-->" in line
            or CUE_NUMBER_PATTERN.match(line)
        ):
            continue

        line = INLINE_TIMESTAMP_PATTERN.sub("", line)
        line = CLOSE_TAG_PATTERN.sub("", line)
        line = TAG_PATTERN.sub("", line)
        line = TIMESTAMP_PATTERN.sub("", line).strip()
        # Rolling auto-captions repeat the previous line
        if line and not line.startswith(HEADER_PREFIXES) and (not lines or lines[-1] != line):
            lines.append(line)

    return WHITESPACE_PATTERN.sub(" ", " ".join(lines)).strip()
