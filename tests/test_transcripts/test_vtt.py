"""Tests for WebVTT parsing."""

from yt_index.transcripts.vtt import parse_vtt

VTT = """WEBVTT
Kind: captions
Language: en

00:00:00.000 --> 00:00:02.000 align:start position:0%
Hello <c>world</c>

00:00:02.000 --> 00:00:04.000
Hello world

00:00:04.000 --> 00:00:06.000
<00:00:04.500><c>this</c> is a test
"""

SRT = """1
00:00:01,000 --> 00:00:03,000
First line

2
00:00:03,000 --> 00:00:05,000
Second   line
"""


class TestParseVtt:
    """Tests for parse_vtt."""

    def test_vtt(self):
        assert parse_vtt(VTT) == "Hello world this is a test"

    def test_srt(self):
        assert parse_vtt(SRT) == "First line Second line"

    def test_non_consecutive_duplicates_kept(self):
        content = "WEBVTT\n\nyes\n\nno\n\nyes\n"

        assert parse_vtt(content) == "yes no yes"

    def test_empty(self):
        assert parse_vtt("") == ""
        assert parse_vtt("WEBVTT\n\n00:00:00.000 --> 00:00:01.000\n") == ""
