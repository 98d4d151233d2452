"""Tests for YouTube URL parsing and validation."""

import pytest

from yt_index.transcripts.video import extract_video_id, validate_video_url, watch_url


class TestExtractVideoId:
    """Tests for extract_video_id."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ?t=10",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
        ],
    )
    def test_supported_forms(self, url):
        assert extract_video_id(url) == "dQw4w9WgXcQ"

    @pytest.mark.parametrize(
        "url",
        ["", "https://vimeo.com/123456", "https://www.youtube.com/watch?v=short", "dQw4w9WgXcQ"],
    )
    def test_unsupported(self, url):
        assert extract_video_id(url) is None

    def test_watch_url(self):
        assert watch_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


class TestValidateVideoUrl:
    """Tests for validate_video_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PL123",
            "https://youtu.be/dQw4w9WgXcQ?si=abc",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
        ],
    )
    def test_valid(self, url):
        result = validate_video_url(url)

        assert result.is_valid
        assert result.video_id == "dQw4w9WgXcQ"
        assert result.error is None

    @pytest.mark.parametrize(
        "url,error",
        [
            ("", "URL is required and must be a string"),
            (None, "URL is required and must be a string"),
            (12345, "URL is required and must be a string"),
            ("not a url", "Invalid URL format"),
            ("https://vimeo.com/123456", "Not a valid YouTube video URL"),
            ("https://www.youtube.com/watch?v=dQw4w9WgXcQextra", "Not a valid YouTube video URL"),
        ],
    )
    def test_invalid(self, url, error):
        result = validate_video_url(url)

        assert not result.is_valid
        assert result.video_id is None
        assert result.error == error

    def test_to_dict(self):
        assert validate_video_url("not a url").to_dict() == {
            "is_valid": False,
            "video_id": None,
            "error": "Invalid URL format",
        }
