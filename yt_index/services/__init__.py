"""Services that combine transcript retrieval with keyword and segment extraction."""

from yt_index.services.processing_service import ProcessingResult, VideoProcessingService

__all__ = ["ProcessingResult", "VideoProcessingService"]
