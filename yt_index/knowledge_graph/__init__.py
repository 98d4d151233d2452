"""
Knowledge-graph entity extraction.

Queries the Google Knowledge Graph Search API with candidate terms taken
from a transcript and turns entities that actually occur in the transcript
into scored keywords.

Components:
- KnowledgeGraphConfig: Configuration for the client and scoring
- KnowledgeGraphEntity: Dataclass representing one returned entity
- KnowledgeGraphMatch: An entity found in the transcript, with its score
- KnowledgeGraphClient: Async client for the search API
- KnowledgeGraphService: Candidate extraction, lookup and scoring
"""

from yt_index.knowledge_graph.client import KnowledgeGraphClient
from yt_index.knowledge_graph.config import KnowledgeGraphConfig
from yt_index.knowledge_graph.schemas import KnowledgeGraphEntity, KnowledgeGraphMatch
from yt_index.knowledge_graph.service import KnowledgeGraphService

__all__ = [
    "KnowledgeGraphConfig",
    "KnowledgeGraphEntity",
    "KnowledgeGraphMatch",
    "KnowledgeGraphClient",
    "KnowledgeGraphService",
]
