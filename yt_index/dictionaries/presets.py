"""Preset dictionary configurations for common video topics."""

from yt_index.dictionaries.schemas import DictionaryConfig, InlineSource

PROGRAMMING_TERMS = [
    "api", "algorithm", "async", "backend", "bug", "cache", "class", "compiler",
    "component", "container", "database", "debugging", "deployment", "docker",
    "framework", "frontend", "function", "git", "github", "graphql", "hooks",
    "javascript", "kubernetes", "library", "linux", "microservices", "mongodb",
    "node", "python", "react", "redux", "refactoring", "repository", "rest",
    "rust", "server", "sql", "testing", "typescript", "variable", "webpack",
]

BUSINESS_TERMS = [
    "acquisition", "revenue", "profit", "startup", "investor", "valuation",
    "marketing", "strategy", "customer", "growth", "funding", "equity",
    "stakeholder", "roadmap", "pricing", "margin", "sales", "branding",
    "entrepreneur", "market share", "venture capital", "ipo", "b2b", "saas",
]

GAMING_TERMS = [
    "boss", "console", "dlc", "esports", "fps", "gameplay", "grinding",
    "hitbox", "loot", "mmorpg", "multiplayer", "nerf", "buff", "npc",
    "patch", "pvp", "quest", "respawn", "rpg", "speedrun", "streamer",
    "twitch", "xbox", "playstation", "nintendo", "steam", "meta",
]

EDUCATION_TERMS = [
    "lesson", "lecture", "curriculum", "student", "teacher", "exam",
    "homework", "tutorial", "course", "semester", "assignment", "theory",
    "concept", "example", "exercise", "chapter", "quiz", "study",
]

DICTIONARY_CONFIGS: dict[str, DictionaryConfig] = {
    "programming": DictionaryConfig(
        dictionaries=[InlineSource(name="programming", terms=PROGRAMMING_TERMS, weight=1.5)]
    ),
    "business": DictionaryConfig(
        dictionaries=[InlineSource(name="business", terms=BUSINESS_TERMS, weight=1.3)]
    ),
    "gaming": DictionaryConfig(
        dictionaries=[InlineSource(name="gaming", terms=GAMING_TERMS, weight=1.3)]
    ),
    "education": DictionaryConfig(
        dictionaries=[InlineSource(name="education", terms=EDUCATION_TERMS, weight=1.2)]
    ),
    "comprehensive": DictionaryConfig(
        dictionaries=[
            InlineSource(name="programming", terms=PROGRAMMING_TERMS, weight=1.2),
            InlineSource(name="business", terms=BUSINESS_TERMS, weight=1.0),
            InlineSource(name="gaming", terms=GAMING_TERMS, weight=1.0),
            InlineSource(name="education", terms=EDUCATION_TERMS, weight=1.0),
        ]
    ),
}


def get_preset(name: str) -> DictionaryConfig:
    """
    Get a preset dictionary configuration by name.

    Raises:
        KeyError: If no preset has that name.
    """
    try:
        return DICTIONARY_CONFIGS[name]
    except KeyError:
        raise KeyError(
            f"Unknown dictionary preset {name!r}. Available: {', '.join(sorted(DICTIONARY_CONFIGS))}"
        ) from None
