"""Static vocabularies used by keyword scoring and candidate extraction.

This module provides:
1. An English stop-word list tuned for spoken transcripts (fillers included)
2. A curated technical-term list (software, data, AI) for the technical bonus
3. A smaller curated domain-term list (science, business, culture) for the domain bonus

Technical and domain terms are matched as substrings of a candidate word,
so "react" matches both "react" and "reactive".
"""

STOP_WORDS: frozenset[str] = frozenset({
    # Articles, conjunctions, prepositions
    "a", "an", "the", "and", "or", "but", "nor", "so", "yet", "if", "then",
    "than", "because", "while", "where", "when", "what", "which", "who",
    "whom", "whose", "why", "how", "in", "on", "at", "to", "for", "of",
    "with", "by", "from", "up", "down", "out", "off", "over", "under",
    "about", "into", "onto", "through", "during", "before", "after",
    "above", "below", "between", "among", "around", "against", "without",
    "within", "along", "across", "behind", "beyond", "upon", "via",

    # Pronouns and determiners
    "this", "that", "these", "those", "i", "you", "he", "she", "it", "we",
    "they", "me", "him", "her", "us", "them", "my", "your", "his", "its",
    "our", "their", "mine", "yours", "ours", "theirs", "myself", "yourself",
    "itself", "ourselves", "themselves", "there", "here", "all", "some",
    "any", "every", "each", "both", "either", "neither", "none", "other",
    "another", "such", "same", "own", "much", "many", "more", "most",
    "less", "least", "few", "several",

    # Auxiliaries and modals
    "will", "would", "could", "should", "may", "might", "can", "must",
    "shall", "have", "has", "had", "having", "do", "does", "did", "doing",
    "done", "am", "is", "are", "was", "were", "be", "been", "being",

    # Common verbs with little topical value
    "get", "gets", "got", "getting", "go", "goes", "going", "gone", "went",
    "make", "makes", "made", "take", "takes", "took", "come", "comes",
    "came", "know", "knows", "knew", "think", "thinks", "thought", "want",
    "wants", "wanted", "need", "needs", "look", "looks", "looking", "see",
    "sees", "saw", "seen", "say", "says", "said", "tell", "told", "give",
    "gives", "gave", "use", "uses", "used", "using", "let", "lets", "put",
    "keep", "kind", "sort", "mean", "means", "actually", "basically",

    # Adverbs and fillers common in speech
    "gonna", "wanna", "gotta", "yeah", "okay", "like", "just", "really",
    "very", "quite", "only", "also", "too", "even", "still", "already",
    "again", "ever", "never", "always", "sometimes", "often", "usually",
    "maybe", "perhaps", "probably", "definitely", "totally", "literally",
    "pretty", "right", "well", "now", "today", "thing", "things",
    "stuff", "something", "anything", "everything", "nothing", "someone",
    "anyone", "everyone", "somebody", "anybody", "everybody", "lot", "lots",
    "way", "ways", "time", "times", "good", "great", "first", "last", "next",
    "one", "two", "three", "back", "cover", "discuss",
    "hello", "welcome", "video", "guys",
})

TECHNICAL_TERMS: frozenset[str] = frozenset({
    # Languages and runtimes
    "javascript", "typescript", "python", "java", "kotlin", "swift",
    "golang", "ruby", "php", "scala", "haskell", "node", "deno", "html",
    "css", "sql", "graphql", "bash",

    # Frameworks and libraries
    "react", "angular", "vue", "svelte", "nextjs", "express", "django",
    "flask", "fastapi", "spring", "rails", "laravel", "tensorflow",
    "pytorch", "keras", "pandas", "numpy", "scikit", "redux", "tailwind",

    # Data stores and infrastructure
    "mongodb", "postgres", "postgresql", "mysql", "redis", "sqlite",
    "elasticsearch", "kafka", "docker", "kubernetes", "terraform", "aws",
    "azure", "gcp", "serverless", "linux", "nginx", "github", "rustlang",

    # Concepts
    "api", "backend", "frontend", "database", "server", "client", "cloud",
    "algorithm", "programming", "software", "development", "developer",
    "deployment", "framework", "library", "component", "function",
    "compiler", "runtime", "async", "hooks", "microservice", "devops",
    "testing", "debugging", "security", "encryption", "blockchain",
    "machine", "learning", "neural", "network", "model", "training",
    "inference", "dataset", "data", "analytics", "automation", "robotics",
    "artificial", "intelligence", "computer", "vision", "processing",
})

DOMAIN_TERMS: frozenset[str] = frozenset({
    # Science and environment
    "science", "research", "physics", "chemistry", "biology", "medicine",
    "health", "climate", "environment", "energy", "carbon", "emission",
    "sustainab", "temperature", "weather", "ocean", "space", "planet",

    # Business and economics
    "business", "market", "economy", "finance", "investment", "revenue",
    "strategy", "marketing", "startup", "customer", "product", "management",
    "leadership", "growth", "profit",

    # Culture and humanities
    "history", "philosophy", "psychology", "politics", "government",
    "education", "culture", "music", "film", "literature", "religion",
    "consciousness", "language", "society",
})


def is_stop_word(word: str) -> bool:
    """Check whether a word is a stop word (case-insensitive)."""
    return word.lower() in STOP_WORDS


def matches_technical_term(word: str) -> bool:
    """Check whether any curated technical term is a substring of the word."""
    lowered = word.lower()
    return any(term in lowered for term in TECHNICAL_TERMS)


def matches_domain_term(word: str) -> bool:
    """Check whether any curated domain term is a substring of the word."""
    lowered = word.lower()
    return any(term in lowered for term in DOMAIN_TERMS)
