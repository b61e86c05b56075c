# services/text_provider.py
from __future__ import annotations
import random
from typing import Dict, Optional, Sequence

from app.errors import ConfigurationError
from app.validation import Difficulty, TestConfig, TestMode

# time mode needs enough text that a fast typist doesn't run out before the timer
DURATION_MODE_WORDS = 200

WORD_LISTS: Dict[Difficulty, Sequence[str]] = {
    Difficulty.EASY: (
        "the", "and", "for", "are", "but", "not", "you", "all", "can", "her",
        "was", "one", "our", "out", "day", "get", "has", "him", "his", "how",
        "man", "new", "now", "old", "see", "two", "way", "who", "boy", "did",
        "its", "let", "put", "say", "she", "too", "use", "dad", "mom", "pet",
        "add", "age", "ago", "air", "end", "eye", "far", "fun", "got", "hot",
        "job", "lot", "may", "own", "run", "sat", "set", "top", "try", "yet",
    ),
    Difficulty.MEDIUM: (
        "about", "after", "again", "before", "being", "below", "between", "both",
        "during", "each", "few", "from", "further", "here", "into", "more", "most",
        "other", "over", "own", "same", "should", "some", "such", "than", "that",
        "their", "them", "then", "there", "these", "they", "this", "those", "through",
        "under", "very", "what", "when", "where", "which", "while", "with", "would",
        "your", "could", "first", "found", "great", "house", "know", "little", "place",
        "right", "think", "three", "water", "years", "every", "still", "world",
    ),
    Difficulty.HARD: (
        "according", "actually", "although", "anything", "approach", "available",
        "because", "believe", "business", "community", "company", "continue",
        "country", "develop", "different", "difficult", "during", "education",
        "environment", "especially", "everything", "experience", "financial",
        "following", "government", "however", "important", "including", "increase",
        "information", "interest", "international", "knowledge", "language",
        "management", "morning", "necessary", "nothing", "Number", "particular",
        "people", "perhaps", "political", "population", "position", "possible",
        "problem", "product", "program", "property", "provide", "question",
        "research", "result", "security", "service", "similar", "situation",
        "something", "standard", "student", "support", "system", "technology",
    ),
    Difficulty.EXPERT: (
        "accommodation", "acknowledge", "acquisition", "administrative", "approximately",
        "architecture", "authorization", "characteristic", "classification", "communication",
        "comprehensive", "concentration", "configuration", "consequently", "consideration",
        "contemporary", "contribution", "controversial", "conventional", "coordination",
        "demonstration", "determination", "disadvantage", "discrimination", "distribution",
        "documentation", "effectiveness", "embarrassment", "establishment", "implementation",
        "infrastructure", "institutional", "interpretation", "investigation", "manufacturer",
        "mediterranean", "neighbourhood", "nevertheless", "opportunities", "participation",
        "pharmaceutical", "philosophical", "photographers", "pronunciation", "psychological",
        "recommendation", "refrigerator", "representative", "responsibility", "revolutionary",
        "significance", "substantially", "successfully", "technological", "understanding",
        "unfortunately", "unprecedented", "administration", "appropriately", "consciousness",
    ),
}


def generate(difficulty, word_count: int, rng: Optional[random.Random] = None) -> str:
    """`word_count` words from the difficulty's list, with repetition, single-space joined."""
    if word_count < 1:
        raise ConfigurationError(f"word_count must be at least 1, got {word_count}")
    try:
        words = WORD_LISTS[Difficulty(difficulty)]
    except ValueError as e:
        raise ConfigurationError(f"unknown difficulty: {difficulty!r}") from e
    rng = rng or random
    return " ".join(rng.choice(words) for _ in range(word_count))


class TextProvider:
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def generate(self, difficulty, word_count: int) -> str:
        return generate(difficulty, word_count, self.rng)

    def for_config(self, config: TestConfig) -> str:
        if config.mode is TestMode.WORDS:
            count = config.word_count
        else:
            count = DURATION_MODE_WORDS
        return self.generate(config.difficulty, count)
