"""Word lists used by the lexicon sentiment classifier and keyword extractor."""

from pydantic import BaseModel, ConfigDict, Field

POSITIVE_WORDS = frozenset(
    {
        "good", "great", "excellent", "amazing", "wonderful", "fantastic", "perfect",
        "love", "best", "awesome", "helpful", "professional", "caring", "efficient",
        "clean", "friendly", "satisfied", "pleased", "happy", "outstanding",
        "impressive", "quality", "reliable", "comfortable", "convenient", "smooth",
        "easy",
    }
)

NEGATIVE_WORDS = frozenset(
    {
        "bad", "terrible", "awful", "horrible", "worst", "hate", "disappointing",
        "poor", "inadequate", "frustrating", "annoying", "slow", "expensive",
        "difficult", "complicated", "confusing", "unclear", "unprofessional", "rude",
        "unhelpful", "broken", "failed", "problem", "issue", "complaint", "concern",
    }
)

DEFAULT_STOPWORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "is", "are", "was", "were", "be", "been", "have", "has", "had",
        "do", "does", "did", "will", "would", "could", "should", "may", "might", "can",
        "this", "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
        "me", "him", "her", "us", "them",
    }
)


class Lexicon(BaseModel):
    """Immutable pair of positive and negative word sets."""

    model_config = ConfigDict(frozen=True)

    positive: frozenset[str] = Field(..., description="Lowercase positive words")
    negative: frozenset[str] = Field(..., description="Lowercase negative words")

    @classmethod
    def from_words(cls, positive, negative) -> "Lexicon":
        """Build a lexicon from any iterables, lowercasing every word."""
        return cls(
            positive=frozenset(word.lower() for word in positive),
            negative=frozenset(word.lower() for word in negative),
        )


DEFAULT_LEXICON = Lexicon(positive=POSITIVE_WORDS, negative=NEGATIVE_WORDS)
