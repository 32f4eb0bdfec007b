"""
Domain entities for FAQ data.

Core business objects representing knowledge-base entries.
These entities are framework-agnostic and contain only business logic.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional

from .exceptions import DataIntegrityException


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a stored timestamp into a datetime.

    Accepts datetime instances, ISO-8601 strings (with or without a
    trailing "Z") and None.

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return datetime.fromisoformat(text)
    raise ValueError(f"Unsupported timestamp value: {value!r}")


@dataclass(frozen=True)
class FAQ:
    """
    A single FAQ entry.

    Immutable so that ranking can only ever produce annotated copies.

    Attributes:
        id: Stable unique identifier
        question: Question text
        answer: Answer text
        category: Optional short label
        tags: Short labels, matched case-insensitively
        views: View counter
        helpful: "Helpful" vote counter
        not_helpful: "Not helpful" vote counter
        created_at: Creation timestamp used for range filtering
        relevance_score: Score attached by ranking, None when unranked
    """

    id: str
    question: str
    answer: str
    category: Optional[str] = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    views: int = 0
    helpful: int = 0
    not_helpful: int = 0
    created_at: Optional[datetime] = None
    relevance_score: Optional[float] = None

    @property
    def searchable_text(self) -> str:
        """Question, answer and tags joined the way the ranker reads them."""
        return f"{self.question} {self.answer} {' '.join(self.tags)}"

    def with_score(self, score: float) -> "FAQ":
        """Return a copy of this FAQ carrying the given relevance score."""
        return replace(self, relevance_score=score)

    @classmethod
    def from_dict(cls, data: dict) -> "FAQ":
        """
        Build an FAQ from a store payload.

        Both camelCase (``notHelpful``, ``createdAt``) and snake_case keys
        are accepted. Missing counters default to 0 and missing tags to
        an empty tuple.

        Raises:
            DataIntegrityException: If required fields are missing or malformed
        """
        for required in ("id", "question", "answer"):
            if data.get(required) is None:
                raise DataIntegrityException("faq", f"missing required field '{required}'")

        tags = data.get("tags") or ()
        if isinstance(tags, str):
            raise DataIntegrityException("faq", "tags must be a list of strings")

        raw_created = data.get("created_at", data.get("createdAt"))
        try:
            created_at = parse_timestamp(raw_created)
        except ValueError as e:
            raise DataIntegrityException("faq", f"invalid created_at: {e}")

        try:
            return cls(
                id=str(data["id"]),
                question=str(data["question"]),
                answer=str(data["answer"]),
                category=data.get("category") or None,
                tags=tuple(str(tag) for tag in tags),
                views=int(data.get("views") or 0),
                helpful=int(data.get("helpful") or 0),
                not_helpful=int(data.get("not_helpful", data.get("notHelpful")) or 0),
                created_at=created_at,
            )
        except (TypeError, ValueError) as e:
            raise DataIntegrityException("faq", f"invalid counter value: {e}")

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "category": self.category,
            "tags": list(self.tags),
            "views": self.views,
            "helpful": self.helpful,
            "not_helpful": self.not_helpful,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "relevance_score": self.relevance_score,
        }
