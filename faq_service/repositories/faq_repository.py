"""
FAQ repository interface and in-memory implementation.

The search engine never talks to the store directly: the service asks
the repository for a snapshot of all FAQs on each request and ranks that.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable

from ..domain.entities import FAQ
from ..domain.exceptions import DataIntegrityException, FAQNotFoundException

logger = logging.getLogger(__name__)


class IFAQRepository(ABC):
    """
    Abstract repository interface for FAQ data.

    Enables swapping the storage backend without touching the service.
    """

    @abstractmethod
    async def get_all(self) -> list[FAQ]:
        """
        Get every FAQ.

        Returns:
            A new list; callers may keep it while the store changes
        """
        pass

    @abstractmethod
    async def get_by_id(self, faq_id: str) -> FAQ:
        """
        Get one FAQ.

        Raises:
            FAQNotFoundException: If no FAQ has this id
        """
        pass

    @abstractmethod
    async def add(self, faq: FAQ) -> FAQ:
        """Insert or replace an FAQ, keyed by id."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored FAQs."""
        pass


class InMemoryFAQRepository(IFAQRepository):
    """Dictionary-backed FAQ store preserving insertion order."""

    def __init__(self, faqs: Iterable[FAQ] = ()):
        self._faqs: dict[str, FAQ] = {faq.id: faq for faq in faqs}

    async def get_all(self) -> list[FAQ]:
        return list(self._faqs.values())

    async def get_by_id(self, faq_id: str) -> FAQ:
        try:
            return self._faqs[faq_id]
        except KeyError:
            raise FAQNotFoundException(faq_id)

    async def add(self, faq: FAQ) -> FAQ:
        self._faqs[faq.id] = faq
        return faq

    async def count(self) -> int:
        return len(self._faqs)

    @classmethod
    def load_from_file(cls, path: Path) -> "InMemoryFAQRepository":
        """
        Build a repository from a JSON seed file.

        The file holds either a list of FAQ objects or {"faqs": [...]}.

        Raises:
            DataIntegrityException: If the file is not valid JSON or an
                entry is malformed
        """
        try:
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise DataIntegrityException("seed file", f"invalid JSON in {path}: {e}")

        if isinstance(payload, dict):
            payload = payload.get("faqs", [])
        if not isinstance(payload, list):
            raise DataIntegrityException("seed file", "expected a list of FAQs")

        repository = cls(FAQ.from_dict(item) for item in payload)
        logger.info("Loaded %d FAQs from %s", len(repository._faqs), path)
        return repository
