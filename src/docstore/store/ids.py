"""Short numeric document id generation with bounded retries"""

import logging
import random
from collections.abc import Collection

from docstore.store.errors import IdSpaceExhaustedError


logger = logging.getLogger(__name__)


class IdGenerator:
    """Draw ids from str(0 .. id_space - 1), retrying on collision.

    Gives up with IdSpaceExhaustedError after max_attempts draws, or at once
    when every id in the space is already taken.
    """

    def __init__(self, id_space: int = 1000, max_attempts: int = 100, rng: random.Random | None = None):
        if id_space < 1:
            raise ValueError("id_space must be at least 1")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.id_space = id_space
        self.max_attempts = max_attempts
        self._rng = rng or random.Random()

    def _in_space(self, doc_id: str) -> bool:
        """True if doc_id is one this generator could have drawn."""
        return doc_id.isascii() and doc_id.isdigit() and str(int(doc_id)) == doc_id and int(doc_id) < self.id_space

    def __call__(self, taken: Collection[str]) -> str:
        if sum(1 for t in taken if self._in_space(t)) >= self.id_space:
            raise IdSpaceExhaustedError(0, self.id_space)
        for attempt in range(1, self.max_attempts + 1):
            candidate = str(self._rng.randrange(self.id_space))
            if candidate not in taken:
                return candidate
            logger.debug("Generated id %s is taken (attempt %d/%d)", candidate, attempt, self.max_attempts)
        raise IdSpaceExhaustedError(self.max_attempts, self.id_space)
