# src/carfind/service/completion.py
"""
CompletionService: owns the prefix index and ranks its completions.

Build once with ``load``, then query with ``suggest`` as often as needed.
``load`` builds a new trie on the side and swaps it in when done, so a
failed build never disturbs the index that was already serving.
"""

from typing import Any, Iterable, List, NamedTuple, Optional

from ..exceptions import UnsupportedCharacterError
from ..index.trie import Trie
from ..logger import get_logger
from ..utils.edit_distance import levenshtein

logger = get_logger("service.completion")

QUALIFIER = " or similar"


class LoadReport(NamedTuple):
    inserted: int
    skipped: int


def normalize(text: str) -> str:
    return text.lower()


def strip_qualifier(text: str) -> str:
    """Remove every ``" or similar"`` from a vocabulary entry."""
    return text.replace(QUALIFIER, "")


class CompletionService:
    def __init__(self, alphabet: Optional[Iterable[str]] = None):
        self._alphabet = frozenset(alphabet) if alphabet is not None else None
        self._trie = Trie(alphabet=self._alphabet)

    def __len__(self) -> int:
        return len(self._trie)

    # ---------- Build phase ----------
    def load(self, words: Iterable[Any]) -> LoadReport:
        trie = Trie(alphabet=self._alphabet)
        inserted = 0
        skipped = 0

        for position, word in enumerate(words):
            if not isinstance(word, str):
                logger.warning(f"Skipping vocabulary entry #{position}: not a string ({word!r})")
                skipped += 1
                continue
            try:
                trie.insert(normalize(word))
            except UnsupportedCharacterError as e:
                logger.warning(f"Skipping vocabulary entry #{position}: {e}")
                skipped += 1
                continue
            inserted += 1

        self._trie = trie
        logger.info(f"Loaded vocabulary → {inserted} inserted, {skipped} skipped, {len(trie)} distinct")
        return LoadReport(inserted=inserted, skipped=skipped)

    # ---------- Query phase ----------
    def suggest(self, prefix: str, limit: Optional[int] = None) -> List[str]:
        """
        Ranked completions for ``prefix``, closest first by edit distance.

        Args:
            prefix: raw user input; lowercased before lookup
            limit: keep only the first ``limit`` results (``None`` keeps all)
        """
        query = normalize(prefix)

        candidates = [strip_qualifier(word) for word in self._trie.find_completions(query)]

        # sorted() is stable: equal distances keep traversal order
        ranked = sorted(candidates, key=lambda cand: levenshtein(query, cand))
        if limit is not None:
            ranked = ranked[:limit]
        return ranked
