import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, List

from ..domain.model import QuizEntry

logger = logging.getLogger(__name__)


class QuizDataError(ValueError):
    """The dataset file is not an ordered list of quiz objects."""


class EmptyQuizStoreError(QuizDataError):
    """A store with no entries cannot serve batches."""


def entry_from_dict(raw: dict) -> QuizEntry:
    # missing text renders as an empty string later on
    alternatives = raw.get("alternativeAnswers") or []
    if isinstance(alternatives, str):
        alternatives = [alternatives]
    if not isinstance(alternatives, list):
        raise QuizDataError(f"alternativeAnswers must be a list, got {type(alternatives).__name__}")
    return QuizEntry(
        question=str(raw.get("question") or ""),
        answer=str(raw.get("answer") or ""),
        alternative_answers=tuple(str(a) for a in alternatives),
    )


class QuizRepository:
    """Read-only, 0-indexed sequence of quiz entries."""

    def __init__(self, entries: Iterable[QuizEntry]) -> None:
        self._entries = tuple(entries)
        if not self._entries:
            raise EmptyQuizStoreError("Quiz store must contain at least one entry")

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[QuizEntry]:
        return iter(self._entries)

    def get(self, index: int) -> QuizEntry:
        return self._entries[index]

    @classmethod
    def from_dicts(cls, items: List[dict]) -> "QuizRepository":
        if not isinstance(items, list):
            raise QuizDataError("Quiz data must be a JSON array")
        entries = []
        for idx, item in enumerate(items):
            if not isinstance(item, dict):
                raise QuizDataError(f"Quiz entry #{idx} is not an object")
            entries.append(entry_from_dict(item))
        return cls(entries)


def load_repository(path: Path) -> QuizRepository:
    with open(path, encoding="utf-8") as fh:
        try:
            items = json.load(fh)
        except json.JSONDecodeError as exc:
            raise QuizDataError(f"Invalid quiz data in {path}: {exc}") from exc
    repo = QuizRepository.from_dicts(items)
    logger.info("Loaded %d quiz entries from %s", len(repo), path)
    return repo
