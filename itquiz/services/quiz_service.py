from typing import Any, List, Union

from ..domain.model import FieldError
from ..repositories.quiz_repository import QuizRepository
from .validation import validate_lookup


class QuizService:
    def __init__(self, repo: QuizRepository) -> None:
        self.repo = repo

    def count(self) -> dict:
        return {"count": len(self.repo)}

    def get_entry(self, raw_id: Any) -> Union[dict, List[FieldError]]:
        # no wraparound here: an out-of-range id is a client error
        checked = validate_lookup(raw_id, len(self.repo))
        if isinstance(checked, list):
            return checked
        return self.repo.get(checked.id).to_dict()
