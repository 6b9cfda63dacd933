from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class QuizEntry:
    question: str
    answer: str
    alternative_answers: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        data: dict = {"question": self.question, "answer": self.answer}
        if self.alternative_answers:
            data["alternativeAnswers"] = list(self.alternative_answers)
        return data


class DispatchMode(str, Enum):
    QUESTION = "question"
    ANSWER = "answer"


@dataclass(frozen=True)
class LookupRequest:
    id: int


@dataclass(frozen=True)
class DispatchRequest:
    start_id: int
    count: int
    webhook_url: str


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


# --- delivery / request outcomes ---

@dataclass(frozen=True)
class Delivered:
    pass


@dataclass(frozen=True)
class Failed:
    reason: str


@dataclass(frozen=True)
class Rejected:
    errors: tuple[FieldError, ...]


DeliveryOutcome = Union[Delivered, Failed]
DispatchOutcome = Union[Rejected, Delivered, Failed]
