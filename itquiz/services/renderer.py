from typing import Callable, List, Sequence

from ..domain.model import DispatchMode, QuizEntry
from ..repositories.quiz_repository import QuizRepository

HEADER = "=============================="


def render_question_entry(index: int, entry: QuizEntry, answer_link: Callable[[int], str]) -> List[str]:
    return [
        f"Q{index}: {entry.question}",
        f"解答: {answer_link(index)}",
        "",
    ]


def render_answer_entry(index: int, entry: QuizEntry) -> List[str]:
    lines = [f"Q{index}: {entry.answer}"]
    if entry.alternative_answers:
        lines.append(f"他の解答: [ {', '.join(entry.alternative_answers)} ]")
    lines.append("")
    return lines


def render_batch(
    indices: Sequence[int],
    mode: DispatchMode,
    repo: QuizRepository,
    answer_link: Callable[[int], str],
) -> str:
    lines = [HEADER]
    for index in indices:
        entry = repo.get(index)
        match mode:
            case DispatchMode.QUESTION:
                lines.extend(render_question_entry(index, entry, answer_link))
            case DispatchMode.ANSWER:
                lines.extend(render_answer_entry(index, entry))
            case _:
                raise ValueError(f"Unknown dispatch mode: {mode!r}")
    return "\n".join(lines)
