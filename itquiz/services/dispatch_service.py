import logging
from collections.abc import Mapping
from typing import Any, Callable

from ..domain.model import (
    Delivered,
    DispatchMode,
    DispatchOutcome,
    FieldError,
    Rejected,
)
from ..repositories.quiz_repository import QuizRepository
from .batch import select_batch
from .renderer import render_batch
from .validation import validate_dispatch
from .webhook import WebhookDispatcher

logger = logging.getLogger(__name__)


class DispatchService:
    """
    Validates a dispatch request, renders the selected batch and posts it.

    Every call ends in exactly one outcome: ``Rejected`` (bad input),
    ``Failed`` (webhook delivery error) or ``Delivered``.
    """

    def __init__(
        self,
        repo: QuizRepository,
        dispatcher: WebhookDispatcher,
        answer_link: Callable[[int], str],
    ) -> None:
        self.repo = repo
        self.dispatcher = dispatcher
        self.answer_link = answer_link

    def build_message(self, start_id: int, count: int, mode: DispatchMode) -> str:
        indices = select_batch(start_id, count, len(self.repo))
        return render_batch(indices, mode, self.repo, self.answer_link)

    async def dispatch(self, raw: Any, mode: DispatchMode) -> DispatchOutcome:
        if not isinstance(raw, Mapping):
            return Rejected((FieldError("body", "request body must be a JSON object"),))

        checked = validate_dispatch(raw)
        if isinstance(checked, list):
            logger.debug("Rejected %s dispatch: %s", mode.value, checked)
            return Rejected(tuple(checked))

        message = self.build_message(checked.start_id, checked.count, mode)
        outcome = await self.dispatcher.deliver(message, checked.webhook_url)
        if isinstance(outcome, Delivered):
            logger.info(
                "Delivered %s batch (id=%d, count=%d)",
                mode.value,
                checked.start_id,
                checked.count,
            )
        return outcome
