import json
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from itquiz.domain.model import QuizEntry
from itquiz.main import create_app
from itquiz.repositories.quiz_repository import QuizRepository
from itquiz.services.webhook import WebhookDispatcher


@pytest.fixture
def repo() -> QuizRepository:
    return QuizRepository(
        [
            QuizEntry("Q zero?", "A0"),
            QuizEntry("Q one?", "A1", ("alt1",)),
            QuizEntry("Q two?", "A2"),
            QuizEntry("Q three?", "X", ("Y", "Z")),
            QuizEntry("Q four?", "A4"),
        ]
    )


class WebhookRecorder:
    """Collects the JSON bodies posted to a mocked webhook."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self.bodies: list[dict] = []
        self.responder = responder or (lambda request: httpx.Response(204))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.bodies.append(json.loads(request.content))
        return self.responder(request)

    def dispatcher(self) -> WebhookDispatcher:
        return WebhookDispatcher(httpx.MockTransport(self))


@pytest.fixture
def webhook() -> WebhookRecorder:
    return WebhookRecorder()


@pytest.fixture
def client(repo, webhook) -> TestClient:
    app = create_app(repository=repo, dispatcher=webhook.dispatcher())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_webhook() -> Callable[..., WebhookRecorder]:
    return WebhookRecorder
