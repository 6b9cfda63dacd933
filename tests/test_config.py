from itquiz.core.config import DEFAULT_QUIZ_DATA_PATH, Settings


def test_settings_defaults_without_env():
    # Avoid reading any .env files during this test
    s = Settings(_env_file=None)

    assert s.APP_ENV == "dev"
    assert s.API_V1_PREFIX == "/api/v1"
    assert s.QUIZ_DATA_PATH == DEFAULT_QUIZ_DATA_PATH
    assert s.FRONTEND_ORIGINS == ["*"]


def test_origins_from_separated_string(monkeypatch):
    monkeypatch.setenv("FRONTEND_ORIGINS", "http://a.test; http://b.test,")
    s = Settings(_env_file=None)
    assert s.FRONTEND_ORIGINS == ["http://a.test", "http://b.test"]


def test_origins_from_json_array(monkeypatch):
    monkeypatch.setenv("FRONTEND_ORIGINS", '["http://a.test"]')
    s = Settings(_env_file=None)
    assert s.FRONTEND_ORIGINS == ["http://a.test"]


def test_answer_link(monkeypatch):
    monkeypatch.setenv("ANSWER_LINK_BASE_URL", "https://quiz.test/")
    s = Settings(_env_file=None)
    assert s.answer_link(7) == "https://quiz.test/api/v1/quizzes/7"
