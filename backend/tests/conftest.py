import pytest

from chat_proxy import create_app
from chat_proxy.config import Settings
from chat_proxy.domain.chat import CompletionReply
from chat_proxy.extensions import limiter


class FakeGroqClient:
    model = "fake-model"

    def __init__(self, result=None):
        self.result = result if result is not None else CompletionReply(text="hello")
        self.calls = []

    def complete(self, messages):
        self.calls.append(messages)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def make_app(settings, **kwargs):
    """
    create_app con los contadores del limiter en cero.
    """
    app = create_app(settings, **kwargs)
    app.config["TESTING"] = True
    limiter.reset()
    return app


@pytest.fixture
def settings():
    return Settings(GROQ_API_KEY="test-key")


@pytest.fixture
def fake_groq():
    return FakeGroqClient()


@pytest.fixture
def app(settings, fake_groq):
    return make_app(settings, groq_client=fake_groq)


@pytest.fixture
def client(app):
    return app.test_client()
