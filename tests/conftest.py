import pytest

from oddstrack.db.base import make_engine
from oddstrack.db.crud import HistoryStore
from oddstrack.services import HistoryService


class FakeRecognizer:
    def __init__(self, text: str = ""):
        self.text = text
        self.calls = 0

    def recognize(self, image_bytes: bytes) -> str:
        self.calls += 1
        return self.text


@pytest.fixture
def store():
    s = HistoryStore(make_engine("sqlite://"))
    s.init()
    return s


@pytest.fixture
def recognizer():
    return FakeRecognizer()


@pytest.fixture
def service(store, recognizer):
    return HistoryService(store, recognizer, window=5, trim_fraction=0.10)
