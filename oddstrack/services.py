import logging

from oddstrack.analytics.prediction import FORECAST, predict
from oddstrack.analytics.stats import describe
from oddstrack.config import settings
from oddstrack.core.errors import InvalidFormat, NoValuesFound, NormalizationError
from oddstrack.core.validation import extract_candidates, normalize
from oddstrack.db.crud import HistoryStore
from oddstrack.vision.ocr import TextRecognizer

logger = logging.getLogger(__name__)


class HistoryService:
    """Ingestion, history, statistics and prediction for one store.

    Every operation takes the caller's ``owner`` id as supplied by the auth
    layer and passes it straight to the store.
    """

    def __init__(self, store: HistoryStore, recognizer: TextRecognizer | None = None,
                 window: int = settings.window, trim_fraction: float = settings.trim_fraction):
        self.store = store
        self.recognizer = recognizer
        self.window = window
        self.trim_fraction = trim_fraction

    def ingest_replace(self, owner: str, text: str) -> list[str]:
        values = [normalize(c) for c in extract_candidates(text)]
        if not values:
            logger.warning("replace for %s: no multipliers in %d chars of text", owner, len(text or ""))
            raise NoValuesFound()
        self.store.replace(owner, values, source="screenshot")
        return values

    def ingest_image(self, owner: str, image_bytes: bytes) -> list[str]:
        if self.recognizer is None:
            raise RuntimeError("no text recognizer configured")
        text = self.recognizer.recognize(image_bytes)
        return self.ingest_replace(owner, text)

    def ingest_append(self, owner: str, tokens: str | list[str]) -> list[str]:
        if isinstance(tokens, str):
            tokens = [tokens]
        if not tokens:
            raise InvalidFormat("")
        values = []
        for tok in tokens:
            try:
                values.append(normalize(tok))
            except NormalizationError as e:
                logger.warning("append for %s rejected: %s", owner, e.message)
                raise InvalidFormat(e.token) from e
        self.store.append(owner, values, source="manual")
        logger.info("appended %d values for %s", len(values), owner)
        return values

    def get_history(self, owner: str) -> list[dict]:
        return [
            {'value': row.value, 'recordedAt': row.recorded_at.isoformat()}
            for row in self.store.fetch(owner)
        ]

    def get_statistics(self, owner: str) -> dict:
        return describe(self.store.values(owner)).as_dict()

    def get_prediction(self, owner: str, mode: str = FORECAST) -> dict:
        values = self.store.values(owner)
        return predict(values, mode=mode, window=self.window, trim_fraction=self.trim_fraction).as_dict()
