from pydantic import BaseModel, Field, model_validator
from typing import Literal, Optional


class ReplaceIn(BaseModel):
    text: str


class ManualIn(BaseModel):
    # either a single "valor"-style value or an ordered list of them
    value: Optional[str] = None
    values: Optional[list[str]] = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def _one_of(self):
        if self.values is None and self.value is None:
            raise ValueError('send "value" (string) or "values" (list of strings)')
        return self

    def tokens(self) -> list[str]:
        return self.values if self.values is not None else [self.value]


class IngestOut(BaseModel):
    success: bool = True
    inserted: list[str]


class HistoryItem(BaseModel):
    value: str
    recordedAt: str


class StatsOut(BaseModel):
    mean: str
    mode: str
    median: str
    stddev: str
    min: str
    max: str
    count: int


class PredictOut(BaseModel):
    mode: Literal["forecast", "moving-window"]
    nextValue: str
    simpleMean: str | None = None
    median: str | None = None
    trimmedMean: str | None = None
    lowRiskOdd: str | None = None
    mediumRiskOdd: str | None = None
    highRiskOdd: str | None = None


class ErrorOut(BaseModel):
    success: bool = False
    error: str
    detail: str
