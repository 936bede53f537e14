from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class MetricKind(str, Enum):
    PERCENTAGE = "percentage"
    CURRENCY = "currency"
    DATE = "date"
    NUMBER = "number"


@dataclass(frozen=True)
class Metric:
    """A typed numeric/date/currency occurrence in normalized text."""

    kind: MetricKind
    value: str
    context: str
    position: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "value": self.value,
            "context": self.context,
            "position": self.position,
        }


@dataclass(frozen=True)
class Insight:
    """Summary, metrics, trends and actions produced for one file.

    Remote summarizers answer metrics/trends/actions as free text, so each of
    those fields is either a list or a plain string.
    """

    summary: str
    metrics: list[Metric] | str = field(default_factory=list)
    trends: list[str] | str = field(default_factory=list)
    actions: list[str] | str = field(default_factory=list)
    source: str = "deterministic"

    def to_dict(self) -> dict[str, Any]:
        """JSONB-ready representation stored alongside the report."""
        payload = asdict(self)
        if isinstance(self.metrics, list):
            payload["metrics"] = [metric.to_dict() for metric in self.metrics]
        return payload
