from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True)
class RelevanceLabel:
    product_id: str
    grade: int = 1


@dataclass(slots=True)
class QueryCase:
    id: str
    query_text: str
    relevance_labels: list[RelevanceLabel] = field(default_factory=list)

    @property
    def relevant_ids(self) -> set[str]:
        return {label.product_id for label in self.relevance_labels if label.grade > 0}

    @property
    def gains(self) -> dict[str, int]:
        return {label.product_id: int(label.grade) for label in self.relevance_labels}


@dataclass(slots=True)
class EvaluationSuite:
    id: str
    name: str
    description: str = ""
    cases: list[QueryCase] = field(default_factory=list)


@dataclass(slots=True)
class CaseResult:
    case_id: str
    ranked_product_ids: list[str]
    scores: list[float] = field(default_factory=list)
    matched_fields: list[str | None] = field(default_factory=list)
    metrics: dict[str, float] = field(default_factory=dict)


@dataclass(slots=True)
class EvaluationRun:
    id: str
    suite_id: str
    fuzzy_strategy: str
    top_k: int
    created_at: datetime
    case_results: list[CaseResult] = field(default_factory=list)
    aggregate_metrics: dict[str, float] = field(default_factory=dict)
