from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Sequence
from uuid import uuid4

from application.evaluation.metrics import aggregate_mean, case_metrics
from application.evaluation.models import CaseResult, EvaluationRun, EvaluationSuite
from domain.entities import ScoredEntry

logger = logging.getLogger(__name__)

SearchCallable = Callable[[str], Sequence[ScoredEntry]]


def run_evaluation(
    suite: EvaluationSuite,
    search_fn: SearchCallable,
    *,
    top_k: int = 10,
    fuzzy_strategy: str = "coverage",
) -> EvaluationRun:
    """Run every labelled query through ``search_fn`` and score the rankings."""

    case_results: list[CaseResult] = []
    for case in suite.cases:
        results = list(search_fn(case.query_text))[:top_k]
        ranked_ids = [result.entry.id for result in results]
        case_results.append(
            CaseResult(
                case_id=case.id,
                ranked_product_ids=ranked_ids,
                scores=[result.score for result in results],
                matched_fields=[result.matched_field.value if result.matched_field else None for result in results],
                metrics=case_metrics(ranked_ids, case.relevant_ids, case.gains, top_k),
            )
        )

    aggregate = aggregate_mean([result.metrics for result in case_results])
    logger.info("Evaluated %d queries of suite %s: %s", len(case_results), suite.name, aggregate)
    return EvaluationRun(
        id=str(uuid4()),
        suite_id=suite.id,
        fuzzy_strategy=fuzzy_strategy,
        top_k=top_k,
        created_at=datetime.now(timezone.utc),
        case_results=case_results,
        aggregate_metrics=aggregate,
    )
