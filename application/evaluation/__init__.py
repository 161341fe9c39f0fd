from application.evaluation.metrics import (
    aggregate_mean,
    case_metrics,
    hit_at_k,
    mrr_at_k,
    ndcg_at_k,
    precision_at_k,
    recall_at_k,
)
from application.evaluation.models import CaseResult, EvaluationRun, EvaluationSuite, QueryCase, RelevanceLabel
from application.evaluation.runner import run_evaluation

__all__ = [
    "RelevanceLabel",
    "QueryCase",
    "EvaluationSuite",
    "CaseResult",
    "EvaluationRun",
    "precision_at_k",
    "recall_at_k",
    "hit_at_k",
    "mrr_at_k",
    "ndcg_at_k",
    "case_metrics",
    "aggregate_mean",
    "run_evaluation",
]
