"""Ranking quality metrics over ordered product ids."""
from __future__ import annotations

import math


def precision_at_k(ranked_ids: list[str], relevant_ids: set[str], k: int) -> float:
    top = ranked_ids[:k] if k > 0 else []
    if not top:
        return 0.0
    return sum(1 for product_id in top if product_id in relevant_ids) / len(top)


def recall_at_k(ranked_ids: list[str], relevant_ids: set[str], k: int) -> float:
    if not relevant_ids:
        return 0.0
    found = relevant_ids.intersection(ranked_ids[:k])
    return len(found) / len(relevant_ids)


def hit_at_k(ranked_ids: list[str], relevant_ids: set[str], k: int) -> float:
    return 1.0 if relevant_ids.intersection(ranked_ids[:k]) else 0.0


def mrr_at_k(ranked_ids: list[str], relevant_ids: set[str], k: int) -> float:
    for position, product_id in enumerate(ranked_ids[:k], start=1):
        if product_id in relevant_ids:
            return 1.0 / position
    return 0.0


def _dcg(ids: list[str], gains: dict[str, int], k: int) -> float:
    total = 0.0
    for position, product_id in enumerate(ids[:k], start=1):
        grade = gains.get(product_id, 0)
        if grade > 0:
            total += (2**grade - 1) / math.log2(position + 1)
    return total


def ndcg_at_k(ranked_ids: list[str], gains: dict[str, int], k: int) -> float:
    if k <= 0:
        return 0.0
    ideal = _dcg(sorted(gains, key=gains.__getitem__, reverse=True), gains, k)
    if ideal == 0:
        return 0.0
    return _dcg(ranked_ids, gains, k) / ideal


def case_metrics(ranked_ids: list[str], relevant_ids: set[str], gains: dict[str, int], k: int) -> dict[str, float]:
    return {
        f"precision@{k}": precision_at_k(ranked_ids, relevant_ids, k),
        f"recall@{k}": recall_at_k(ranked_ids, relevant_ids, k),
        f"hit@{k}": hit_at_k(ranked_ids, relevant_ids, k),
        f"mrr@{k}": mrr_at_k(ranked_ids, relevant_ids, k),
        f"ndcg@{k}": ndcg_at_k(ranked_ids, gains, k),
    }


def aggregate_mean(metrics: list[dict[str, float]]) -> dict[str, float]:
    if not metrics:
        return {}
    keys = sorted(set().union(*metrics))
    return {key: sum(m[key] for m in metrics if key in m) / sum(1 for m in metrics if key in m) for key in keys}
