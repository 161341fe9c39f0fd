"""Run a labelled query suite against a catalog file and print ranking metrics."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from uuid import uuid4

from application.evaluation import EvaluationSuite, QueryCase, RelevanceLabel, run_evaluation
from application.use_cases.search import rank
from infrastructure.catalog.json_catalog_source import JsonFileCatalogSource
from infrastructure.config import ContainerConfig, build_default_container
from ui.logging_utils import setup_logging


def load_suite(path: Path) -> EvaluationSuite:
    """Read ``{"name": ..., "cases": [{"query": ..., "relevant": {"id": grade}}]}``."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    cases = []
    for index, raw in enumerate(payload.get("cases", [])):
        relevant = raw.get("relevant", {})
        if isinstance(relevant, list):
            relevant = {product_id: 1 for product_id in relevant}
        cases.append(
            QueryCase(
                id=str(raw.get("id", index)),
                query_text=raw["query"],
                relevance_labels=[RelevanceLabel(product_id=str(pid), grade=int(grade)) for pid, grade in relevant.items()],
            )
        )
    return EvaluationSuite(id=str(uuid4()), name=payload.get("name", path.stem), cases=cases)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--catalog", required=True, help="JSON file with product records")
    parser.add_argument("--suite", required=True, help="JSON file with labelled queries")
    parser.add_argument("--top-k", type=int, default=10, help="Cut-off for metrics (default: 10)")
    parser.add_argument(
        "--fuzzy-strategy",
        choices=("coverage", "levenshtein"),
        default="coverage",
        help="Fuzzy matcher to evaluate (default: coverage)",
    )
    parser.add_argument("--verbose", action="store_true", help="Print per-query rankings.")
    return parser.parse_args()


def main() -> None:
    setup_logging()
    args = parse_args()
    container = build_default_container(ContainerConfig(fuzzy_strategy=args.fuzzy_strategy))
    catalog = container.catalog.refresh(JsonFileCatalogSource(args.catalog))
    suite = load_suite(Path(args.suite))

    run = run_evaluation(
        suite,
        lambda query_text: rank(query_text, catalog, ranker=container.ranker),
        top_k=args.top_k,
        fuzzy_strategy=args.fuzzy_strategy,
    )

    if args.verbose:
        for case, result in zip(suite.cases, run.case_results):
            print(f"{case.query_text!r}: {result.ranked_product_ids}")
    for name, value in run.aggregate_metrics.items():
        print(f"{name}: {value:.3f}")


if __name__ == "__main__":
    main()
