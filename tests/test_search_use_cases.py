import os
import unittest
from unittest import mock

from application.use_cases import search
from application.use_cases.filter_results import (
    ResultFilters,
    SortOrder,
    apply_filters,
    filter_options,
    matches_filters,
    sort_results,
)
from application.use_cases.search import rank, search_products, suggest
from domain.entities import CatalogEntry, ScoredEntry
from infrastructure.config import ContainerConfig, build_default_container

CATALOG = [
    CatalogEntry(id="1", name="Nike Air Max 90", brand="Nike", price=349.0, gender="men", type="everyday"),
    CatalogEntry(id="2", name="Nike Pegasus", brand="Nike", price=299.0, gender="female", type="running"),
    CatalogEntry(id="3", name="Nike Mercurial", brand="Nike", price=None, gender="unisex", type="football"),
    CatalogEntry(id="4", name="Adidas Superstar", brand="Adidas", price=279.0, gender="women", type="everyday"),
]


def _scored(*entries: CatalogEntry) -> list[ScoredEntry]:
    return [ScoredEntry(entry=entry, score=float(len(entries) - i)) for i, entry in enumerate(entries)]


class TestFilters(unittest.TestCase):
    def test_empty_filters_keep_everything(self):
        results = _scored(*CATALOG)
        self.assertEqual(apply_filters(results, ResultFilters()), results)
        self.assertEqual(apply_filters(results, None), results)

    def test_brand_filter(self):
        kept = apply_filters(_scored(*CATALOG), ResultFilters(brands=["Adidas"]))
        self.assertEqual([r.entry.id for r in kept], ["4"])

    def test_georgian_gender_labels(self):
        filters = ResultFilters(genders=["მდედრობითი"])
        self.assertTrue(matches_filters(CATALOG[1], filters))
        self.assertTrue(matches_filters(CATALOG[3], filters))
        self.assertFalse(matches_filters(CATALOG[0], filters))
        self.assertTrue(matches_filters(CATALOG[2], ResultFilters(genders=["უნისექს"])))

    def test_type_filter_is_case_insensitive(self):
        self.assertTrue(matches_filters(CATALOG[1], ResultFilters(types=["Running"])))
        self.assertTrue(matches_filters(CATALOG[2], ResultFilters(types=["ფეხბურთი"])))
        self.assertFalse(matches_filters(CATALOG[0], ResultFilters(types=["სავარჯიშო"])))

    def test_price_range_treats_missing_price_as_zero(self):
        filters = ResultFilters(price_min=280, price_max=350)
        kept = apply_filters(_scored(*CATALOG), filters)
        self.assertEqual([r.entry.id for r in kept], ["1", "2"])
        self.assertTrue(matches_filters(CATALOG[2], ResultFilters(price_max=0)))


class TestSorting(unittest.TestCase):
    def setUp(self):
        self.results = _scored(*CATALOG)

    def test_relevance_keeps_order(self):
        self.assertEqual(sort_results(self.results, SortOrder.RELEVANCE), self.results)

    def test_price_orders(self):
        low = [r.entry.id for r in sort_results(self.results, "price-low")]
        high = [r.entry.id for r in sort_results(self.results, SortOrder.PRICE_HIGH)]
        self.assertEqual(low, ["3", "4", "2", "1"])
        self.assertEqual(high, ["1", "2", "4", "3"])

    def test_name_and_brand(self):
        self.assertEqual([r.entry.id for r in sort_results(self.results, "name")], ["4", "1", "3", "2"])
        self.assertEqual([r.entry.id for r in sort_results(self.results, "brand")], ["4", "1", "2", "3"])

    def test_unknown_order_is_rejected(self):
        with self.assertRaises(ValueError):
            sort_results(self.results, "popularity")


class TestFilterOptions(unittest.TestCase):
    def test_counts(self):
        options = filter_options(CATALOG)
        self.assertEqual(options["brands"], {"Nike": 3, "Adidas": 1})
        self.assertEqual(options["types"], {"everyday": 2, "running": 1, "football": 1})
        self.assertEqual(sum(options["genders"].values()), 4)


class TestSearchUseCases(unittest.TestCase):
    def setUp(self):
        self.container = build_default_container(ContainerConfig())

    def test_suggest_truncates(self):
        catalog = [CatalogEntry(id=str(i), name=f"Nike Model {i}") for i in range(15)]
        results = suggest("nike", catalog, ranker=self.container.ranker, limit=10)
        self.assertEqual(len(results), 10)
        self.assertEqual(results[0].entry.id, "0")

    def test_suggest_empty_query(self):
        self.assertEqual(suggest("  ", CATALOG, ranker=self.container.ranker), [])

    def test_search_products_filters_after_ranking(self):
        results = search_products(
            "nike",
            CATALOG,
            ranker=self.container.ranker,
            filters=ResultFilters(types=["running", "football"]),
            sort_by=SortOrder.PRICE_HIGH,
        )
        self.assertEqual([r.entry.id for r in results], ["2", "3"])

    def test_search_products_limit(self):
        results = search_products("nike", CATALOG, ranker=self.container.ranker, limit=1)
        self.assertEqual(len(results), 1)

    def test_both_call_sites_agree(self):
        page = search_products("nike", CATALOG, ranker=self.container.ranker)
        dropdown = suggest("nike", CATALOG, ranker=self.container.ranker, limit=len(CATALOG))
        self.assertEqual([(r.entry.id, r.score) for r in page], [(r.entry.id, r.score) for r in dropdown])


class TestDefaultRanker(unittest.TestCase):
    def setUp(self):
        search._default_ranker.cache_clear()
        self.addCleanup(search._default_ranker.cache_clear)

    def test_follows_configured_fuzzy_strategy(self):
        catalog = [CatalogEntry(id="1", name="Nike")]
        with mock.patch.dict(os.environ, {"STORESEARCH_FUZZY_STRATEGY": "levenshtein"}):
            configured = build_default_container(ContainerConfig.from_env())
            self.assertEqual(search._default_ranker().scorer.fuzzy.name, configured.fuzzy_matcher.name)
            self.assertEqual(
                [(r.entry.id, r.score) for r in rank("nkie", catalog)],
                [(r.entry.id, r.score) for r in configured.ranker.rank("nkie", catalog)],
            )

    def test_defaults_to_coverage(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(search._default_ranker().scorer.fuzzy.name, "coverage")


if __name__ == "__main__":
    unittest.main()
