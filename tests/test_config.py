import unittest

from domain.entities import CatalogEntry, SearchField
from infrastructure.catalog.http_catalog_source import HttpCatalogSource
from infrastructure.catalog.in_memory_catalog_source import InMemoryCatalogSource
from infrastructure.catalog.json_catalog_source import JsonFileCatalogSource
from infrastructure.config import ContainerConfig, build_default_container
from infrastructure.matching.coverage_matcher import CoverageMatcher
from infrastructure.matching.levenshtein_matcher import LevenshteinMatcher


class TestContainer(unittest.TestCase):
    def test_defaults(self):
        container = build_default_container()
        self.assertIsInstance(container.fuzzy_matcher, CoverageMatcher)
        self.assertIsInstance(container.catalog_source, InMemoryCatalogSource)
        self.assertIs(container.scorer.fuzzy, container.fuzzy_matcher)
        self.assertEqual(container.ranker.field_weights[SearchField.NAME], 1.0)
        self.assertEqual(container.catalog.current(), ())

    def test_levenshtein_strategy(self):
        container = build_default_container(ContainerConfig(fuzzy_strategy="levenshtein"))
        self.assertIsInstance(container.fuzzy_matcher, LevenshteinMatcher)
        catalog = [CatalogEntry(id="1", name="Running Shoes"), CatalogEntry(id="2", name="Puma Suede")]
        results = container.ranker.rank("runing", catalog)
        self.assertEqual([result.entry.id for result in results], ["1"])

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError):
            build_default_container(ContainerConfig(fuzzy_strategy="soundex"))  # type: ignore[arg-type]

    def test_invalid_suggestion_limit(self):
        with self.assertRaises(ValueError):
            build_default_container(ContainerConfig(suggestion_limit=0))

    def test_field_weights_keep_name_above_brand_above_secondary(self):
        ordered = {SearchField.NAME: 1.0, SearchField.BRAND: 1.0, SearchField.CATEGORY: 0.4, SearchField.DESCRIPTION: 0.0}
        container = build_default_container(ContainerConfig(field_weights=ordered))
        self.assertEqual(container.ranker.field_weights[SearchField.BRAND], 1.0)
        for weights in (
            {SearchField.NAME: 1.0, SearchField.BRAND: 2.0, SearchField.CATEGORY: 0.5},
            {SearchField.NAME: 1.0, SearchField.BRAND: 0.9, SearchField.DESCRIPTION: 0.9},
            {SearchField.NAME: 1.0, SearchField.BRAND: -0.1},
        ):
            with self.subTest(weights=weights), self.assertRaises(ValueError):
                build_default_container(ContainerConfig(field_weights=weights))

    def test_brand_weight_from_env_is_validated(self):
        cfg = ContainerConfig.from_env({"STORESEARCH_WEIGHT_BRAND": "2"})
        with self.assertRaises(ValueError):
            build_default_container(cfg)

    def test_catalog_source_selection(self):
        by_path = build_default_container(ContainerConfig(catalog_path="data/sample_catalog.json"))
        by_url = build_default_container(ContainerConfig(catalog_url="http://shop.test", catalog_path="ignored.json"))
        self.assertIsInstance(by_path.catalog_source, JsonFileCatalogSource)
        self.assertIsInstance(by_url.catalog_source, HttpCatalogSource)


class TestConfigFromEnv(unittest.TestCase):
    def test_reads_prefixed_variables(self):
        cfg = ContainerConfig.from_env(
            {
                "STORESEARCH_FUZZY_STRATEGY": "levenshtein",
                "STORESEARCH_SUGGESTION_LIMIT": "5",
                "STORESEARCH_CATALOG_PATH": "/tmp/catalog.json",
                "STORESEARCH_REQUEST_TIMEOUT": "2.5",
                "STORESEARCH_WEIGHT_BRAND": "0.8",
            }
        )
        self.assertEqual(cfg.fuzzy_strategy, "levenshtein")
        self.assertEqual(cfg.suggestion_limit, 5)
        self.assertEqual(cfg.catalog_path, "/tmp/catalog.json")
        self.assertIsNone(cfg.catalog_url)
        self.assertEqual(cfg.request_timeout, 2.5)
        self.assertEqual(cfg.field_weights[SearchField.BRAND], 0.8)
        self.assertEqual(cfg.field_weights[SearchField.NAME], 1.0)

    def test_empty_environment_gives_defaults(self):
        cfg = ContainerConfig.from_env({})
        self.assertEqual(cfg.fuzzy_strategy, "coverage")
        self.assertEqual(cfg.suggestion_limit, 10)

    def test_invalid_number(self):
        with self.assertRaises(ValueError):
            ContainerConfig.from_env({"STORESEARCH_SUGGESTION_LIMIT": "many"})

    def test_invalid_weight_names_variable(self):
        with self.assertRaisesRegex(ValueError, "STORESEARCH_WEIGHT_BRAND"):
            ContainerConfig.from_env({"STORESEARCH_WEIGHT_BRAND": "heavy"})


if __name__ == "__main__":
    unittest.main()
