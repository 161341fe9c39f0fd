from infrastructure.matching.coverage_matcher import CoverageMatcher
from infrastructure.matching.levenshtein_matcher import LevenshteinMatcher

__all__ = ["CoverageMatcher", "LevenshteinMatcher"]
