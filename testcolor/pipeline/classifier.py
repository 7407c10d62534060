"""Ordered recognition rules mapping a go test output line to a category."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from testcolor.pipeline.matching import contains, has_prefix
from testcolor.utils.types import Category, LineView

RUN = b"=== RUN"
DASH_PASS = b"--- PASS"
PASS = b"PASS"
OK = b"ok"
DASH_FAIL = b"--- FAIL"
FAIL = b"FAIL"
DASH_SKIP = b"--- SKIP"
QUESTION = b"?"
UNDERSCORE_TEST = b"_test.go"
COLON = b":"


@dataclass(frozen=True)
class CategoryRule:
    category: Category
    pattern: bytes
    anywhere: bool = False

    def matches(self, view: LineView) -> bool:
        if self.anywhere:
            return contains(view, self.pattern)
        return has_prefix(view, self.pattern)


# First match wins; the substring rule for source references comes last.
RULES: Tuple[CategoryRule, ...] = (
    CategoryRule(Category.RUN_START, RUN),
    CategoryRule(Category.TEST_PASS, DASH_PASS),
    CategoryRule(Category.PACKAGE_PASS, PASS),
    CategoryRule(Category.RESULT_OK, OK),
    CategoryRule(Category.TEST_FAIL, DASH_FAIL),
    CategoryRule(Category.PACKAGE_FAIL, FAIL),
    CategoryRule(Category.TEST_SKIP, DASH_SKIP),
    CategoryRule(Category.BUILD_SKIP, QUESTION),
    CategoryRule(Category.SOURCE_REFERENCE, UNDERSCORE_TEST, anywhere=True),
)


def classify(view: LineView) -> Category:
    for rule in RULES:
        if rule.matches(view):
            return rule.category
    return Category.OTHER
