"""Department inference from product names."""

import re
from typing import Iterable

from .config import NO_DEPARTMENT, MIN_KEYWORD_LENGTH, MISSING_DEPARTMENT_LABELS
from .models import NormalizedRow
from .normalizer import normalize_header

_WORD_RE = re.compile(r"\w+")


def is_missing_department(department: str) -> bool:
    """Whether a department label means "no department"."""
    return normalize_header(department) in MISSING_DEPARTMENT_LABELS


def extract_keywords(product_name: str) -> list[str]:
    """
    Split a product name into lowercase keywords.

    Example: "Guante Quirúrgico Latex M" -> ["guante", "quirúrgico", "latex"]
    """
    if not product_name:
        return []
    return [
        word for word in _WORD_RE.findall(str(product_name).lower())
        if len(word) >= MIN_KEYWORD_LENGTH
    ]


class DepartmentInferencer:
    """
    Guesses a department for products exported without one.

    Build phase: every row that carries a real department contributes the
    keywords of its product name to that department's keyword set.

    Query phase: each department scores one point per keyword found as a
    substring of the queried name. Highest score wins; ties go to the
    department that was indexed first. Zero everywhere gives NO_DEPARTMENT.
    """

    def __init__(self):
        # dicts keep insertion order for both departments and keywords
        self._keywords: dict[str, dict[str, None]] = {}

    @classmethod
    def from_rows(cls, rows: Iterable[NormalizedRow]) -> "DepartmentInferencer":
        """Build an index from rows that already carry a department.

        Rows without a product code are dropped before indexing.
        """
        inferencer = cls()
        for row in rows:
            if not row.product_code:
                continue
            inferencer.add(row.department, row.product_name)
        return inferencer

    def add(self, department: str, product_name: str):
        """Index one labelled product; missing departments or names are ignored."""
        if is_missing_department(department) or not str(product_name or "").strip():
            return
        keywords = self._keywords.setdefault(department, {})
        for word in extract_keywords(product_name):
            keywords[word] = None

    @property
    def departments(self) -> list[str]:
        """Indexed departments in build order."""
        return list(self._keywords)

    def keywords_for(self, department: str) -> set[str]:
        """Keyword set of a department (empty if unknown)."""
        return set(self._keywords.get(department, {}))

    def infer(self, product_name: str) -> str:
        """Return the best matching department for a product name."""
        name = str(product_name or "").lower()
        if not name:
            return NO_DEPARTMENT

        best_department = NO_DEPARTMENT
        best_score = 0
        for department, keywords in self._keywords.items():
            score = sum(1 for word in keywords if word in name)
            # Strict comparison keeps the first department on ties
            if score > best_score:
                best_department = department
                best_score = score
        return best_department

    def resolve(self, department: str, product_name: str) -> str:
        """Keep a real department, infer one otherwise."""
        if is_missing_department(department):
            return self.infer(product_name)
        return department
