"""
Rule Engine - shared pieces for every category.

A category is a name plus a fixed, ordered tuple of Rule records. Every
rule is evaluated against every file; failures become Issues.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Pattern, Union

from assessor.models import CategoryResult, FileRecord, Issue, Rule, RuleOutcome

logger = logging.getLogger(__name__)

PatternLike = Union[str, Pattern]

COMPLEXITY_PATTERNS = (
    re.compile(r"if\s*\("),
    re.compile(r"else\s*if\s*\("),
    re.compile(r"while\s*\("),
    re.compile(r"for\s*\("),
    re.compile(r"catch\s*\("),
    re.compile(r"case\s+"),
    re.compile(r"&&"),
    re.compile(r"\|\|"),
)


@dataclass(frozen=True)
class Category:
    """A quality dimension with its ordered rules."""
    name: str
    title: str
    rules: tuple[Rule, ...]

    def analyze(self, files: Iterable[FileRecord]) -> CategoryResult:
        """Run every rule against every file, in declared order."""
        result = CategoryResult(name=self.name)

        for file in files:
            for rule in self.rules:
                result.max_score += rule.weight
                outcome = rule.check(file)

                if outcome.passed:
                    result.score += rule.weight
                else:
                    result.issues.append(Issue(
                        rule_id=rule.id,
                        file_path=file.path,
                        severity=rule.severity,
                        message=outcome.message,
                        line=outcome.line,
                        column=outcome.column,
                    ))

        logger.debug("%s: %d/%d, %d issues", self.name, result.score,
                     result.max_score, len(result.issues))
        return result


# ========== Predicate helpers ==========

def passed(message: str = "OK") -> RuleOutcome:
    return RuleOutcome(passed=True, message=message)


def failed(message: str) -> RuleOutcome:
    return RuleOutcome(passed=False, message=message)


def check_regex(content: str, pattern: PatternLike, message: str) -> RuleOutcome:
    """Fail on the first match, reporting where it starts."""
    match = re.search(pattern, content)
    if match:
        before = content[:match.start()]
        return RuleOutcome(
            passed=False,
            message=message,
            line=before.count("\n") + 1,
            column=len(before.rsplit("\n", 1)[-1]),
        )
    return passed()


def count_occurrences(content: str, pattern: PatternLike) -> int:
    return sum(1 for _ in re.finditer(pattern, content))


def has_match(content: str, pattern: PatternLike) -> bool:
    return re.search(pattern, content) is not None


def calculate_complexity(content: str) -> int:
    """Rough cyclomatic complexity: 1 + branch/loop/catch/case/logical tokens."""
    return 1 + sum(count_occurrences(content, p) for p in COMPLEXITY_PATTERNS)
