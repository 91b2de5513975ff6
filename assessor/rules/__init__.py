"""Rule categories, in evaluation order."""

from assessor.rules.base import Category, calculate_complexity, check_regex, count_occurrences
from assessor.rules.code_quality import CODE_QUALITY
from assessor.rules.performance import PERFORMANCE
from assessor.rules.architecture import ARCHITECTURE
from assessor.rules.best_practices import BEST_PRACTICES
from assessor.rules.maintainability import MAINTAINABILITY

CATEGORIES = (
    CODE_QUALITY,
    PERFORMANCE,
    ARCHITECTURE,
    BEST_PRACTICES,
    MAINTAINABILITY,
)

# Percent weights of each category in the overall score; they sum to 100
CATEGORY_WEIGHTS = {
    "code_quality": 25,
    "performance": 20,
    "architecture": 20,
    "best_practices": 20,
    "maintainability": 15,
}


def get_category(name: str) -> Category:
    for category in CATEGORIES:
        if category.name == name:
            return category
    raise ValueError(f"Unknown category: {name}")


__all__ = [
    "Category",
    "CATEGORIES",
    "CATEGORY_WEIGHTS",
    "CODE_QUALITY",
    "PERFORMANCE",
    "ARCHITECTURE",
    "BEST_PRACTICES",
    "MAINTAINABILITY",
    "get_category",
    "calculate_complexity",
    "check_regex",
    "count_occurrences",
]
