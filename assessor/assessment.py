"""
Assessment Orchestrator

Runs every rule category over the file records and combines the results:
- Weighted overall score
- Per-file rollups and suggestions
- Recommendations for weak categories
- Level label and detailed level analysis
"""

import logging
from typing import Callable, Iterable, Optional, Sequence

from assessor.classifier import build_file_record
from assessor.config import AssessmentConfig
from assessor.discovery import read_project_files
from assessor.level_classifier import LevelClassifier
from assessor.models import (
    AssessmentResult,
    CategoryResult,
    FileRecord,
    FileResult,
    Issue,
    Recommendation,
    round_half_up,
)
from assessor.rules import CATEGORIES, CATEGORY_WEIGHTS, Category

logger = logging.getLogger(__name__)

RECOMMENDATION_THRESHOLD = 70
HIGH_PRIORITY_THRESHOLD = 50
ISSUE_PENALTY = 10

LARGE_FILE_LINES = 300
LARGE_COMPONENT_BYTES = 10000

CATEGORY_EXAMPLES = {
    "code_quality": [
        "Use linters (ESLint, Prettier)",
        "Follow SOLID principles",
        "Write clean and readable code",
    ],
    "performance": [
        "Use lazy loading for components",
        "Optimize images",
        "Minimize bundle size",
    ],
    "architecture": [
        "Apply design patterns",
        "Separate responsibilities",
        "Use modular architecture",
    ],
    "best_practices": [
        "Follow framework conventions",
        "Use TypeScript",
        "Cover code with tests",
    ],
    "maintainability": [
        "Document code",
        "Use descriptive names",
        "Avoid code duplication",
    ],
}


def score_status(score: int) -> str:
    if score >= 80:
        return "excellent"
    elif score >= 60:
        return "good"
    elif score >= 40:
        return "warning"
    else:
        return "critical"


def overall_score(categories: dict[str, CategoryResult]) -> int:
    """Weighted mean of category percentages, rounded half-up."""
    weighted = sum(CATEGORY_WEIGHTS[name] * result.percentage for name, result in categories.items())
    total_weight = sum(CATEGORY_WEIGHTS[name] for name in categories)
    return round_half_up(weighted, total_weight)


def file_score(issue_count: int) -> int:
    return max(0, 100 - ISSUE_PENALTY * issue_count)


def build_recommendation(name: str, title: str, percentage: int) -> Optional[Recommendation]:
    """One recommendation for a category under the threshold, else None."""
    if percentage >= RECOMMENDATION_THRESHOLD:
        return None

    return Recommendation(
        category=name,
        priority="high" if percentage < HIGH_PRIORITY_THRESHOLD else "medium",
        title=f"Improve {title}",
        description=f"Current result: {percentage}%. Needs attention.",
        examples=list(CATEGORY_EXAMPLES.get(name, [])),
    )


class ProjectAssessor:
    """Performs the assessment over a finalized set of file records"""

    def __init__(
        self,
        categories: Sequence[Category] = CATEGORIES,
        target_level: Optional[str] = None,
        on_progress: Optional[Callable[[str, int, int], None]] = None,
    ):
        self.categories = tuple(categories)
        names = [c.name for c in self.categories]
        if sorted(names) != sorted(CATEGORY_WEIGHTS):
            raise ValueError(f"Categories must be exactly {', '.join(CATEGORY_WEIGHTS)}, "
                             f"got {', '.join(names)}")
        self.level_classifier = LevelClassifier(target_level)
        self.on_progress = on_progress  # Callback: (category_title, step, total_steps) -> None

    def _notify_progress(self, category: str, step: int):
        """Notify progress callback if set"""
        if self.on_progress:
            self.on_progress(category, step, len(self.categories))

    def assess(self, files: Iterable[FileRecord]) -> AssessmentResult:
        """Run complete assessment"""
        files = list(files)

        categories: dict[str, CategoryResult] = {}
        for step, category in enumerate(self.categories, start=1):
            self._notify_progress(category.title, step)
            categories[category.name] = category.analyze(files)

        overall = overall_score(categories)
        level = self.level_classifier.determine_level(overall, categories, files)

        logger.info("Assessed %d files: score %d, level %s", len(files), overall, level)

        return AssessmentResult(
            overall_score=overall,
            level=level,
            categories=categories,
            file_results=self._file_results(files, categories),
            recommendations=self._recommendations(categories),
            summary=self._summary(overall, level, categories),
            level_analysis=self.level_classifier.analyze(overall, categories, files),
        )

    def _file_results(self, files: list[FileRecord], categories: dict[str, CategoryResult]) -> list[FileResult]:
        by_path: dict[str, list[Issue]] = {f.path: [] for f in files}
        for result in categories.values():
            for issue in result.issues:
                by_path[issue.file_path].append(issue)

        return [
            FileResult(
                path=f.path,
                score=file_score(len(by_path[f.path])),
                issues=by_path[f.path],
                suggestions=self._file_suggestions(f, by_path[f.path]),
            )
            for f in files
        ]

    def _file_suggestions(self, file: FileRecord, issues: list[Issue]) -> list[str]:
        suggestions = []
        if file.lines > LARGE_FILE_LINES:
            suggestions.append("Consider splitting file into smaller modules")
        if any(issue.severity == "error" for issue in issues):
            suggestions.append("Fix critical errors first")
        if file.type == "component" and file.size > LARGE_COMPONENT_BYTES:
            suggestions.append("Component is too large, consider decomposition")
        return suggestions

    def _recommendations(self, categories: dict[str, CategoryResult]) -> list[Recommendation]:
        titles = {c.name: c.title for c in self.categories}
        recommendations = []
        for name, result in categories.items():
            rec = build_recommendation(name, titles[name], result.percentage)
            if rec:
                recommendations.append(rec)
        return recommendations

    def _summary(self, overall: int, level: str, categories: dict[str, CategoryResult]) -> str:
        lines = [f"Overall score: {overall}/100 ({level})", "", "Category details:"]
        for category in self.categories:
            lines.append(f"- {category.title}: {categories[category.name].percentage}%")
        return "\n".join(lines)


def assess_project(
    config: AssessmentConfig,
    on_progress: Optional[Callable[[str, int, int], None]] = None,
) -> AssessmentResult:
    """
    Convenience function: discover, read, classify and assess a project.

    Args:
        config: Validated assessment configuration
        on_progress: Optional progress callback

    Returns:
        AssessmentResult
    """
    config.validate()
    records = [
        build_file_record(path, content, config.framework)
        for path, content in read_project_files(config.project_path,
                                                config.include_patterns,
                                                config.exclude_patterns)
    ]
    assessor = ProjectAssessor(target_level=config.target_level, on_progress=on_progress)
    return assessor.assess(records)
