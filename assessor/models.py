"""
Assessment Data Model

Records shared by the classifier, the rule categories, the orchestrator,
the level classifier and the reporters.
"""

from dataclasses import dataclass, field
from typing import Callable, Literal, Optional

Framework = Literal["react", "vue", "angular", "svelte", "vanilla", "unknown"]
FileType = Literal["component", "service", "utility", "config", "test", "other"]
Severity = Literal["error", "warning", "info"]
Level = Literal["junior", "middle", "senior"]
Priority = Literal["high", "medium"]

FRAMEWORKS = ("react", "vue", "angular", "svelte", "vanilla", "unknown")
FILE_TYPES = ("component", "service", "utility", "config", "test", "other")
SEVERITIES = ("error", "warning", "info")
LEVELS = ("junior", "middle", "senior")


def round_half_up(numerator: int, denominator: int) -> int:
    """Round numerator/denominator to the nearest int, halves away from zero.

    Works on integers so that .5 boundaries are exact.
    """
    return (2 * numerator + denominator) // (2 * denominator)


@dataclass(frozen=True)
class FileRecord:
    """A single source file, normalized for the rules"""
    path: str               # Relative, POSIX separators
    content: str
    size: int               # UTF-8 bytes
    lines: int
    framework: str          # One of FRAMEWORKS
    type: str               # One of FILE_TYPES


@dataclass(frozen=True)
class RuleOutcome:
    """Result of running one rule predicate against one file."""
    passed: bool
    message: str
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass(frozen=True)
class Rule:
    """A weighted, named check. `check` must be pure and total."""
    id: str
    name: str
    description: str
    severity: Severity
    weight: int
    check: Callable[[FileRecord], RuleOutcome]


@dataclass(frozen=True)
class Issue:
    """A failed rule outcome tied to one file"""
    rule_id: str
    file_path: str
    severity: Severity
    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def key(self) -> str:
        return f"{self.rule_id}:{self.file_path}"

    def to_dict(self) -> dict:
        data = {
            "rule": self.key,
            "severity": self.severity,
            "message": self.message,
        }
        if self.line is not None:
            data["location"] = {"line": self.line, "column": self.column}
        return data


@dataclass
class CategoryResult:
    """Score for a single quality category"""
    name: str
    score: int = 0
    max_score: int = 0
    issues: list[Issue] = field(default_factory=list)

    @property
    def percentage(self) -> int:
        if self.max_score == 0:
            return 100
        return round_half_up(100 * self.score, self.max_score)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "percentage": self.percentage,
            "issues": [i.to_dict() for i in self.issues],
        }


@dataclass
class FileResult:
    """Per-file rollup"""
    path: str
    score: int
    issues: list[Issue] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "score": self.score,
            "issues": [i.to_dict() for i in self.issues],
            "suggestions": list(self.suggestions),
        }


@dataclass
class Recommendation:
    category: str
    priority: Priority
    title: str
    description: str
    examples: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "priority": self.priority,
            "title": self.title,
            "description": self.description,
            "examples": list(self.examples),
        }


@dataclass
class LevelAnalysis:
    """Detailed view of the level decision"""
    current_level: Level
    practice_score: int
    complexity_score: int
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    next_steps: list[str] = field(default_factory=list)
    time_to_next_level: str = ""

    def to_dict(self) -> dict:
        return {
            "current_level": self.current_level,
            "practice_score": self.practice_score,
            "complexity_score": self.complexity_score,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "next_steps": list(self.next_steps),
            "time_to_next_level": self.time_to_next_level,
        }


@dataclass
class AssessmentResult:
    """Complete assessment of a project"""
    overall_score: int
    level: Level
    categories: dict[str, CategoryResult]
    file_results: list[FileResult]
    recommendations: list[Recommendation]
    summary: str
    level_analysis: Optional[LevelAnalysis] = None

    @property
    def all_issues(self) -> list[Issue]:
        return [issue for cat in self.categories.values() for issue in cat.issues]

    def to_dict(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "level": self.level,
            "categories": {name: cat.to_dict() for name, cat in self.categories.items()},
            "file_results": [f.to_dict() for f in self.file_results],
            "recommendations": [r.to_dict() for r in self.recommendations],
            "summary": self.summary,
            "level_analysis": self.level_analysis.to_dict() if self.level_analysis else None,
        }
