"""
Level Classifier

Derives practice and complexity signals from the file records and assigns
a junior / middle / senior label through a strict descending AND-gate.
Nothing is remembered between runs.
"""

import re
from typing import Callable, Optional, Sequence

from assessor.models import CategoryResult, FileRecord, LevelAnalysis, LEVELS
from assessor.rules.base import calculate_complexity

# Overall score each level starts at
LEVEL_MIN_SCORES = {"junior": 60, "middle": 75, "senior": 85}

# Minimums per gated signal: overall, practice, architecture %, complexity
SENIOR_GATE = (85, 80, 80, 70)
MIDDLE_GATE = (75, 65, 60, 50)

# (max mean complexity, score); anything above the last bound scores 20
COMPLEXITY_BANDS = ((5, 100), (10, 80), (15, 60), (20, 40))
COMPLEXITY_FLOOR = 20

# (max score gap, band)
TIME_BANDS = ((5, "1-2 months"), (15, "3-6 months"), (25, "6-12 months"))
LONGEST_TIME_BAND = "1-2 years"
MAX_LEVEL_REACHED = "max level reached"

STRENGTH_THRESHOLD = 80
WEAKNESS_THRESHOLD = 60

LEVEL_STEPS = {
    ("junior", "middle"): [
        "Learn advanced JavaScript/TypeScript concepts",
        "Master testing (Jest, Testing Library)",
        "Study design patterns",
        "Improve code architecture",
        "Learn build and optimization tooling",
    ],
    ("middle", "senior"): [
        "Deepen knowledge of architectural patterns",
        "Study SOLID principles and Clean Code",
        "Master performance optimization",
        "Develop code review skills",
        "Study security best practices",
        "Work on soft skills and mentoring",
    ],
}


def _any_file(pattern: str) -> Callable[[Sequence[FileRecord]], bool]:
    regex = re.compile(pattern)
    return lambda files: any(regex.search(f.content) for f in files)


def _has_code_organization(files: Sequence[FileRecord]) -> bool:
    types = {f.type for f in files}
    return "component" in types and bool(types & {"service", "utility"})


# (name, condition over the corpus, points); points sum to 100
PRACTICE_CHECKS = (
    ("TypeScript Usage", lambda files: any(f.path.endswith((".ts", ".tsx")) for f in files), 20),
    ("Error Handling", _any_file(r"try\s*{|catch\s*\("), 15),
    ("Async/Await", _any_file(r"async\s+|await\s+"), 10),
    ("Modern ES6+", _any_file(r"const\s+|let\s+|arrow functions|destructuring"), 10),
    ("Documentation", _any_file(r"/\*\*[\s\S]*?\*/"), 15),
    ("Testing", lambda files: any(f.type == "test" for f in files), 20),
    ("Code Organization", _has_code_organization, 10),
)


def practice_score(files: Sequence[FileRecord]) -> int:
    """Sum of points for every practice shown by at least one file."""
    return sum(points for _, check, points in PRACTICE_CHECKS if check(files))


def complexity_score(files: Sequence[FileRecord]) -> int:
    """Step score of the mean per-file complexity; lower complexity scores higher."""
    if not files:
        return COMPLEXITY_FLOOR

    mean = sum(calculate_complexity(f.content) for f in files) / len(files)
    for bound, score in COMPLEXITY_BANDS:
        if mean <= bound:
            return score
    return COMPLEXITY_FLOOR


def classify(overall: int, practice: int, architecture: int, complexity: int) -> str:
    """The tier gate: every signal must clear its minimum, first tier wins."""
    signals = (overall, practice, architecture, complexity)
    if all(value >= minimum for value, minimum in zip(signals, SENIOR_GATE)):
        return "senior"
    if all(value >= minimum for value, minimum in zip(signals, MIDDLE_GATE)):
        return "middle"
    return "junior"


def next_level(level: str) -> str:
    index = LEVELS.index(level)
    return LEVELS[min(index + 1, len(LEVELS) - 1)]


def time_to_next_level(level: str, overall: int) -> str:
    target = next_level(level)
    if target == level:
        return MAX_LEVEL_REACHED

    gap = LEVEL_MIN_SCORES[target] - overall
    for bound, band in TIME_BANDS:
        if gap <= bound:
            return band
    return LONGEST_TIME_BAND


def level_recommendations(current: str, target: Optional[str] = None) -> list[str]:
    target = target or next_level(current)
    return list(LEVEL_STEPS.get((current, target), []))


class LevelClassifier:
    """Assigns a level label and explains it"""

    def __init__(self, target_level: Optional[str] = None):
        if target_level is not None and target_level not in LEVELS:
            raise ValueError(f"Unknown level: {target_level}")
        self.target_level = target_level

    def determine_level(
        self,
        overall_score: int,
        categories: dict[str, CategoryResult],
        files: Sequence[FileRecord],
    ) -> str:
        return classify(
            overall_score,
            practice_score(files),
            categories["architecture"].percentage,
            complexity_score(files),
        )

    def analyze(
        self,
        overall_score: int,
        categories: dict[str, CategoryResult],
        files: Sequence[FileRecord],
    ) -> LevelAnalysis:
        """
        Build the detailed level view.

        Args:
            overall_score: Weighted overall score
            categories: Category results keyed by name
            files: The assessed file records

        Returns:
            LevelAnalysis with strengths, weaknesses, next steps and time band
        """
        practice = practice_score(files)
        complexity = complexity_score(files)
        level = classify(overall_score, practice, categories["architecture"].percentage, complexity)

        strengths, weaknesses = [], []
        for name, result in categories.items():
            if result.percentage >= STRENGTH_THRESHOLD:
                strengths.append(name)
            elif result.percentage < WEAKNESS_THRESHOLD:
                weaknesses.append(name)

        if practice >= STRENGTH_THRESHOLD:
            strengths.append("modern_practices")
        elif practice < WEAKNESS_THRESHOLD:
            weaknesses.append("modern_practices")

        return LevelAnalysis(
            current_level=level,
            practice_score=practice,
            complexity_score=complexity,
            strengths=strengths,
            weaknesses=weaknesses,
            next_steps=level_recommendations(level, self.target_level),
            time_to_next_level=time_to_next_level(level, overall_score),
        )
