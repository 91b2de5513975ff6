"""Code quality rules: naming, function size, complexity, literals, duplication, comments."""

import re
from collections import Counter

from assessor.models import FileRecord, Rule, RuleOutcome
from assessor.rules.base import (
    Category,
    calculate_complexity,
    check_regex,
    count_occurrences,
    failed,
    passed,
)

BAD_NAMING = re.compile(r"\b(var|let|const|function)\s+[A-Z_][a-zA-Z0-9_]*\s*[=(]")
FUNCTION_BODY = re.compile(r"function\s+\w+[^{]*{[^}]*}")
MAGIC_NUMBER = re.compile(r"\b(?!0|1|2|10|100|1000)\d{2,}\b")
COMMENT_MARKER = re.compile(r"//|/\*|\*/")

MAX_FUNCTION_LINES = 50
MAX_COMPONENT_COMPLEXITY = 15
MAX_COMPLEXITY = 10
MAX_MAGIC_NUMBERS = 3


def check_naming(file: FileRecord) -> RuleOutcome:
    return check_regex(file.content, BAD_NAMING,
                       "Variables and functions should use camelCase names")


def check_function_length(file: FileRecord) -> RuleOutcome:
    long_functions = [
        body for body in FUNCTION_BODY.findall(file.content)
        if body.count("\n") + 1 > MAX_FUNCTION_LINES
    ]
    if long_functions:
        return failed(f"Found {len(long_functions)} functions longer than "
                      f"{MAX_FUNCTION_LINES} lines")
    return passed("Function length is acceptable")


def check_complexity(file: FileRecord) -> RuleOutcome:
    complexity = calculate_complexity(file.content)
    limit = MAX_COMPONENT_COMPLEXITY if file.type == "component" else MAX_COMPLEXITY

    if complexity > limit:
        return failed(f"Cyclomatic complexity {complexity} exceeds {limit}")
    return passed("Complexity is acceptable")


def check_magic_numbers(file: FileRecord) -> RuleOutcome:
    count = count_occurrences(file.content, MAGIC_NUMBER)
    if count > MAX_MAGIC_NUMBERS:
        return failed(f"Found {count} magic numbers, move them into named constants")
    return passed("No magic numbers found")


def check_duplication(file: FileRecord) -> RuleOutcome:
    # Exact repeats of trimmed, non-trivial, non-comment lines
    lines = [line.strip() for line in file.content.split("\n")]
    counts = Counter(
        line for line in lines
        if len(line) > 10 and not line.startswith("//") and not line.startswith("*")
    )
    duplicated = sum(1 for n in counts.values() if n > 1)

    if duplicated > file.lines * 0.1:
        return failed(f"Found {duplicated} duplicated lines")
    return passed("Code duplication is acceptable")


def check_comments(file: FileRecord) -> RuleOutcome:
    ratio = count_occurrences(file.content, COMMENT_MARKER) / file.lines

    if ratio < 0.1 and file.lines > 50:
        return failed("Too few comments for a file of this size")
    if ratio > 0.5:
        return failed("Too many comments. Code may need simplification")
    return passed("Comments quality is acceptable")


CODE_QUALITY = Category(
    name="code_quality",
    title="Code Quality",
    rules=(
        Rule("CQ001", "Naming Conventions", "Check naming conventions compliance",
             "warning", 10, check_naming),
        Rule("CQ002", "Function Length", "Check function length",
             "warning", 15, check_function_length),
        Rule("CQ003", "Cyclomatic Complexity", "Check cyclomatic complexity",
             "error", 20, check_complexity),
        Rule("CQ004", "Magic Numbers", "Check for magic numbers",
             "info", 5, check_magic_numbers),
        Rule("CQ005", "Code Duplication", "Check code duplication",
             "warning", 12, check_duplication),
        Rule("CQ006", "Comments Quality", "Check comments quality",
             "info", 8, check_comments),
    ),
)
