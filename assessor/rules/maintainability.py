"""Maintainability rules: docs, readability, naming, dead code, config, error messages."""

import re

from assessor.models import FileRecord, Rule, RuleOutcome
from assessor.rules.base import Category, count_occurrences, failed, passed

DOC_COMMENT = re.compile(r"/\*\*[\s\S]*?\*/")
FUNCTION_DECLARATION = re.compile(r"function\s+\w+|const\s+\w+\s*=\s*\(")
CLASS_DECLARATION = re.compile(r"class\s+\w+")
DEEP_INDENT = re.compile(r"\s{16,}")
CAMEL_CASE = re.compile(r"\b[a-z][a-zA-Z0-9]*\b")
SNAKE_CASE = re.compile(r"\b[a-z]+_[a-z_]+\b")
NAMED_IMPORT = re.compile(r"import\s+(?:{([^}]+)}|(\w+))\s+from\s+['\"][^'\"]+['\"]")
HARDCODED_URL = re.compile(r"https?://[^\s'\"]+")
HARDCODED_PATH = re.compile(r"['\"][A-Za-z]:\\[^'\"]*['\"]")
THROWN_MESSAGE = re.compile(r"throw\s+new\s+Error\s*\(\s*['\"`]([^'\"`]+)['\"`]\s*\)")

MAX_LINE_LENGTH = 120
GENERIC_ERROR_MARKERS = ("Error", "Something went wrong", "Failed")


def check_documentation(file: FileRecord) -> RuleOutcome:
    docs = count_occurrences(file.content, DOC_COMMENT)
    items = (count_occurrences(file.content, FUNCTION_DECLARATION)
             + count_occurrences(file.content, CLASS_DECLARATION))
    ratio = docs / items if items > 0 else 1

    if items > 3 and ratio < 0.3:
        return failed("Not enough doc comments for public functions and classes")
    return passed("Documentation is fine")


def check_readability(file: FileRecord) -> RuleOutcome:
    lines = file.content.split("\n")
    long_lines = sum(1 for line in lines if len(line) > MAX_LINE_LENGTH)

    if long_lines / len(lines) > 0.1:
        return failed(f"{long_lines} lines exceed {MAX_LINE_LENGTH} characters")
    if count_occurrences(file.content, DEEP_INDENT) > 5:
        return failed("Deep nesting makes the code hard to read")
    return passed("Readability is fine")


def check_naming_consistency(file: FileRecord) -> RuleOutcome:
    camel = count_occurrences(file.content, CAMEL_CASE)
    snake = count_occurrences(file.content, SNAKE_CASE)

    if camel > 0 and snake > 0 and snake / camel > 0.3:
        return failed("Mixed camelCase and snake_case naming, pick one style")
    return passed("Naming is consistent")


def _imported_names(match: re.Match) -> list[str]:
    named, default = match.groups()
    if named is not None:
        return [name.strip() for name in named.split(",")]
    return [default]


def _count_unused_imports(content: str) -> int:
    """Imports whose names never appear elsewhere in the text.

    Substring based: names inside strings or comments count as used.
    """
    unused = 0
    for match in NAMED_IMPORT.finditer(content):
        rest = content.replace(match.group(0), "", 1)
        names = _imported_names(match)
        if any(not re.search(rf"\b{re.escape(name)}\b", rest) for name in names):
            unused += 1
    return unused


def check_dead_code(file: FileRecord) -> RuleOutcome:
    unused = _count_unused_imports(file.content)
    if unused > 0:
        return failed(f"Found {unused} unused imports")

    commented_code = 0
    for line in file.content.split("\n"):
        trimmed = line.strip()
        if trimmed.startswith("//") and ("function" in trimmed or "const " in trimmed or "let " in trimmed):
            commented_code += 1

    if commented_code > 3:
        return failed(f"Found {commented_code} lines of commented-out code, remove them")
    return passed("No dead code found")


def check_configuration(file: FileRecord) -> RuleOutcome:
    urls = count_occurrences(file.content, HARDCODED_URL)
    paths = count_occurrences(file.content, HARDCODED_PATH)

    if urls > 2 or paths > 0:
        return failed("Hardcoded URLs or paths found, move them into configuration")
    return passed("Configuration is managed correctly")


def check_error_messages(file: FileRecord) -> RuleOutcome:
    messages = THROWN_MESSAGE.findall(file.content)
    generic = [m for m in messages if any(marker in m for marker in GENERIC_ERROR_MARKERS)]

    if messages and len(generic) > len(messages) * 0.5:
        return failed("Use more descriptive error messages")
    return passed("Error messages are descriptive")


MAINTAINABILITY = Category(
    name="maintainability",
    title="Maintainability",
    rules=(
        Rule("MAINT001", "Documentation", "Check code documentation",
             "info", 12, check_documentation),
        Rule("MAINT002", "Code Readability", "Check code readability",
             "warning", 15, check_readability),
        Rule("MAINT003", "Naming Consistency", "Check naming consistency",
             "warning", 10, check_naming_consistency),
        Rule("MAINT004", "Dead Code", "Check for dead code",
             "warning", 8, check_dead_code),
        Rule("MAINT005", "Configuration Management", "Check configuration management",
             "info", 7, check_configuration),
        Rule("MAINT006", "Error Messages", "Check error message quality",
             "info", 8, check_error_messages),
    ),
)
