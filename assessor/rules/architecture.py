"""Architecture rules: separation of concerns, DI, SRP, layering, patterns, coupling."""

import re

from assessor.models import FileRecord, Rule, RuleOutcome
from assessor.rules.base import Category, count_occurrences, failed, has_match, passed

BUSINESS_LOGIC = (
    re.compile(r"fetch\s*\("),
    re.compile(r"axios\."),
    re.compile(r"\$http\."),
    re.compile(r"XMLHttpRequest"),
    re.compile(r"localStorage\."),
    re.compile(r"sessionStorage\."),
)

HARDCODED_SERVICE = re.compile(r"new\s+\w+Service\s*\(")
CONSTRUCTOR_INJECTION = re.compile(r"constructor\s*\([^)]*\w+Service")
EXPORTED_ENTITY = re.compile(r"export\s+(class|function|const)")
CLASS_DECLARATION = re.compile(r"class\s+\w+")
METHOD_DECLARATION = re.compile(r"\s+\w+\s*\([^)]*\)\s*{")
# Alternation binds loosely: any '/data/' or '/repository/' path also matches
DIRECT_DATA_IMPORT = re.compile(r"import.*from.*['\"](.*/)?api/|.*/data/|.*/repository/")
SINGLETON = re.compile(r"private\s+static\s+instance|getInstance\s*\(")
SERVICE_INSTANCE = re.compile(r"new\s+\w*Service\s*\(")
EVENT_USAGE = re.compile(r"emit\s*\(|addEventListener|on\(")
OBSERVER = re.compile(r"observer|subscribe|unsubscribe", re.IGNORECASE)
IMPORT_STATEMENT = re.compile(r"import\s+.*from\s+['\"][^'\"]+['\"]")

MAX_EXPORTS = 5
MAX_METHODS = 15


def check_separation_of_concerns(file: FileRecord) -> RuleOutcome:
    if file.type == "component":
        violations = sum(count_occurrences(file.content, p) for p in BUSINESS_LOGIC)
        if violations > 2:
            return failed("Component contains too much business logic, move it into services")
    return passed("Separation of concerns is respected")


def check_dependency_injection(file: FileRecord) -> RuleOutcome:
    if file.type == "service":
        hardcoded = has_match(file.content, HARDCODED_SERVICE)
        injected = has_match(file.content, CONSTRUCTOR_INJECTION)
        if hardcoded and not injected:
            return failed("Inject dependencies instead of instantiating services directly")
    return passed("Dependency injection is fine")


def check_single_responsibility(file: FileRecord) -> RuleOutcome:
    exports = count_occurrences(file.content, EXPORTED_ENTITY)
    if exports > MAX_EXPORTS:
        return failed(f"File exports {exports} entities, consider splitting it into modules")

    if count_occurrences(file.content, CLASS_DECLARATION) > 0:
        methods = count_occurrences(file.content, METHOD_DECLARATION)
        if methods > MAX_METHODS:
            return failed(f"Class has {methods} methods, consider decomposing it")

    return passed("Single responsibility is respected")


def check_layered_architecture(file: FileRecord) -> RuleOutcome:
    path = file.path.lower()
    if "component" in path or "view" in path:
        if has_match(file.content, DIRECT_DATA_IMPORT):
            return failed("Components should reach the data layer through services")
    return passed("Layered architecture is respected")


def check_design_patterns(file: FileRecord) -> RuleOutcome:
    if file.type == "service":
        if has_match(file.content, SERVICE_INSTANCE) and not has_match(file.content, SINGLETON):
            return failed("Consider the Singleton pattern for services")

    if file.type == "component":
        has_events = has_match(file.content, EVENT_USAGE)
        if has_events and file.lines > 100 and not has_match(file.content, OBSERVER):
            return failed("Consider the Observer pattern for large components with events")

    return passed("Design patterns are used correctly")


def check_module_coupling(file: FileRecord) -> RuleOutcome:
    imports = IMPORT_STATEMENT.findall(file.content)
    relative = sum(1 for imp in imports if "../" in imp)

    if imports and relative / len(imports) > 0.7:
        return failed("High module coupling, too many parent-relative imports")
    return passed("Module coupling is fine")


ARCHITECTURE = Category(
    name="architecture",
    title="Architecture",
    rules=(
        Rule("ARCH001", "Separation of Concerns", "Check separation of concerns",
             "warning", 20, check_separation_of_concerns),
        Rule("ARCH002", "Dependency Injection", "Check dependency injection",
             "info", 15, check_dependency_injection),
        Rule("ARCH003", "Single Responsibility", "Check single responsibility principle",
             "warning", 18, check_single_responsibility),
        Rule("ARCH004", "Layered Architecture", "Check layered architecture",
             "info", 12, check_layered_architecture),
        Rule("ARCH005", "Design Patterns", "Check design pattern usage",
             "info", 10, check_design_patterns),
        Rule("ARCH006", "Module Coupling", "Check module coupling",
             "warning", 14, check_module_coupling),
    ),
)
