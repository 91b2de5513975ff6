"""Performance rules: file size, lazy loading, render-time work, leaks, re-renders, images."""

import re

from assessor.models import FileRecord, Rule, RuleOutcome
from assessor.rules.base import Category, count_occurrences, failed, has_match, passed

MAX_COMPONENT_SIZE = 20000
MAX_FILE_SIZE = 10000

LAZY_LOADING = re.compile(r"import\s*\(\s*['\"`][^'\"`]+['\"`]\s*\)|React\.lazy|defineAsyncComponent")
STATIC_IMPORT = re.compile(r"^import\s+", re.MULTILINE)

HEAVY_OPERATIONS = (
    re.compile(r"\{\s*\w+\.map\([^}]+\.map\("),     # nested map
    re.compile(r"\{\s*\w+\.filter\([^}]+\.map\("),  # filter + map
    re.compile(r"\{\s*\w+\.sort\("),                # sort while rendering
    re.compile(r"JSON\.parse\s*\("),
    re.compile(r"new\s+Date\s*\("),
)

LEAK_SOURCES = (
    re.compile(r"setInterval\s*\("),
    re.compile(r"setTimeout\s*\("),
    re.compile(r"addEventListener\s*\("),
    re.compile(r"\$on\s*\("),
)

LEAK_CLEANUPS = (
    re.compile(r"clearInterval\s*\("),
    re.compile(r"clearTimeout\s*\("),
    re.compile(r"removeEventListener\s*\("),
    re.compile(r"\$off\s*\("),
    re.compile(r"useEffect\s*\([^,]+,\s*\[[^\]]*\]\s*\)\s*=>\s*{[^}]*return\s+"),
)

RASTER_IMAGE = re.compile(r"\.(jpg|jpeg|png|gif|bmp)\b", re.IGNORECASE)
MODERN_IMAGE = re.compile(r"\.(webp|avif)\b", re.IGNORECASE)


def check_bundle_size(file: FileRecord) -> RuleOutcome:
    limit = MAX_COMPONENT_SIZE if file.type == "component" else MAX_FILE_SIZE
    if file.size > limit:
        return failed(f"File is {round(file.size / 1000)}KB, limit is {limit // 1000}KB")
    return passed("File size is acceptable")


def check_lazy_loading(file: FileRecord) -> RuleOutcome:
    if file.type != "component":
        return passed("Not applicable")

    if not has_match(file.content, LAZY_LOADING) and count_occurrences(file.content, STATIC_IMPORT) > 5:
        return failed("Component has many static imports, consider lazy loading")
    return passed("Lazy loading is used correctly")


def check_heavy_operations(file: FileRecord) -> RuleOutcome:
    count = sum(count_occurrences(file.content, p) for p in HEAVY_OPERATIONS)
    if count > 0:
        return failed(f"Found {count} potentially heavy operations during render")
    return passed("No heavy operations found")


def check_memory_leaks(file: FileRecord) -> RuleOutcome:
    sources = sum(count_occurrences(file.content, p) for p in LEAK_SOURCES)
    cleanups = sum(count_occurrences(file.content, p) for p in LEAK_CLEANUPS)

    if sources > cleanups:
        return failed(f"Found {sources - cleanups} timers or listeners without cleanup")
    return passed("No memory leaks found")


def _react_renders(file: FileRecord) -> RuleOutcome:
    has_memo = has_match(file.content, r"React\.memo|useMemo|useCallback")
    complex_props = has_match(file.content, r"props\.\w+\.\w+")

    if complex_props and not has_memo and file.type == "component":
        return failed("Component with nested props should use memoization")
    return passed("Render optimization is fine")


def _vue_renders(file: FileRecord) -> RuleOutcome:
    has_computed = has_match(file.content, r"computed\s*\(")
    complex_template = count_occurrences(file.content, r"\{\{[^}]+\}\}") > 5

    if complex_template and not has_computed:
        return failed("Template expressions should move into computed properties")
    return passed("Render optimization is fine")


RENDER_CHECKS = {
    "react": _react_renders,
    "vue": _vue_renders,
}


def check_unnecessary_renders(file: FileRecord) -> RuleOutcome:
    framework_check = RENDER_CHECKS.get(file.framework)
    if framework_check:
        return framework_check(file)
    return passed("Render optimization is fine")


def check_image_optimization(file: FileRecord) -> RuleOutcome:
    raster = count_occurrences(file.content, RASTER_IMAGE)
    modern = count_occurrences(file.content, MODERN_IMAGE)

    if raster > 0 and modern == 0:
        return failed("Consider modern image formats (WebP, AVIF)")
    return passed("Image optimization is fine")


PERFORMANCE = Category(
    name="performance",
    title="Performance",
    rules=(
        Rule("PERF001", "Bundle Size", "Check file sizes",
             "warning", 15, check_bundle_size),
        Rule("PERF002", "Lazy Loading", "Check lazy loading usage",
             "info", 10, check_lazy_loading),
        Rule("PERF003", "Heavy Operations", "Check heavy operations in render",
             "error", 20, check_heavy_operations),
        Rule("PERF004", "Memory Leaks", "Check potential memory leaks",
             "warning", 18, check_memory_leaks),
        Rule("PERF005", "Unnecessary Renders", "Check unnecessary re-renders",
             "warning", 12, check_unnecessary_renders),
        Rule("PERF006", "Image Optimization", "Check image optimization",
             "info", 8, check_image_optimization),
    ),
)
