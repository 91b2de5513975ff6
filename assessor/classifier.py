"""
File Classifier

Turns (path, raw text) into a FileRecord: framework tag, structural type,
size and line count.
"""

import re

from assessor.models import FileRecord, FRAMEWORKS

# (tag, signature patterns, minimum hits). Order is the tie-break.
FRAMEWORK_SIGNATURES = (
    ("react", (
        re.compile(r"import\s+React\s+from\s+['\"]react['\"]"),
        re.compile(r"import\s+.*\s+from\s+['\"]react['\"]"),
        re.compile(r"jsx|tsx", re.IGNORECASE),
        re.compile(r"<[A-Z][a-zA-Z0-9]*[^>]*>"),
        re.compile(r"React\."),
        re.compile(r"useState|useEffect|useContext"),
        re.compile(r"ReactDOM"),
    ), 2),
    ("vue", (
        re.compile(r"import\s+.*\s+from\s+['\"]vue['\"]"),
        re.compile(r"<template>"),
        re.compile(r"<script.*setup.*>"),
        re.compile(r"defineComponent|createApp"),
        re.compile(r"ref\s*\(|reactive\s*\(|computed\s*\("),
        re.compile(r"\$emit|\$props|\$slots"),
        re.compile(r"v-if|v-for|v-model|v-show"),
    ), 2),
    ("angular", (
        re.compile(r"import\s+.*\s+from\s+['\"]@angular"),
        re.compile(r"@Component|@Injectable|@NgModule"),
        re.compile(r"selector\s*:|template\s*:|templateUrl\s*:"),
        re.compile(r"ngOnInit|ngOnDestroy"),
    ), 2),
    ("svelte", (
        re.compile(r"import\s+.*\s+from\s+['\"]svelte"),
        re.compile(r"<script.*svelte.*>"),
        re.compile(r"\$:"),
        re.compile(r"export\s+let"),
    ), 2),
)

DOM_GLOBAL_PATTERNS = (
    re.compile(r"document\."),
    re.compile(r"window\."),
    re.compile(r"addEventListener"),
    re.compile(r"querySelector"),
    re.compile(r"getElementById"),
    re.compile(r"createElement"),
)

# (file type, markers) checked in order after the path-based checks
CONTENT_TYPE_MARKERS = (
    ("component", ("export default", "export class", "<template>", "function Component")),
    ("service", ("service", "api", "fetch", "axios")),
    ("utility", ("export function", "export const")),
)


def detect_framework(content: str, path: str) -> str:
    """Detect the frontend framework a file is written for."""
    if path.lower().endswith(".vue"):
        return "vue"

    for tag, patterns, threshold in FRAMEWORK_SIGNATURES:
        hits = sum(1 for p in patterns if p.search(content))
        if hits >= threshold:
            return tag

    if any(p.search(content) for p in DOM_GLOBAL_PATTERNS):
        return "vanilla"
    return "unknown"


def classify_type(path: str, content: str) -> str:
    """Classify the structural role of a file. Never fails."""
    lowered = path.lower()
    if "test" in lowered or "spec" in lowered:
        return "test"
    if "config" in lowered or "setup" in lowered:
        return "config"

    for file_type, markers in CONTENT_TYPE_MARKERS:
        if any(marker in content for marker in markers):
            return file_type

    return "other"


def build_file_record(path: str, content: str, framework_hint: str = "auto") -> FileRecord:
    """
    Build the immutable record the rules consume.

    Args:
        path: Path relative to the project root
        content: Full text of the file
        framework_hint: 'auto' to detect, or an explicit framework tag

    Returns:
        FileRecord
    """
    path = path.replace("\\", "/")
    if framework_hint == "auto":
        framework = detect_framework(content, path)
    elif framework_hint in FRAMEWORKS:
        framework = framework_hint
    else:
        raise ValueError(f"Unknown framework: {framework_hint}")

    return FileRecord(
        path=path,
        content=content,
        size=len(content.encode("utf-8")),
        lines=content.count("\n") + 1,
        framework=framework,
        type=classify_type(path, content),
    )
