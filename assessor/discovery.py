"""
File Discovery

Finds the files to assess with include/exclude glob patterns and reads
them. Unreadable files are logged and skipped; the run continues.

Patterns follow shell glob rules on POSIX relative paths: `*` and `?`
stay inside one path segment, a `**` segment spans any number of
segments, and wildcards never match a leading dot, so hidden directories
such as `.next/` are only reached by patterns that name them.
"""

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

BRACES = re.compile(r"\{([^{}]*)\}")

# A '**' segment: zero or more non-hidden directories
GLOBSTAR_DIRS = r"(?:[^/.][^/]*/)*"
GLOBSTAR_TAIL = r"(?:[^/.][^/]*(?:/[^/.][^/]*)*)?"


def expand_braces(pattern: str) -> list[str]:
    """Expand one '{a,b}' group per pass, e.g. '*.{js,ts}' -> ['*.js', '*.ts']."""
    match = BRACES.search(pattern)
    if not match:
        return [pattern]

    expanded = []
    for option in match.group(1).split(","):
        candidate = pattern[:match.start()] + option + pattern[match.end():]
        expanded.extend(expand_braces(candidate))
    return expanded


def _segment_regex(segment: str) -> str:
    parts = []
    i = 0
    while i < len(segment):
        char = segment[i]
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        elif char == "[" and "]" in segment[i + 2:]:
            end = segment.index("]", i + 2)
            members = segment[i + 1:end].replace("\\", "\\\\")
            if members.startswith("!"):
                members = "^" + members[1:]
            parts.append(f"(?!/)[{members}]")
            i = end
        else:
            parts.append(re.escape(char))
        i += 1

    regex = "".join(parts)
    if segment[:1] in ("*", "?", "["):
        regex = r"(?!\.)" + regex
    return regex


@lru_cache(maxsize=None)
def glob_to_regex(pattern: str) -> re.Pattern:
    """Compile a brace-free glob into a regex for Pattern.fullmatch."""
    segments = pattern.split("/")
    regex = ""
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if segment == "**":
            regex += GLOBSTAR_TAIL if last else GLOBSTAR_DIRS
        else:
            regex += _segment_regex(segment) + ("" if last else "/")
    return re.compile(regex)


def matches_pattern(relative_path: str, pattern: str) -> bool:
    return any(glob_to_regex(candidate).fullmatch(relative_path)
               for candidate in expand_braces(pattern))


def discover_files(root: Path, include_patterns: list[str], exclude_patterns: list[str]) -> list[str]:
    """
    List project files to assess.

    Args:
        root: Project root
        include_patterns: Globs a file must match (any)
        exclude_patterns: Globs a file must not match (none)

    Returns:
        Sorted, de-duplicated relative POSIX paths
    """
    root = Path(root)
    found = set()

    for path in root.rglob("*"):
        if not path.is_file():
            continue

        relative = path.relative_to(root).as_posix()
        if not any(matches_pattern(relative, p) for p in include_patterns):
            continue
        if any(matches_pattern(relative, p) for p in exclude_patterns):
            continue
        found.add(relative)

    logger.info("Discovered %d files under %s", len(found), root)
    return sorted(found)


def read_project_files(
    root: Path,
    include_patterns: list[str],
    exclude_patterns: list[str],
) -> Iterator[tuple[str, str]]:
    """Yield (relative path, text) for every readable discovered file."""
    root = Path(root)
    for relative in discover_files(root, include_patterns, exclude_patterns):
        try:
            content = (root / relative).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", relative, e)
            continue
        yield relative, content
