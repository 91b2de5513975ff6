"""Best practice rules: typing, error handling, security, tests, accessibility, framework conventions."""

import re

from assessor.models import FileRecord, Rule, RuleOutcome
from assessor.rules.base import Category, count_occurrences, failed, has_match, passed

TYPE_ANNOTATION = re.compile(r":\s*\w+(\[\])?(\s*\|\s*\w+(\[\])?)*\s*[=;,)]")
ASYNC_OPERATION = re.compile(r"async\s+|await\s+|\.then\s*\(|\.catch\s*\(|fetch\s*\(")
ERROR_HANDLING = re.compile(r"try\s*{|catch\s*\(|\.catch\s*\(")
TEST_SUITE = re.compile(r"describe\s*\(|it\s*\(|test\s*\(")

# Checked in order; the first hit is reported
SECURITY_ISSUES = (
    (re.compile(r"innerHTML\s*="), "Assigning innerHTML can lead to XSS"),
    (re.compile(r"eval\s*\("), "eval is unsafe"),
    (re.compile(r"document\.write\s*\("), "document.write is obsolete and unsafe"),
    (re.compile(r"dangerouslySetInnerHTML"), "Be careful with dangerouslySetInnerHTML"),
)

A11Y_ISSUES = (
    (re.compile(r"<img(?![^>]*alt\s*=)"), "Images must have an alt attribute"),
    (re.compile(r"<button[^>]*>\s*</button>"), "Buttons must have text or an aria-label"),
    (re.compile(r"<input(?![^>]*(?:aria-label|placeholder)\s*=)"),
     "Inputs must have a label or aria-label"),
)

HOOK_CALL = re.compile(r"use\w+\s*\(")
CLASS_COMPONENT = re.compile(r"class\s+\w+\s+extends\s+(React\.)?Component")
CONDITIONAL_HOOK = re.compile(r"if\s*\([^)]+\)\s*{[^}]*use\w+")

TYPESCRIPT_EXTENSIONS = (".ts", ".tsx")


def check_typescript(file: FileRecord) -> RuleOutcome:
    is_typescript = file.path.endswith(TYPESCRIPT_EXTENSIONS)

    if not is_typescript and file.lines > 50:
        return failed("Consider migrating large files to TypeScript")
    if is_typescript and file.lines > 20 and not has_match(file.content, TYPE_ANNOTATION):
        return failed("TypeScript file should contain type annotations")
    return passed("TypeScript usage is fine")


def check_error_handling(file: FileRecord) -> RuleOutcome:
    if has_match(file.content, ASYNC_OPERATION) and not has_match(file.content, ERROR_HANDLING):
        return failed("Asynchronous operations should handle errors")
    return passed("Error handling is present")


def check_security(file: FileRecord) -> RuleOutcome:
    for pattern, message in SECURITY_ISSUES:
        if pattern.search(file.content):
            return failed(message)
    return passed("No security issues found")


def check_testing(file: FileRecord) -> RuleOutcome:
    if file.type == "test":
        return passed("Test file")

    if file.type == "component" and file.lines > 30 and not has_match(file.content, TEST_SUITE):
        return failed("Component should have tests")
    return passed("Testing is fine")


def check_accessibility(file: FileRecord) -> RuleOutcome:
    if file.type != "component":
        return passed("Not applicable")

    for pattern, message in A11Y_ISSUES:
        if count_occurrences(file.content, pattern) > 0:
            return failed(message)
    return passed("Accessibility is respected")


def _react_conventions(file: FileRecord) -> RuleOutcome:
    has_hooks = has_match(file.content, HOOK_CALL)

    if has_hooks and has_match(file.content, CLASS_COMPONENT):
        return failed("Do not mix class components with hooks")
    if has_hooks and has_match(file.content, CONDITIONAL_HOOK):
        return failed("Hooks must not be called conditionally")
    return passed("Framework conventions are respected")


def _vue_conventions(file: FileRecord) -> RuleOutcome:
    if file.path.endswith(".vue"):
        if not has_match(file.content, r"<script") or not has_match(file.content, r"<template"):
            return failed("Vue component must contain <script> and <template> sections")
    return passed("Framework conventions are respected")


CONVENTION_CHECKS = {
    "react": _react_conventions,
    "vue": _vue_conventions,
}


def check_framework_conventions(file: FileRecord) -> RuleOutcome:
    framework_check = CONVENTION_CHECKS.get(file.framework)
    if framework_check:
        return framework_check(file)
    return passed("Framework conventions are respected")


BEST_PRACTICES = Category(
    name="best_practices",
    title="Best Practices",
    rules=(
        Rule("BP001", "TypeScript Usage", "Check TypeScript usage",
             "warning", 20, check_typescript),
        Rule("BP002", "Error Handling", "Check error handling",
             "error", 18, check_error_handling),
        Rule("BP003", "Security Practices", "Check security practices",
             "error", 15, check_security),
        Rule("BP004", "Testing Coverage", "Check that components are tested",
             "warning", 12, check_testing),
        Rule("BP005", "Accessibility", "Check accessibility (a11y)",
             "warning", 10, check_accessibility),
        Rule("BP006", "Framework Conventions", "Check framework conventions",
             "warning", 15, check_framework_conventions),
    ),
)
