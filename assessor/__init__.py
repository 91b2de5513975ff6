"""
Frontend Assessor - heuristic quality assessment for frontend codebases
"""

__version__ = "1.0.0"

from assessor.models import (
    AssessmentResult,
    CategoryResult,
    FileRecord,
    FileResult,
    Issue,
    LevelAnalysis,
    Recommendation,
    Rule,
    RuleOutcome,
)
from assessor.classifier import build_file_record, classify_type, detect_framework
from assessor.rules import CATEGORIES, CATEGORY_WEIGHTS, Category, get_category
from assessor.level_classifier import LevelClassifier
from assessor.config import AssessmentConfig, ConfigError, load_config, write_default_config
from assessor.assessment import ProjectAssessor, assess_project
from assessor.i18n import Messages
from assessor.reporters import ConsoleReporter, HtmlReporter, JsonReporter, write_reports

__all__ = [
    "AssessmentConfig",
    "AssessmentResult",
    "CATEGORIES",
    "CATEGORY_WEIGHTS",
    "Category",
    "CategoryResult",
    "ConfigError",
    "ConsoleReporter",
    "FileRecord",
    "FileResult",
    "HtmlReporter",
    "Issue",
    "JsonReporter",
    "LevelAnalysis",
    "LevelClassifier",
    "Messages",
    "ProjectAssessor",
    "Recommendation",
    "Rule",
    "RuleOutcome",
    "assess_project",
    "build_file_record",
    "classify_type",
    "detect_framework",
    "get_category",
    "load_config",
    "write_default_config",
    "write_reports",
]
