"""
JSON Reporter - machine-readable assessment for CI pipelines.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Union

from assessor import __version__
from assessor.models import SEVERITIES, AssessmentResult, round_half_up

DEFAULT_JSON_PATH = "frontend-assessment-report.json"
TOOL_NAME = "frontend-assessor"


def statistics(result: AssessmentResult) -> dict:
    issues = result.all_issues
    files = result.file_results
    average = round_half_up(sum(f.score for f in files), len(files)) if files else 0

    return {
        "total_files": len(files),
        "total_issues": len(issues),
        "severity_breakdown": {s: sum(1 for i in issues if i.severity == s) for s in SEVERITIES},
        "category_scores": {name: cat.percentage for name, cat in result.categories.items()},
        "average_file_score": average,
        "recommendations_count": len(result.recommendations),
        "high_priority_recommendations": sum(1 for r in result.recommendations if r.priority == "high"),
    }


class JsonReporter:
    """Writes the assessment as a JSON document"""

    def build(self, result: AssessmentResult) -> dict:
        return {
            "meta": {
                "generated_at": datetime.now().isoformat(),
                "version": __version__,
                "tool": TOOL_NAME,
            },
            "assessment": {
                "overall_score": result.overall_score,
                "level": result.level,
                "summary": result.summary,
                "level_analysis": result.level_analysis.to_dict() if result.level_analysis else None,
            },
            "categories": [
                {
                    "name": name,
                    "score": cat.score,
                    "max_score": cat.max_score,
                    "percentage": cat.percentage,
                    "issues_count": len(cat.issues),
                    "issues": [i.to_dict() for i in cat.issues],
                }
                for name, cat in result.categories.items()
            ],
            "files": [
                {
                    "path": f.path,
                    "score": f.score,
                    "issues_count": len(f.issues),
                    "issues": [i.to_dict() for i in f.issues],
                    "suggestions": list(f.suggestions),
                }
                for f in result.file_results
            ],
            "recommendations": [r.to_dict() for r in result.recommendations],
            "statistics": statistics(result),
        }

    def generate_report(self, result: AssessmentResult,
                        output_path: Union[str, Path] = DEFAULT_JSON_PATH) -> Path:
        path = Path(output_path)
        path.write_text(json.dumps(self.build(result), indent=2, ensure_ascii=False), encoding="utf-8")
        return path
