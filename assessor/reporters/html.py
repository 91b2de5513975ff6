"""
HTML Reporter - self-contained assessment page with inline CSS
"""

from datetime import datetime
from html import escape
from pathlib import Path
from typing import Union

from assessor.assessment import score_status
from assessor.i18n import Messages
from assessor.models import AssessmentResult, CategoryResult, Issue, Recommendation

DEFAULT_HTML_PATH = "frontend-assessment-report.html"

CATEGORY_ICONS = {
    "code_quality": "💎",
    "performance": "⚡",
    "architecture": "🏗️",
    "best_practices": "✅",
    "maintainability": "🔧",
}


class HtmlReporter:
    """Generates a single-page HTML report"""

    def __init__(self, messages: Messages):
        self.messages = messages

    def render(self, result: AssessmentResult) -> str:
        t = self.messages.t
        issues = result.all_issues
        errors = sum(1 for i in issues if i.severity == "error")
        warnings = sum(1 for i in issues if i.severity == "warning")
        status = score_status(result.overall_score)

        html = self._header(t("report.title"))

        html += f'''
        <div class="section">
            <h2>📊 {escape(t("report.summary"))}</h2>
            <div class="summary-grid">
                <div class="card {status}">
                    <div class="big-number">{result.overall_score}</div>
                    <div class="label">{escape(t("assessment.overall_score"))}</div>
                    <div class="status">{status.upper()}</div>
                </div>
                <div class="card level">
                    <div class="big-number">{escape(t(f"levels.{result.level}.name"))}</div>
                    <div class="label">{escape(t("assessment.developer_level"))}</div>
                </div>
                <div class="card">
                    <div class="big-number">{len(result.file_results)}</div>
                    <div class="label">{escape(t("report.file_analysis"))}</div>
                </div>
                <div class="card critical">
                    <div class="big-number">{errors}</div>
                    <div class="label">{escape(t("common.error"))}</div>
                </div>
                <div class="card warning">
                    <div class="big-number">{warnings}</div>
                    <div class="label">{escape(t("common.warning"))}</div>
                </div>
            </div>
            <pre class="summary-text">{escape(result.summary)}</pre>
        </div>
        '''

        html += f'<div class="section"><h2>📈 {escape(t("report.categories_breakdown"))}</h2><div class="categories">'
        for name, cat in result.categories.items():
            html += self._category_card(name, cat)
        html += '</div></div>'

        if result.level_analysis:
            html += self._level_section(result)

        if result.recommendations:
            html += f'<div class="section"><h2>💡 {escape(t("report.recommendations"))}</h2>'
            for rec in result.recommendations:
                html += self._recommendation_card(rec)
            html += '</div>'

        html += f'<div class="section"><h2>📋 {escape(t("report.issues_overview"))}</h2>'
        if issues:
            html += '<table class="issues-table"><thead><tr>'
            html += (f'<th>{escape(t("common.rule"))}</th><th>{escape(t("common.file"))}</th>'
                     f'<th>{escape(t("common.severity"))}</th><th>{escape(t("common.message"))}</th>')
            html += '</tr></thead><tbody>'
            for issue in issues:
                html += self._issue_row(issue)
            html += '</tbody></table>'
        else:
            html += f'<p class="muted">{escape(t("report.no_issues_found"))}</p>'
        html += '</div>'

        html += f'<div class="section"><h2>📁 {escape(t("report.file_analysis"))}</h2>'
        html += '<table class="issues-table"><thead><tr>'
        html += (f'<th>{escape(t("common.file"))}</th><th>{escape(t("common.score"))}</th>'
                 f'<th>{escape(t("common.issues"))}</th><th>{escape(t("common.suggestions"))}</th>')
        html += '</tr></thead><tbody>'
        for f in result.file_results:
            html += f'''<tr>
                <td class="mono">{escape(f.path)}</td>
                <td><span class="badge {score_status(f.score)}">{f.score}</span></td>
                <td>{len(f.issues)}</td>
                <td>{escape("; ".join(f.suggestions))}</td>
            </tr>'''
        html += '</tbody></table></div>'

        html += self._footer(datetime.now().isoformat())
        return html

    def generate_report(self, result: AssessmentResult,
                        output_path: Union[str, Path] = DEFAULT_HTML_PATH) -> Path:
        path = Path(output_path)
        path.write_text(self.render(result), encoding="utf-8")
        return path

    def _category_card(self, name: str, cat: CategoryResult) -> str:
        status = score_status(cat.percentage)
        icon = CATEGORY_ICONS.get(name, "")
        return f'''
        <div class="category-card">
            <div class="cat-header">
                <span>{icon} {escape(self.messages.category(name))}</span>
                <span class="cat-score {status}">{cat.percentage}%</span>
            </div>
            <div class="progress"><div class="bar {status}" style="width:{cat.percentage}%"></div></div>
            <div class="cat-summary">{cat.score}/{cat.max_score} · {escape(self.messages.t("common.issues"))}: {len(cat.issues)}</div>
        </div>
        '''

    def _level_section(self, result: AssessmentResult) -> str:
        t = self.messages.t
        analysis = result.level_analysis

        def items(names: list[str]) -> str:
            return ''.join(f'<li>{escape(self.messages.category(n))}</li>' for n in names) or '<li class="none">-</li>'

        steps = ''.join(f'<li>{escape(s)}</li>' for s in analysis.next_steps)
        return f'''
        <div class="section level-bg">
            <h2>🎯 {escape(t("report.detailed_analysis"))}</h2>
            <p class="muted">{escape(t(f"levels.{analysis.current_level}.description"))}</p>
            <div class="summary-grid">
                <div class="card">
                    <div class="big-number">{analysis.practice_score}</div>
                    <div class="label">{escape(t("report.practice_score"))}</div>
                </div>
                <div class="card">
                    <div class="big-number">{analysis.complexity_score}</div>
                    <div class="label">{escape(t("report.complexity_score"))}</div>
                </div>
                <div class="card">
                    <div class="time">{escape(t(f"time_bands.{analysis.time_to_next_level}"))}</div>
                    <div class="label">{escape(t("report.time_to_next_level"))}</div>
                </div>
            </div>
            <div class="cat-lists">
                <div class="strengths">
                    <strong>✓ {escape(t("report.strengths"))}</strong>
                    <ul>{items(analysis.strengths)}</ul>
                </div>
                <div class="weaknesses">
                    <strong>✗ {escape(t("report.weaknesses"))}</strong>
                    <ul>{items(analysis.weaknesses)}</ul>
                </div>
            </div>
            {f'<h3>{escape(t("report.next_steps"))}</h3><ul class="steps">{steps}</ul>' if steps else ''}
        </div>
        '''

    def _recommendation_card(self, rec: Recommendation) -> str:
        examples = ''.join(f'<li>{escape(e)}</li>' for e in rec.examples)
        return f'''
        <div class="recommendation {rec.priority}">
            <h3>{escape(rec.title)} <span class="badge {rec.priority}">{escape(self.messages.t(f"common.{rec.priority}"))}</span></h3>
            <p>{escape(rec.description)}</p>
            {f'<ul>{examples}</ul>' if examples else ''}
        </div>
        '''

    def _issue_row(self, issue: Issue) -> str:
        location = issue.file_path if issue.line is None else f"{issue.file_path}:{issue.line}"
        return f'''<tr class="{issue.severity}">
                <td class="mono">{escape(issue.rule_id)}</td>
                <td class="mono">{escape(location)}</td>
                <td><span class="badge {issue.severity}">{escape(self.messages.t(f"common.{issue.severity}"))}</span></td>
                <td>{escape(issue.message)}</td>
            </tr>'''

    def _header(self, title: str) -> str:
        title = escape(title)
        return f'''<!DOCTYPE html>
<html lang="{self.messages.language}"><head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
* {{ margin: 0; padding: 0; box-sizing: border-box; }}
body {{ font-family: system-ui, -apple-system, sans-serif; background: #0f172a; color: #e2e8f0; line-height: 1.6; padding: 20px; }}
h1 {{ text-align: center; margin-bottom: 30px; color: #f1f5f9; }}
h2 {{ color: #e2e8f0; margin-bottom: 20px; padding-bottom: 10px; border-bottom: 2px solid #334155; }}
h3 {{ color: #cbd5e1; margin: 20px 0 15px; }}
.section {{ background: #1e293b; border-radius: 12px; padding: 24px; margin-bottom: 24px; }}
.muted {{ color: #94a3b8; margin-bottom: 16px; }}
.mono {{ font-family: monospace; }}
.summary-text {{ margin-top: 20px; color: #94a3b8; white-space: pre-wrap; font-family: inherit; }}

.summary-grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(140px, 1fr)); gap: 16px; }}
.card {{ background: #0f172a; border-radius: 10px; padding: 20px; text-align: center; border: 2px solid #334155; }}
.card.critical {{ border-color: #ef4444; }}
.card.warning {{ border-color: #f59e0b; }}
.card.good {{ border-color: #10b981; }}
.card.excellent {{ border-color: #3b82f6; }}
.card.level {{ border-color: #8b5cf6; }}
.big-number {{ font-size: 2.5rem; font-weight: 700; color: #f1f5f9; }}
.time {{ font-size: 1.4rem; font-weight: 700; color: #f1f5f9; padding: 10px 0; }}
.label {{ color: #94a3b8; font-size: 0.9rem; margin-top: 5px; }}
.status {{ margin-top: 8px; font-weight: 600; text-transform: uppercase; font-size: 0.85rem; }}
.card.critical .status {{ color: #ef4444; }}
.card.warning .status {{ color: #f59e0b; }}
.card.good .status {{ color: #10b981; }}
.card.excellent .status {{ color: #3b82f6; }}

.categories {{ display: flex; flex-direction: column; gap: 16px; }}
.category-card {{ background: #0f172a; border-radius: 10px; padding: 16px; }}
.cat-header {{ display: flex; justify-content: space-between; align-items: center; margin-bottom: 10px; font-weight: 600; }}
.cat-score {{ font-size: 1.4rem; padding: 4px 12px; border-radius: 6px; }}
.cat-score.critical {{ background: #7f1d1d; color: #fca5a5; }}
.cat-score.warning {{ background: #78350f; color: #fcd34d; }}
.cat-score.good {{ background: #064e3b; color: #6ee7b7; }}
.cat-score.excellent {{ background: #1e3a8a; color: #93c5fd; }}
.progress {{ height: 6px; background: #334155; border-radius: 3px; overflow: hidden; margin-bottom: 10px; }}
.bar {{ height: 100%; border-radius: 3px; }}
.bar.critical {{ background: #ef4444; }}
.bar.warning {{ background: #f59e0b; }}
.bar.good {{ background: #10b981; }}
.bar.excellent {{ background: #3b82f6; }}
.cat-summary {{ color: #94a3b8; font-size: 0.9rem; }}
.cat-lists {{ display: grid; grid-template-columns: 1fr 1fr; gap: 10px; font-size: 0.9rem; margin-top: 20px; }}
.strengths ul, .weaknesses ul, .steps {{ margin-left: 16px; color: #94a3b8; }}
.strengths li {{ color: #10b981; }}
.weaknesses li {{ color: #f59e0b; }}
.none {{ color: #64748b !important; }}

.badge {{ padding: 2px 8px; border-radius: 4px; font-size: 0.75rem; font-weight: 600; }}
.badge.error, .badge.high, .badge.critical {{ background: #7f1d1d; color: #fca5a5; }}
.badge.warning, .badge.medium {{ background: #78350f; color: #fcd34d; }}
.badge.info, .badge.good {{ background: #064e3b; color: #6ee7b7; }}
.badge.excellent {{ background: #1e3a8a; color: #93c5fd; }}

.issues-table {{ width: 100%; border-collapse: collapse; font-size: 0.9rem; }}
.issues-table th {{ text-align: left; padding: 12px; background: #0f172a; border-bottom: 2px solid #334155; }}
.issues-table td {{ padding: 10px 12px; border-bottom: 1px solid #334155; }}
.issues-table tr:hover {{ background: rgba(255,255,255,0.02); }}

.recommendation {{ background: rgba(59,130,246,0.1); border: 1px solid rgba(59,130,246,0.3); border-radius: 10px; padding: 20px; margin-top: 20px; }}
.recommendation.high {{ background: rgba(239,68,68,0.08); border-color: rgba(239,68,68,0.3); }}
.recommendation h3 {{ color: #60a5fa; margin: 0 0 10px; }}
.recommendation ul {{ margin: 10px 0 0 20px; color: #94a3b8; }}

.level-bg {{ background: linear-gradient(135deg, #1e293b 0%, #1e1b4b 100%); }}

.footer {{ text-align: center; color: #64748b; font-size: 0.85rem; margin-top: 40px; padding-top: 20px; border-top: 1px solid #334155; }}

@media (max-width: 768px) {{
    .cat-lists {{ grid-template-columns: 1fr; }}
}}
</style>
</head><body>
<h1>{title}</h1>
'''

    def _footer(self, timestamp: str) -> str:
        return f'''
<div class="footer">
    frontend-assessor · {escape(self.messages.t("report.generated_at", date=timestamp[:10]))}
</div>
</body></html>
'''
