"""
Console Reporter

Terminal rendering of an AssessmentResult with rich:
- Overall score and level panel
- Category table with progress bars
- Top error issues and high-priority recommendations
- Level analysis and summary
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from assessor.i18n import Messages
from assessor.models import AssessmentResult, round_half_up

BAR_LENGTH = 20
TOP_ISSUES = 5
TOP_RECOMMENDATIONS = 3

LEVEL_EMOJI = {
    "junior": "🌱",
    "middle": "🌿",
    "senior": "🌳",
}


def score_color(score: int) -> str:
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    else:
        return "red"


def progress_bar(percentage: int) -> str:
    filled = round_half_up(percentage * BAR_LENGTH, 100)
    return "█" * filled + "░" * (BAR_LENGTH - filled)


class ConsoleReporter:
    """Prints an assessment to the terminal"""

    def __init__(self, messages: Messages, console: Optional[Console] = None):
        self.messages = messages
        self.console = console or Console()

    def report(self, result: AssessmentResult):
        t = self.messages.t

        self.console.print(f"\n[bold cyan]🔍 {t('report.title')}[/bold cyan]\n")
        self._print_overall(result)
        self._print_categories(result)
        self._print_top_issues(result)
        self._print_recommendations(result)
        self._print_level_analysis(result)

        self.console.print(f"\n[bold]📋 {t('report.summary')}[/bold]")
        self.console.print(result.summary, markup=False)

    def _print_overall(self, result: AssessmentResult):
        t = self.messages.t
        color = score_color(result.overall_score)
        emoji = LEVEL_EMOJI.get(result.level, "❓")

        self.console.print(Panel(
            f"📊 {t('assessment.overall_score')}: [bold {color}]{result.overall_score}/100[/bold {color}]\n"
            f"🎯 {t('assessment.developer_level')}: {emoji} {t(f'levels.{result.level}.name')}",
            title=t("report.title"),
        ))

    def _print_categories(self, result: AssessmentResult):
        t = self.messages.t
        table = Table(title=f"📈 {t('report.categories_breakdown')}", show_header=True)
        table.add_column(t("common.category"), style="cyan", width=24)
        table.add_column(t("common.score"), justify="right", width=8)
        table.add_column("", width=BAR_LENGTH + 2)
        table.add_column(t("common.issues"), justify="right", width=8)

        for name, category in result.categories.items():
            color = score_color(category.percentage)
            table.add_row(
                self.messages.category(name),
                f"[{color}]{category.percentage}%[/{color}]",
                f"[{color}]{progress_bar(category.percentage)}[/{color}]",
                str(len(category.issues)),
            )

        self.console.print(table)

    def _print_top_issues(self, result: AssessmentResult):
        errors = [i for i in result.all_issues if i.severity == "error"][:TOP_ISSUES]
        if not errors:
            return

        t = self.messages.t
        self.console.print(f"\n[bold red]🚨 {t('report.top_issues')}[/bold red]")
        for n, issue in enumerate(errors, start=1):
            self.console.print(f"{n}. {issue.message}", markup=False)
            location = issue.file_path if issue.line is None else f"{issue.file_path}:{issue.line}"
            self.console.print(f"   📁 {t('common.file')}: {location}", markup=False)
            self.console.print(f"   🔧 {t('common.rule')}: {issue.rule_id}", markup=False)

    def _print_recommendations(self, result: AssessmentResult):
        high = [r for r in result.recommendations if r.priority == "high"][:TOP_RECOMMENDATIONS]
        if not high:
            return

        self.console.print(f"\n[bold yellow]💡 {self.messages.t('report.recommendations')}[/bold yellow]")
        for n, rec in enumerate(high, start=1):
            self.console.print(f"{n}. {rec.title}", markup=False)
            self.console.print(f"   {rec.description}", markup=False)

    def _print_level_analysis(self, result: AssessmentResult):
        analysis = result.level_analysis
        if analysis is None:
            return

        t = self.messages.t
        lines = [
            f"{t('report.practice_score')}: {analysis.practice_score}/100",
            f"{t('report.complexity_score')}: {analysis.complexity_score}/100",
            f"{t('report.time_to_next_level')}: {t(f'time_bands.{analysis.time_to_next_level}')}",
        ]
        if analysis.strengths:
            names = ", ".join(self.messages.category(s) for s in analysis.strengths)
            lines.append(f"[green]✓ {t('report.strengths')}:[/green] {names}")
        if analysis.weaknesses:
            names = ", ".join(self.messages.category(w) for w in analysis.weaknesses)
            lines.append(f"[yellow]⚠ {t('report.weaknesses')}:[/yellow] {names}")
        if analysis.next_steps:
            lines.append(f"\n[bold]{t('report.next_steps')}:[/bold]")
            lines.extend(f"  • {step}" for step in analysis.next_steps)

        self.console.print(Panel("\n".join(lines), title=f"🎯 {t('report.detailed_analysis')}"))
