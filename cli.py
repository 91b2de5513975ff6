#!/usr/bin/env python3
"""
Frontend Assessor - Command Line Interface

Commands:
- assess: score a project and write reports
- init: create an assessor.yaml with defaults
- rules: list every rule
- levels: show level criteria
- lang: list supported languages
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from assessor.assessment import assess_project
from assessor.config import ConfigError, load_config, write_default_config
from assessor.i18n import SUPPORTED_LANGUAGES, Messages, default_language
from assessor.level_classifier import LEVEL_MIN_SCORES, MIDDLE_GATE, SENIOR_GATE
from assessor.models import LEVELS
from assessor.reporters import write_reports
from assessor.rules import CATEGORIES, get_category

logger = logging.getLogger(__name__)

# Flags that take one value; --include / --exclude take one or more
VALUE_FLAGS = {
    "--framework": "framework",
    "--output": "output_format",
    "--path": "output_path",
    "--level": "target_level",
    "--lang": "language",
    "--config": "config_file",
    "--category": "category",
}
LIST_FLAGS = {
    "--include": "include_patterns",
    "--exclude": "exclude_patterns",
}


def print_usage():
    """Print usage information"""
    print("""
Frontend Assessor CLI

Usage:
  frontend-assessor assess <path> [options]   Assess a project
  frontend-assessor init [--framework F]      Create assessor.yaml in the current directory
  frontend-assessor rules [--category NAME]   List rules
  frontend-assessor levels                    Show level criteria
  frontend-assessor lang                      List supported languages

Assess options:
  --framework F        auto, react, vue, angular, svelte, vanilla
  --output FMT         console, json, html, all
  --path P             Base path for json/html reports
  --level L            Target level for next steps: junior, middle, senior
  --include PAT ...    Include glob patterns
  --exclude PAT ...    Exclude glob patterns
  --lang L             Report language: en, ru
  --config FILE        Configuration file (default: <path>/assessor.yaml)
  --quiet, -q          Only print the report
  --verbose, -v        Log discovery and configuration details

Examples:
  frontend-assessor assess ./src
  frontend-assessor assess . --framework react --output html --path report.html
  frontend-assessor assess . --include "src/**/*.tsx" --exclude "**/*.stories.*"
""")


def parse_options(args: list[str]) -> tuple[list[str], dict]:
    """
    Split arguments into positionals and options.

    Returns:
        (positionals, options) where options are keyed by setting name
    """
    positionals = []
    options: dict = {}

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in VALUE_FLAGS:
            if i + 1 >= len(args):
                raise ConfigError(f"Missing value for {arg}")
            i += 1
            options[VALUE_FLAGS[arg]] = args[i]
        elif arg in LIST_FLAGS:
            values = []
            while i + 1 < len(args) and not args[i + 1].startswith("--"):
                i += 1
                values.append(args[i])
            if not values:
                raise ConfigError(f"Missing value for {arg}")
            options[LIST_FLAGS[arg]] = values
        elif arg.startswith("--"):
            raise ConfigError(f"Unknown option: {arg}")
        else:
            positionals.append(arg)
        i += 1

    return positionals, options


def run_assess(args: list[str], quiet: bool = False) -> int:
    """Assess a project and write the requested reports"""
    positionals, options = parse_options(args)
    if not positionals:
        print("Usage: frontend-assessor assess <path> [options]")
        return 1

    project_path = positionals[0]
    messages = Messages(options.get("language"))

    if not Path(project_path).exists():
        print(f"❌ {messages.t('cli.messages.project_not_found', path=project_path)}")
        return 1

    config_file = options.pop("config_file", None)
    options.pop("category", None)
    config = load_config(project_path, config_file, **options)
    messages = Messages(config.language)

    if not quiet:
        print(f"🔍 {messages.t('assessment.starting', path=config.project_path)}")
        print(f"   {messages.t('assessment.framework', framework=config.framework)}")
        print(f"   {messages.t('assessment.output_format', format=config.output_format)}")
        if config.target_level:
            print(f"   {messages.t('assessment.target_level', level=config.target_level)}")
        print()

    title_to_name = {c.title: c.name for c in CATEGORIES}

    def on_progress(title: str, step: int, total: int):
        if not quiet:
            print(f"   [{step}/{total}] {messages.category(title_to_name.get(title, title))}...")

    result = assess_project(config, on_progress=on_progress)

    if not quiet:
        level_name = messages.t(f"levels.{result.level}.name")
        print(f"\n✅ {messages.t('assessment.completed', score=result.overall_score, level=level_name)}")

    for path in write_reports(result, config.output_format, config.output_path, messages):
        print(f"📄 {messages.t('cli.messages.report_generated', format=path.suffix[1:].upper(), path=path)}")

    return 0


def run_init(args: list[str]) -> int:
    """Create assessor.yaml in the current directory"""
    _, options = parse_options(args)
    messages = Messages(options.get("language"))
    path = write_default_config(".", options.get("framework", "auto"))
    print(f"✅ {messages.t('cli.messages.config_created', path=path)}")
    return 0


def show_rules(args: list[str]) -> int:
    """Display every rule, optionally for one category"""
    _, options = parse_options(args)
    messages = Messages(options.get("language"))

    if "category" in options:
        categories = [get_category(options["category"])]
    else:
        categories = list(CATEGORIES)

    console = Console()
    table = Table(title=messages.t("cli.messages.available_rules"), show_header=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column(messages.t("common.category"))
    table.add_column(messages.t("common.severity"), no_wrap=True)
    table.add_column("Weight", justify="right", no_wrap=True)
    table.add_column(messages.t("common.rule"))
    table.add_column("Description")

    severity_style = {"error": "red", "warning": "yellow", "info": "dim"}
    for category in categories:
        for rule in category.rules:
            style = severity_style[rule.severity]
            table.add_row(
                rule.id,
                messages.category(category.name),
                f"[{style}]{rule.severity}[/{style}]",
                str(rule.weight),
                rule.name,
                rule.description,
            )

    console.print(table)
    return 0


def show_levels(args: list[str]) -> int:
    """Display the criteria for each developer level"""
    _, options = parse_options(args)
    messages = Messages(options.get("language"))
    gates = {"middle": MIDDLE_GATE, "senior": SENIOR_GATE}

    console = Console()
    console.print(f"\n[bold cyan]{messages.t('cli.messages.level_criteria')}[/bold cyan]\n")

    for level in LEVELS:
        console.print(f"[bold yellow]{messages.t(f'levels.{level}.name')}[/bold yellow] "
                      f"[dim](min score {LEVEL_MIN_SCORES[level]})[/dim]")
        console.print(f"  {messages.t(f'levels.{level}.description')}")
        for criterion in messages.t_list(f"levels.{level}.criteria"):
            console.print(f"  • {criterion}")
        if level in gates:
            overall, practice, architecture, complexity = gates[level]
            console.print(f"  [dim]Gate: overall ≥ {overall}, practice ≥ {practice}, "
                          f"architecture ≥ {architecture}%, complexity ≥ {complexity}[/dim]")
        console.print()

    return 0


def show_languages() -> int:
    """List supported languages"""
    current = default_language()
    print("\nLanguages:")
    for code, name in SUPPORTED_LANGUAGES.items():
        marker = " (current)" if code == current else ""
        print(f"  {code}: {name}{marker}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point"""
    load_dotenv()

    args = list(sys.argv[1:] if argv is None else argv)
    quiet = "--quiet" in args or "-q" in args
    verbose = "--verbose" in args or "-v" in args
    args = [a for a in args if a not in ("--quiet", "-q", "--verbose", "-v")]

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args or args[0].lower() in ["-h", "--help", "help"]:
        print_usage()
        return 0

    command = args[0].lower()
    try:
        if command == "assess":
            return run_assess(args[1:], quiet=quiet)
        elif command == "init":
            return run_init(args[1:])
        elif command == "rules":
            return show_rules(args[1:])
        elif command == "levels":
            return show_levels(args[1:])
        elif command == "lang":
            return show_languages()
        else:
            print(f"Unknown command: {command}")
            print_usage()
            return 1
    except (ValueError, OSError) as e:
        logger.debug("Command %s failed", command, exc_info=True)
        print(f"❌ {Messages().t('cli.messages.error', details=e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
