import pytest

from assessor.rules import CATEGORIES, CATEGORY_WEIGHTS, get_category
from assessor.rules.base import calculate_complexity, check_regex
from assessor.rules import architecture, best_practices, code_quality, maintainability, performance


EXPECTED_RULES = {
    "code_quality": [("CQ001", "warning", 10), ("CQ002", "warning", 15), ("CQ003", "error", 20),
                     ("CQ004", "info", 5), ("CQ005", "warning", 12), ("CQ006", "info", 8)],
    "performance": [("PERF001", "warning", 15), ("PERF002", "info", 10), ("PERF003", "error", 20),
                    ("PERF004", "warning", 18), ("PERF005", "warning", 12), ("PERF006", "info", 8)],
    "architecture": [("ARCH001", "warning", 20), ("ARCH002", "info", 15), ("ARCH003", "warning", 18),
                     ("ARCH004", "info", 12), ("ARCH005", "info", 10), ("ARCH006", "warning", 14)],
    "best_practices": [("BP001", "warning", 20), ("BP002", "error", 18), ("BP003", "error", 15),
                       ("BP004", "warning", 12), ("BP005", "warning", 10), ("BP006", "warning", 15)],
    "maintainability": [("MAINT001", "info", 12), ("MAINT002", "warning", 15), ("MAINT003", "warning", 10),
                        ("MAINT004", "warning", 8), ("MAINT005", "info", 7), ("MAINT006", "info", 8)],
}


# ========== Registry ==========

def test_categories_in_order():
    assert [c.name for c in CATEGORIES] == list(EXPECTED_RULES)


def test_category_weights_sum_to_100():
    assert sum(CATEGORY_WEIGHTS.values()) == 100
    assert set(CATEGORY_WEIGHTS) == {c.name for c in CATEGORIES}


@pytest.mark.parametrize("category", CATEGORIES, ids=lambda c: c.name)
def test_rule_table(category):
    assert [(r.id, r.severity, r.weight) for r in category.rules] == EXPECTED_RULES[category.name]


def test_get_category():
    assert get_category("performance").title == "Performance"
    with pytest.raises(ValueError):
        get_category("security")


# ========== Category analysis ==========

@pytest.mark.parametrize("category", CATEGORIES, ids=lambda c: c.name)
def test_max_score_is_rule_weights_times_files(category, make_record):
    files = [
        make_record("const a = 1;", path="a.js"),
        make_record("export default App;", path="src/components/App.jsx", framework="react", type="component"),
        make_record("<template><div/></template>", path="src/Card.vue", framework="vue", type="component"),
    ]
    result = category.analyze(files)

    assert result.max_score == sum(r.weight for r in category.rules) * len(files)
    assert 0 <= result.score <= result.max_score
    assert 0 <= result.percentage <= 100


@pytest.mark.parametrize("category", CATEGORIES, ids=lambda c: c.name)
def test_empty_corpus_scores_full(category):
    result = category.analyze([])
    assert result.score == 0
    assert result.max_score == 0
    assert result.percentage == 100
    assert result.issues == []


def test_failed_weights_account_for_missing_score(make_record):
    files = [make_record("el.innerHTML = html;\nawait load();", path="a.js")]
    result = get_category("best_practices").analyze(files)

    weights = {r.id: r.weight for r in get_category("best_practices").rules}
    lost = sum(weights[i.rule_id] for i in result.issues)
    assert result.score + lost == result.max_score


def test_issues_follow_file_then_rule_order(make_record):
    files = [
        make_record("eval(code); await run();", path="b.js"),
        make_record("eval(code); await run();", path="a.js"),
    ]
    issues = get_category("best_practices").analyze(files).issues

    assert [(i.file_path, i.rule_id) for i in issues] == [
        ("b.js", "BP002"), ("b.js", "BP003"),
        ("a.js", "BP002"), ("a.js", "BP003"),
    ]


def test_issue_takes_rule_severity(make_record):
    issues = get_category("best_practices").analyze([make_record("eval(x)")]).issues
    assert issues[0].severity == "error"
    assert issues[0].key == "BP003:src/example.js"


@pytest.mark.parametrize("content", ["", "(((", "\\", "{{{{", "/** unterminated", "ünïcödé ✓", "import { } from ''"])
def test_predicates_are_total(content, make_record):
    for file_type in ("component", "service", "utility", "config", "test", "other"):
        for framework in ("react", "vue", "angular", "svelte", "vanilla", "unknown"):
            record = make_record(content, path="src/x.vue", framework=framework, type=file_type)
            for category in CATEGORIES:
                for rule in category.rules:
                    outcome = rule.check(record)
                    assert isinstance(outcome.passed, bool)


def test_analysis_is_deterministic(make_record):
    files = [make_record("if (a && b) { eval(c); }", path="a.js")]
    for category in CATEGORIES:
        assert category.analyze(files) == category.analyze(files)


# ========== Helpers ==========

def test_check_regex_reports_line_and_column():
    outcome = check_regex("let ok = 1;\n  const Bad = 2;", r"const\s+[A-Z]", "bad")
    assert not outcome.passed
    assert outcome.line == 2
    assert outcome.column == 2


def test_calculate_complexity():
    assert calculate_complexity("") == 1
    assert calculate_complexity("if (a && b || c) {}") == 4
    # 'else if (' counts both as an if and an else-if
    assert calculate_complexity("} else if (x) {") == 3


# ========== Code quality ==========

def test_naming(make_record):
    assert code_quality.check_naming(make_record("const goodName = 1;")).passed
    outcome = code_quality.check_naming(make_record("let ok = 1;\nconst Bad = 2;"))
    assert not outcome.passed
    assert outcome.line == 2


def test_function_length(make_record):
    short = "function small() {\n  return 1;\n}"
    long = "function big() {\n" + "  x++;\n" * 60 + "}"
    assert code_quality.check_function_length(make_record(short)).passed
    assert not code_quality.check_function_length(make_record(long)).passed


def test_complexity_limit_depends_on_type(make_record):
    content = "if (a) {}\n" * 10
    assert not code_quality.check_complexity(make_record(content, type="other")).passed
    assert code_quality.check_complexity(make_record(content, type="component")).passed


def test_complexity_message(make_record):
    outcome = code_quality.check_complexity(make_record("if (a) {}\n" * 10))
    assert outcome.message == "Cyclomatic complexity 11 exceeds 10"


def test_magic_numbers(make_record):
    assert code_quality.check_magic_numbers(make_record("a = 42; b = 99; c = 77;")).passed
    assert not code_quality.check_magic_numbers(make_record("a = 42; b = 99; c = 77; d = 55;")).passed


def test_duplication(make_record):
    repeated = "const value = compute();\n" * 5
    distinct = "const first = compute();\nconst second = compute();\n"
    assert not code_quality.check_duplication(make_record(repeated)).passed
    assert code_quality.check_duplication(make_record(distinct)).passed


def test_comments(make_record):
    assert code_quality.check_comments(make_record("const a = 1;")).passed
    assert not code_quality.check_comments(make_record("// a /* b */")).passed
    assert not code_quality.check_comments(make_record("x++;\n" * 60)).passed


# ========== Performance ==========

def test_bundle_size_limit_depends_on_type(make_record):
    content = "a" * 15000
    assert not performance.check_bundle_size(make_record(content, type="utility")).passed
    assert performance.check_bundle_size(make_record(content, type="component")).passed


def test_lazy_loading(make_record):
    imports = "\n".join(f"import m{i} from './m{i}';" for i in range(6))
    assert not performance.check_lazy_loading(make_record(imports, type="component")).passed
    assert performance.check_lazy_loading(make_record(imports + "\nReact.lazy(f);", type="component")).passed
    assert performance.check_lazy_loading(make_record(imports, type="utility")).passed


def test_lazy_loading_counts_imports_at_line_start_only(make_record):
    inline = "; ".join(f"import m{i} from './m{i}'" for i in range(6))
    assert performance.check_lazy_loading(make_record(inline, type="component")).passed


def test_heavy_operations(make_record):
    assert not performance.check_heavy_operations(make_record("const d = JSON.parse(raw);")).passed
    assert performance.check_heavy_operations(make_record("const a = 1;")).passed


def test_memory_leaks(make_record):
    assert not performance.check_memory_leaks(make_record("const id = setInterval(tick, 1000);")).passed
    cleaned = "const id = setInterval(tick, 1000);\nclearInterval(id);"
    assert performance.check_memory_leaks(make_record(cleaned)).passed


def test_unnecessary_renders_react(make_record):
    nested = "return <p>{props.user.name}</p>;"
    assert not performance.check_unnecessary_renders(
        make_record(nested, framework="react", type="component")).passed
    assert performance.check_unnecessary_renders(
        make_record(nested + "\nuseMemo(f, []);", framework="react", type="component")).passed
    assert performance.check_unnecessary_renders(
        make_record(nested, framework="react", type="utility")).passed
    assert performance.check_unnecessary_renders(
        make_record(nested, framework="vanilla", type="component")).passed


def test_unnecessary_renders_vue(make_record):
    template = "<p>{{ a }}</p>" * 6
    assert not performance.check_unnecessary_renders(make_record(template, framework="vue")).passed
    assert performance.check_unnecessary_renders(
        make_record(template + "computed(() => a)", framework="vue")).passed


def test_image_optimization(make_record):
    assert not performance.check_image_optimization(make_record("src='logo.PNG'")).passed
    assert performance.check_image_optimization(make_record("logo.png logo.webp")).passed


# ========== Architecture ==========

def test_separation_of_concerns(make_record):
    content = "fetch(a); fetch(b); localStorage.setItem(k, v);"
    assert not architecture.check_separation_of_concerns(make_record(content, type="component")).passed
    assert architecture.check_separation_of_concerns(make_record(content, type="service")).passed


def test_dependency_injection(make_record):
    hardcoded = "this.users = new UserService();"
    injected = "constructor(private users: UserService) {}\nnew UserService();"
    assert not architecture.check_dependency_injection(make_record(hardcoded, type="service")).passed
    assert architecture.check_dependency_injection(make_record(injected, type="service")).passed
    assert architecture.check_dependency_injection(make_record(hardcoded, type="component")).passed


def test_single_responsibility(make_record):
    many = "\n".join(f"export const c{i} = {i};" for i in range(6))
    assert not architecture.check_single_responsibility(make_record(many)).passed
    assert architecture.check_single_responsibility(make_record("export const a = 1;")).passed


def test_layered_architecture(make_record):
    content = "import { getUsers } from '../api/users';"
    assert not architecture.check_layered_architecture(
        make_record(content, path="src/components/List.jsx")).passed
    assert architecture.check_layered_architecture(make_record(content, path="src/utils/list.js")).passed


def test_design_patterns_service(make_record):
    assert not architecture.check_design_patterns(make_record("new HttpService()", type="service")).passed
    assert architecture.check_design_patterns(
        make_record("new HttpService(); getInstance()", type="service")).passed


def test_module_coupling(make_record):
    coupled = "import a from '../a';\nimport b from '../../b';"
    assert not architecture.check_module_coupling(make_record(coupled)).passed
    assert architecture.check_module_coupling(make_record("const a = 1;")).passed


# ========== Best practices ==========

def test_typescript_large_js_file(make_record):
    assert not best_practices.check_typescript(make_record("x++\n" * 60, path="a.js")).passed
    assert best_practices.check_typescript(make_record("x++\n" * 10, path="a.js")).passed


def test_typescript_without_annotations(make_record):
    assert not best_practices.check_typescript(make_record("x++\n" * 25, path="a.ts")).passed
    typed = "const a: number = 1;\n" + "x++\n" * 25
    assert best_practices.check_typescript(make_record(typed, path="a.ts")).passed


def test_error_handling(make_record):
    assert not best_practices.check_error_handling(make_record("await load();")).passed
    assert best_practices.check_error_handling(make_record("try { await load(); } catch (e) {}")).passed
    assert best_practices.check_error_handling(make_record("const a = 1;")).passed


def test_security_reports_first_hit_in_order(make_record):
    outcome = best_practices.check_security(make_record("eval(code); el.innerHTML = html;"))
    assert outcome.message == "Assigning innerHTML can lead to XSS"
    assert best_practices.check_security(make_record("eval(code)")).message == "eval is unsafe"
    assert best_practices.check_security(make_record("el.textContent = t;")).passed


def test_testing(make_record):
    untested = "x++;\n" * 35
    assert not best_practices.check_testing(make_record(untested, type="component")).passed
    assert best_practices.check_testing(make_record(untested, type="test")).passed
    assert best_practices.check_testing(make_record(untested, type="utility")).passed


def test_accessibility(make_record):
    outcome = best_practices.check_accessibility(make_record("<img src='a.png'>", type="component"))
    assert outcome.message == "Images must have an alt attribute"
    assert best_practices.check_accessibility(
        make_record("<img src='a.png' alt='logo'>", type="component")).passed
    assert best_practices.check_accessibility(make_record("<img src='a.png'>", type="utility")).passed


def test_react_conventions(make_record):
    mixed = "class App extends React.Component {}\nconst [a] = useState(0);"
    conditional = "if (ready) { useEffect(() => {}); }"
    assert not best_practices.check_framework_conventions(make_record(mixed, framework="react")).passed
    assert not best_practices.check_framework_conventions(make_record(conditional, framework="react")).passed
    assert best_practices.check_framework_conventions(make_record(conditional, framework="vanilla")).passed


def test_vue_conventions(make_record):
    no_template = "<script>export default {}</script>"
    full = "<template><div/></template>\n<script>export default {}</script>"
    assert not best_practices.check_framework_conventions(
        make_record(no_template, path="src/A.vue", framework="vue")).passed
    assert best_practices.check_framework_conventions(
        make_record(full, path="src/A.vue", framework="vue")).passed


# ========== Maintainability ==========

def test_documentation(make_record):
    undocumented = "\n".join(f"function f{i}() {{}}" for i in range(4))
    documented = "\n".join(f"/** Does {i} */\nfunction f{i}() {{}}" for i in range(4))
    assert not maintainability.check_documentation(make_record(undocumented)).passed
    assert maintainability.check_documentation(make_record(documented)).passed


def test_readability(make_record):
    assert not maintainability.check_readability(make_record("x" * 121)).passed
    assert not maintainability.check_readability(make_record("\n".join([" " * 16 + "x"] * 6 + ["y"] * 60))).passed
    assert maintainability.check_readability(make_record("const a = 1;")).passed


def test_naming_consistency(make_record):
    assert not maintainability.check_naming_consistency(
        make_record("const user_name = get_value(first_name);")).passed
    assert maintainability.check_naming_consistency(
        make_record("const userName = getValue(firstName);")).passed


def test_dead_code_unused_import(make_record):
    outcome = maintainability.check_dead_code(make_record("import { useMemo } from 'react';\nexport const a = 1;"))
    assert outcome.message == "Found 1 unused imports"
    assert maintainability.check_dead_code(
        make_record("import { useMemo } from 'react';\nuseMemo(f, []);")).passed


def test_dead_code_commented_out_code(make_record):
    assert not maintainability.check_dead_code(make_record("// const old = 1;\n" * 4)).passed
    assert maintainability.check_dead_code(make_record("// explains something\n" * 4)).passed


def test_configuration(make_record):
    urls = "'https://a.example' 'https://b.example' 'https://c.example'"
    assert not maintainability.check_configuration(make_record(urls)).passed
    assert not maintainability.check_configuration(make_record("const p = 'C:\\\\temp\\\\file';")).passed
    assert maintainability.check_configuration(make_record("'https://a.example' 'https://b.example'")).passed


def test_error_messages(make_record):
    generic = "throw new Error('Error');\nthrow new Error('Failed');"
    descriptive = "throw new Error('User not found');"
    assert not maintainability.check_error_messages(make_record(generic)).passed
    assert maintainability.check_error_messages(make_record(descriptive)).passed
    assert maintainability.check_error_messages(make_record("const a = 1;")).passed
