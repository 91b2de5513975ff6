import pytest

from assessor.classifier import build_file_record, classify_type, detect_framework


class TestDetectFramework:
    def test_vue_extension_wins_regardless_of_content(self):
        assert detect_framework("import React from 'react'; useState()", "src/App.vue") == "vue"

    def test_react(self):
        content = "import React, { useState } from 'react';\nconst [a, setA] = useState(0);"
        assert detect_framework(content, "src/App.js") == "react"

    def test_angular(self):
        content = ("import { Component } from '@angular/core';\n"
                   "@Component({ selector: 'app-root' })\nexport class AppComponent {}")
        assert detect_framework(content, "src/app.component.ts") == "angular"

    def test_svelte(self):
        content = "import { onMount } from 'svelte';\nexport let name;\n$: doubled = count * 2;"
        assert detect_framework(content, "src/Widget.js") == "svelte"

    def test_vanilla_dom_code(self):
        assert detect_framework("document.querySelector('#app').textContent = 'hi';", "main.js") == "vanilla"

    def test_unknown(self):
        assert detect_framework("const answer = 42;", "answer.js") == "unknown"

    def test_single_signal_is_not_enough(self):
        assert detect_framework("const [a, setA] = useState(0);", "hook.js") == "unknown"

    def test_react_checked_before_vue(self):
        content = "React.version; useState; createApp(); <div v-if=\"ok\"></div>"
        assert detect_framework(content, "mixed.js") == "react"


class TestClassifyType:
    @pytest.mark.parametrize("path", [
        "src/Button.test.tsx",
        "src/__tests__/helpers.js",
        "src/Button.spec.ts",
    ])
    def test_test_paths(self, path):
        assert classify_type(path, "export default Button") == "test"

    def test_config_path(self):
        assert classify_type("vite.config.js", "export default {}") == "config"

    def test_path_checks_are_case_insensitive(self):
        assert classify_type("src/AppConfig.js", "") == "config"

    def test_component_marker(self):
        assert classify_type("src/Button.jsx", "export default Button;") == "component"

    def test_component_checked_before_service(self):
        assert classify_type("src/Users.jsx", "fetch('/users');\nexport default Users;") == "component"

    def test_service_marker(self):
        assert classify_type("src/users.js", "const r = fetch('/users');") == "service"

    def test_utility_marker(self):
        assert classify_type("src/math.js", "export function add(a, b) { return a + b; }") == "utility"

    def test_other(self):
        assert classify_type("src/main.js", "console.log(1);") == "other"


class TestBuildFileRecord:
    def test_normalizes_separators(self):
        record = build_file_record("src\\components\\Button.jsx", "export default Button;")
        assert record.path == "src/components/Button.jsx"
        assert record.type == "component"

    def test_size_is_utf8_bytes(self):
        record = build_file_record("a.js", "é")
        assert record.size == 2

    def test_lines_count_trailing_newline(self):
        assert build_file_record("a.js", "a\nb\n").lines == 3
        assert build_file_record("a.js", "").lines == 1

    def test_framework_hint_overrides_detection(self):
        record = build_file_record("a.js", "document.body", framework_hint="react")
        assert record.framework == "react"

    def test_auto_detects(self):
        assert build_file_record("a.js", "document.body").framework == "vanilla"

    def test_unknown_hint_raises(self):
        with pytest.raises(ValueError):
            build_file_record("a.js", "", framework_hint="ember")
