import pytest

from assessor.models import FileRecord

BUTTON_TSX = """import React, { useState } from 'react';

interface ButtonProps {
  label: string;
  onClick: () => void;
}

/** Primary action button */
export default function Button({ label, onClick }: ButtonProps) {
  const [pressed, setPressed] = useState(false);

  return (
    <button aria-label={label} onClick={() => { setPressed(true); onClick(); }}>
      {label}
    </button>
  );
}
"""

USE_COUNTER_TS = """import { useState, useCallback } from 'react';

export const useCounter = (initialValue: number = 0) => {
  const [count, setCount] = useState<number>(initialValue);
  const increment = useCallback(() => setCount(prev => prev + 1), []);
  return { count, increment };
};
"""

API_JS = """const API_BASE_URL = 'https://api.example.com';

export async function fetchUser(userId) {
  try {
    const response = await fetch(`${API_BASE_URL}/users/${userId}`);
    return await response.json();
  } catch (error) {
    throw new Error('Could not load user ' + userId);
  }
}
"""


@pytest.fixture
def make_record():
    """Factory for FileRecords with explicit framework and type."""
    def _make(content: str = "", path: str = "src/example.js",
              framework: str = "unknown", type: str = "other") -> FileRecord:
        return FileRecord(
            path=path,
            content=content,
            size=len(content.encode("utf-8")),
            lines=content.count("\n") + 1,
            framework=framework,
            type=type,
        )
    return _make


@pytest.fixture
def sample_project(tmp_path):
    """A small React project with files that default excludes should skip."""
    files = {
        "src/components/Button.tsx": BUTTON_TSX,
        "src/hooks/useCounter.ts": USE_COUNTER_TS,
        "src/utils/api.js": API_JS,
        "src/components/Button.test.tsx": "test('renders', () => {});\n",
        "node_modules/lib/index.js": "module.exports = {};\n",
        "dist/bundle.js": "console.log('built');\n",
        "README.md": "# Sample\n",
    }
    for relative, content in files.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return tmp_path
