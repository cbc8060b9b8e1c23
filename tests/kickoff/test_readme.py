from __future__ import annotations

from pathlib import Path

import pytest

from kickoff import readme


def test_readme_uses_fallback_description() -> None:
    content = readme.render_readme("my-api", "")
    lines = content.splitlines()

    assert lines[0] == "# my-api"
    assert lines[2] == readme.DEFAULT_DESCRIPTION
    assert "{{" not in content


def test_readme_uses_given_description() -> None:
    content = readme.render_readme("my-api", "A cool API")

    assert content.startswith("# my-api\n\nA cool API\n\n## Getting Started\n")
    assert readme.DEFAULT_DESCRIPTION not in content


def test_readme_keeps_fixed_sections() -> None:
    content = readme.render_readme("my-api")

    for heading in (
        "## Available Scripts",
        "## Project Structure",
        "## Code Quality",
        "### Pre-commit Hooks",
        "## Environment Variables",
        "## License",
    ):
        assert heading in content
    assert "`npm run dev` - Start development server with auto-reload" in content
    assert content.endswith("ISC\n")


def test_write_readme_replaces_content(tmp_path: Path) -> None:
    path = tmp_path / "README.md"
    path.write_text("# template\n\nold notes\n", encoding="utf-8")

    readme.write_readme(path, readme.render_readme("my-api"))

    text = path.read_text(encoding="utf-8")
    assert text.startswith("# my-api\n")
    assert "old notes" not in text


def test_write_readme_wraps_os_errors(tmp_path: Path) -> None:
    with pytest.raises(readme.ReadmeError, match="failed to write"):
        readme.write_readme(tmp_path / "missing" / "README.md", "# my-api\n")
