"""README generation for a personalized project."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

DEFAULT_DESCRIPTION = "A TypeScript/Express backend API"

README_TEMPLATE = """# {{ project_name }}

{{ description }}

## Getting Started

### Prerequisites

- Node.js 22 (check `.nvmrc`)
- npm

### Installation

```bash
nvm use  # Use the correct Node.js version
npm install
```

### Development

Start the development server with auto-reload:

```bash
npm run dev
```

The server will be available at `http://localhost:3000`

## Available Scripts

- `npm run dev` - Start development server with auto-reload
- `npm run start` - Run compiled server
- `npm run build` - Build project (compile TypeScript)
- `npm run type-check` - Run TypeScript type checker
- `npm run lint` - Check code with ESLint
- `npm run lint:fix` - Auto-fix linting issues
- `npm run format` - Format code with Prettier
- `npm run format:check` - Check code formatting
- `npm run test` - Run tests in watch mode
- `npm run test:run` - Run tests once (CI mode)
- `npm run test:ui` - Interactive test UI in browser
- `npm run coverage` - Generate test coverage report

## Project Structure

```
src/
├── index.ts           # Application entry point
├── utils/             # Utility functions
└── __tests__/         # Test files
.github/
├── workflows/
│   └── ci.yml         # GitHub Actions CI pipeline
.husky/               # Git hooks
.vscode/              # VS Code settings
```

## Code Quality

This project includes:

- **TypeScript** - Static type checking
- **ESLint** - Code linting with TypeScript support
- **Prettier** - Code formatting
- **Vitest** - Unit testing framework
- **Husky** - Git hooks for pre-commit checks
- **GitHub Actions** - Automated CI/CD pipeline

### Pre-commit Hooks

When you commit code, Husky automatically:

1. Runs tests
2. Type checks your code
3. Lints and formats staged files

If any check fails, the commit is blocked until you fix the issues.

## Environment Variables

Create a `.env` file in the root directory:

```
PORT=3000
```

See `.env.example` for available variables.

## License

ISC
"""


class ReadmeError(RuntimeError):
    """Raised when the README cannot be written."""


def render_template(template: str, variables: Mapping[str, str]) -> str:
    """Render a template using a simple {{ key }} substitution.

    Example:
        >>> render_template("# {{ name }}", {"name": "my-api"})
        '# my-api'
    """
    rendered = template
    for key, value in variables.items():
        rendered = rendered.replace(f"{{{{ {key} }}}}", value)
    return rendered


def render_readme(project_name: str, description: str = "") -> str:
    """Render the README for ``project_name``.

    Example:
        >>> render_readme("my-api").splitlines()[:3]
        ['# my-api', '', 'A TypeScript/Express backend API']
    """
    return render_template(
        README_TEMPLATE,
        {
            "project_name": project_name,
            "description": description or DEFAULT_DESCRIPTION,
        },
    )


def write_readme(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ReadmeError(f"failed to write {path.name}: {exc}") from exc
