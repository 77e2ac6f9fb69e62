"""Global pytest fixtures and configuration.

This module provides shared fixtures for all tests including:
- Isolation of configuration environment variables
- A small on-disk workspace with TypeScript sources
"""
from __future__ import annotations

from pathlib import Path

import pytest

import src.config as config_module

CONFIG_ENV_VARS = (
    "WORKSPACE_ROOT",
    "ALLOW_UNICODE_PATHS",
    "MAX_PATH_LENGTH",
    "ADDITIONAL_ALLOWED_PATH_CHARS",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_TO_FILE",
    "LOG_DIR",
    "VERBOSE",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Clear configuration variables and the cached Config singleton."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config_instance", None)


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a minimal monorepo workspace.

    Layout:
        packages/lib1/src/index.ts
        packages/lib1/src/lib/utils.ts
        packages/app/src/main.ts
    """
    lib_src = tmp_path / "packages" / "lib1" / "src"
    (lib_src / "lib").mkdir(parents=True)
    (lib_src / "index.ts").write_text("export * from './lib/utils';\n", encoding="utf-8")
    (lib_src / "lib" / "utils.ts").write_text(
        "export const add = (a: number, b: number) => a + b;\n", encoding="utf-8"
    )

    app_src = tmp_path / "packages" / "app" / "src"
    app_src.mkdir(parents=True)
    (app_src / "main.ts").write_text(
        "import { add } from '@org/lib1';\n"
        "const lazy = import('@org/lib1');\n"
        "const other = require(\"@org/lib1-extra\");\n",
        encoding="utf-8",
    )
    return tmp_path
