"""
Pytest configuration for natural_numbers tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE, default "default")
- A clean overflow-policy environment for every test
- Shared test utilities (repo_root, run_module)
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from natural_numbers.config import ENV_OVERFLOW

REPO_ROOT = Path(__file__).resolve().parents[1]

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# print_blob=True makes failures easy to reproduce.
# NOTE: Do NOT set database=None - that DISABLES the example database.

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
    )

    # CI: more examples, fixed seed
    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
        max_examples=500,
    )

    settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))

except ImportError:
    pass  # hypothesis not installed, skip configuration


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def _clean_overflow_env(monkeypatch):
    """Tests start from the default overflow policy unless they set one."""
    monkeypatch.delenv(ENV_OVERFLOW, raising=False)


def run_module(module: str, *args: str, env_extra=None, stdin=None):
    """Run `python -m module args...` from the repo root and capture output."""
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + env.get("PYTHONPATH", "")
    env.pop(ENV_OVERFLOW, None)
    if env_extra:
        env.update(env_extra)
    return subprocess.run(
        [sys.executable, "-m", module, *args],
        cwd=str(REPO_ROOT),
        env=env,
        input=stdin,
        capture_output=True,
        text=True,
    )
