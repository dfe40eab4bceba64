"""Developer tasks for schematic-nav, run with ``invoke <task>``."""

from __future__ import annotations

from invoke import task


@task
def tests(c):
    """Run the unit tests."""
    c.run("uv run pytest tests/", pty=True)


@task
def coverage(c):
    """Run the unit tests under coverage and print the report."""
    c.run("uv run coverage run -m pytest tests/", pty=True)
    c.run("uv run coverage report")


@task
def browsers(c):
    """Install the Playwright browser binaries the CLI launches."""
    c.run("uv run playwright install chromium firefox webkit", pty=True)


@task
def lint(c):
    """Check formatting and types."""
    c.run("uv run black --check src tests")
    c.run("uv run mypy src")
