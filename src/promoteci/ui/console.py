"""Console output formatting utilities for promoteci."""

from __future__ import annotations

import sys
from typing import Optional

from promoteci.model import Job


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
        """
        self.debug = debug

    def print_header(self, title: str) -> None:
        """Print a section header."""
        print(f"\n{title}")
        print("-" * len(title))

    def print_config_loaded(self, config_file: str, deployment_count: int) -> None:
        """Print config load information."""
        print("\nCONFIG LOADED")
        print(f"File: {config_file}")
        print(f"Deployments: {deployment_count}")

    def print_jobs(self, jobs: list[Job]) -> None:
        """Print each job with its stage and dependency."""
        self.print_header("JOBS")
        for job in jobs:
            needs = job.needs or "-"
            print(f"  {job.id} [{job.stage}] needs: {needs}")

    def print_plan(self, levels: list[list[str]]) -> None:
        """Print promotion levels in order."""
        self.print_header("PROMOTION PLAN")
        for idx, level in enumerate(levels, start=1):
            print(f"Level {idx}:")
            for name in level:
                print(f"  {name}")

    def print_written(self, output: str, job_count: int) -> None:
        """Print pipeline write confirmation."""
        print(f"\nPipeline with {job_count} job(s) written to {output}")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
