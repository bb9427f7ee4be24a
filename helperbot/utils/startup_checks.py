"""
Startup checks module for validating configuration before connecting.

This module validates:
- Discord bot token
- Database location and write permissions
- Subject naming and selection settings
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..config import BotConfig, CONFIG_YAML_PATH
from .logging import logger


class CheckStatus(Enum):
    """Status of a startup check."""
    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"
    SKIP = "SKIP"


@dataclass
class CheckResult:
    """Result of a single startup check."""
    name: str
    status: CheckStatus
    message: str
    details: Optional[str] = None


class StartupChecker:
    """Performs startup checks against a bot configuration."""

    CRITICAL_CHECKS = ("Discord Bot Token", "Database")

    def __init__(self, config: BotConfig):
        self.config = config
        self.results: List[CheckResult] = []

    def _add_result(
        self,
        name: str,
        status: CheckStatus,
        message: str,
        details: Optional[str] = None
    ) -> CheckResult:
        """Add a check result to the results list."""
        result = CheckResult(name=name, status=status, message=message, details=details)
        self.results.append(result)
        return result

    def check_discord_token(self) -> CheckResult:
        """Check if Discord bot token is configured."""
        token = self.config.discord_bot_token
        if not token:
            return self._add_result(
                name="Discord Bot Token",
                status=CheckStatus.FAIL,
                message="DISCORD_BOT_TOKEN environment variable is not set",
                details="Set DISCORD_BOT_TOKEN in your .env file"
            )

        # Discord tokens are three dot-separated base64 segments
        if len(token) < 50 or token.count(".") != 2:
            return self._add_result(
                name="Discord Bot Token",
                status=CheckStatus.WARN,
                message="Discord token does not look like a bot token",
                details="Token may be invalid - verify in Discord Developer Portal"
            )

        return self._add_result(
            name="Discord Bot Token",
            status=CheckStatus.PASS,
            message="Discord bot token is configured"
        )

    def check_database(self) -> CheckResult:
        """Check that the database directory exists (or can be created) and is writable."""
        db_dir = self.config.database_path.parent
        try:
            db_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self._add_result(
                name="Database",
                status=CheckStatus.FAIL,
                message=f"Cannot create database directory {db_dir}: {e}",
                details="Set DATABASE_PATH to a writable location"
            )

        if not os.access(db_dir, os.W_OK):
            return self._add_result(
                name="Database",
                status=CheckStatus.FAIL,
                message=f"Database directory {db_dir} is not writable",
                details="Set DATABASE_PATH to a writable location"
            )

        return self._add_result(
            name="Database",
            status=CheckStatus.PASS,
            message=f"Using {self.config.database_path}"
        )

    def check_command_scope(self) -> CheckResult:
        """Report whether commands sync to one guild or globally."""
        if self.config.guild_id:
            return self._add_result(
                name="Command Scope",
                status=CheckStatus.PASS,
                message=f"Commands sync to guild {self.config.guild_id}"
            )
        return self._add_result(
            name="Command Scope",
            status=CheckStatus.WARN,
            message="DISCORD_GUILD_ID is not set, commands sync globally",
            details="Global commands can take up to an hour to appear"
        )

    def check_subject_settings(self) -> CheckResult:
        """Check the subject category and helper role settings."""
        if not self.config.category_name.strip():
            return self._add_result(
                name="Subject Settings",
                status=CheckStatus.FAIL,
                message="category_name must not be empty",
                details=f"Fix category_name in {CONFIG_YAML_PATH.name}"
            )
        if not self.config.helper_role_suffix:
            return self._add_result(
                name="Subject Settings",
                status=CheckStatus.FAIL,
                message="helper_role_suffix must not be empty",
                details=f"Fix helper_role_suffix in {CONFIG_YAML_PATH.name}"
            )
        if not CONFIG_YAML_PATH.exists():
            return self._add_result(
                name="Subject Settings",
                status=CheckStatus.SKIP,
                message=f"{CONFIG_YAML_PATH.name} not found, using defaults"
            )
        return self._add_result(
            name="Subject Settings",
            status=CheckStatus.PASS,
            message=(
                f"Category '{self.config.category_name}', suffix '{self.config.helper_role_suffix}', "
                f"selection timeout {self.config.selection_timeout_seconds}s"
            )
        )

    def run_all_checks(self) -> List[CheckResult]:
        """Run all startup checks and return results."""
        self.results = []

        logger.info("=" * 60)
        logger.info("STARTUP CHECKS")
        logger.info("=" * 60)

        checks = [
            ("Discord Bot Token", self.check_discord_token),
            ("Database", self.check_database),
            ("Command Scope", self.check_command_scope),
            ("Subject Settings", self.check_subject_settings),
        ]

        for name, check_func in checks:
            try:
                result = check_func()
            except Exception as e:
                result = self._add_result(
                    name=name,
                    status=CheckStatus.FAIL,
                    message=f"Check failed with error: {type(e).__name__}: {e}"
                )
            self._log_result(result)

        logger.info("-" * 60)
        passed = sum(1 for r in self.results if r.status == CheckStatus.PASS)
        warned = sum(1 for r in self.results if r.status == CheckStatus.WARN)
        failed = sum(1 for r in self.results if r.status == CheckStatus.FAIL)
        skipped = sum(1 for r in self.results if r.status == CheckStatus.SKIP)

        summary = f"Results: {passed} passed"
        if warned:
            summary += f", {warned} warnings"
        if failed:
            summary += f", {failed} failed"
        if skipped:
            summary += f", {skipped} skipped"

        logger.info(summary)
        logger.info("=" * 60)

        return self.results

    def _log_result(self, result: CheckResult) -> None:
        """Log a check result with appropriate formatting."""
        status_icons = {
            CheckStatus.PASS: "✓",
            CheckStatus.WARN: "⚠",
            CheckStatus.FAIL: "✗",
            CheckStatus.SKIP: "○",
        }

        log_msg = f"[{status_icons.get(result.status, '?')}] {result.name}: {result.message}"

        if result.status == CheckStatus.WARN:
            log = logger.warning
        elif result.status == CheckStatus.FAIL:
            log = logger.error
        else:
            log = logger.info
        log(log_msg)
        if result.details and result.status != CheckStatus.PASS:
            log(f"    └─ {result.details}")

    def has_critical_failures(self) -> bool:
        """Check if any critical checks failed (Discord token, database)."""
        return any(
            r.name in self.CRITICAL_CHECKS and r.status == CheckStatus.FAIL
            for r in self.results
        )

    def get_failures(self) -> List[CheckResult]:
        """Get all failed check results."""
        return [r for r in self.results if r.status == CheckStatus.FAIL]


def run_startup_checks(config: BotConfig, exit_on_critical: bool = True) -> StartupChecker:
    """Run all startup checks and optionally exit on critical failures.

    Args:
        config: The configuration to validate.
        exit_on_critical: If True, raise SystemExit on critical failures.

    Returns:
        The StartupChecker instance with results.

    Raises:
        SystemExit: If exit_on_critical is True and critical checks fail.
    """
    checker = StartupChecker(config)
    checker.run_all_checks()

    if exit_on_critical and checker.has_critical_failures():
        failure_names = [f.name for f in checker.get_failures()]
        raise SystemExit(
            f"Critical startup checks failed: {', '.join(failure_names)}. "
            "Please fix these issues before starting the bot."
        )

    return checker
