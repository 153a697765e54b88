"""
================================================================================
Healing Log / Report
================================================================================

Append-only, time-ordered record of every self-healing decision:
    - HEALED: an element was found through a fallback, a heuristic candidate
      or an escalated action tactic
    - FAILED: every candidate or every tactic was exhausted

The log belongs to one engine instance. Entries are never mutated or removed
individually; `clear()` drops the whole log between test phases.

Report export is best-effort: a write failure is logged and swallowed so it
can never fail a test run.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from loguru import logger

from autotest_tools.report_tools.allure_utils import attach_json

from .healing_config import SelfHealingConfig


REPORT_FILE_PREFIX = "self-healing-report"


class HealingStatus(str, Enum):
    """Outcome recorded by a healing log entry."""

    HEALED = "HEALED"
    FAILED = "FAILED"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso(moment: datetime) -> str:
    # Millisecond precision with a Z suffix, e.g. 2024-05-01T10:00:00.123Z
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class HealingLogEntry:
    """
    One healing decision.

    Attributes:
        status: HEALED or FAILED
        description: Human-readable element description
        original_selector: The strategy's primary selector
        resolved_selector: What actually worked (selector or tactic name),
            or "FAILED"
        timestamp: When the decision was made (UTC)
    """

    status: HealingStatus
    description: str
    original_selector: str
    resolved_selector: str
    timestamp: datetime = field(default_factory=_utc_now)

    def __str__(self) -> str:
        return (
            f"{_iso(self.timestamp)} - {self.status.value} - {self.description}: "
            f"{self.original_selector} → {self.resolved_selector}"
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "timestamp": _iso(self.timestamp),
            "status": self.status.value,
            "description": self.description,
            "originalSelector": self.original_selector,
            "resolvedSelector": self.resolved_selector,
        }


class HealingLog:
    """
    Append-only healing log owned by one engine instance.

    Usage:
        >>> log = HealingLog()
        >>> log.record(HealingStatus.HEALED, "username field", "#bad-id", "input[type=text]")
        >>> log.summary()
        {'healed': 1, 'failed': 0}
    """

    def __init__(self) -> None:
        self._entries: List[HealingLogEntry] = []

    def append(self, entry: HealingLogEntry) -> HealingLogEntry:
        """Append one entry, preserving insertion order."""
        self._entries.append(entry)
        return entry

    def record(
        self,
        status: HealingStatus,
        description: str,
        original_selector: str,
        resolved_selector: str,
    ) -> HealingLogEntry:
        """Create and append an entry stamped with the current time."""
        return self.append(
            HealingLogEntry(
                status=status,
                description=description,
                original_selector=original_selector,
                resolved_selector=resolved_selector,
            )
        )

    def entries(self) -> Tuple[HealingLogEntry, ...]:
        """Read-only snapshot of all entries in insertion order."""
        return tuple(self._entries)

    def lines(self) -> Tuple[str, ...]:
        """Snapshot of all entries rendered as report strings."""
        return tuple(str(entry) for entry in self._entries)

    def summary(self) -> Dict[str, int]:
        healed = sum(1 for e in self._entries if e.status is HealingStatus.HEALED)
        return {"healed": healed, "failed": len(self._entries) - healed}

    def clear(self) -> None:
        self._entries = []

    def build_report(self, config: SelfHealingConfig) -> Dict[str, Any]:
        """Build the structured healing report document."""
        return {
            "timestamp": _iso(_utc_now()),
            "totalHealingAttempts": len(self._entries),
            "healingLog": list(self.lines()),
            "summary": self.summary(),
            "config": config.to_dict(),
        }

    def export(
        self,
        results_dir: Union[str, Path],
        config: SelfHealingConfig,
    ) -> Optional[Path]:
        """
        Write the healing report as JSON and attach it to Allure.

        Args:
            results_dir: Directory receiving the report file
            config: Active configuration recorded in the report

        Returns:
            Path of the written report, or None if writing failed
        """
        report = self.build_report(config)
        stamp = int(_utc_now().timestamp() * 1000)
        path = Path(results_dir) / f"{REPORT_FILE_PREFIX}-{stamp}.json"

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                json.dumps(report, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Failed to write self-healing report to {path}: {e}")
            return None

        try:
            attach_json(report, name="Self-Healing Report")
        except Exception as e:
            logger.warning(f"Failed to attach self-healing report to Allure: {e}")

        logger.info(
            f"Self-healing report written: {path} "
            f"({report['summary']['healed']} healed, {report['summary']['failed']} failed)"
        )
        return path

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HealingLogEntry]:
        return iter(self.entries())


__all__ = [
    "HealingStatus",
    "HealingLogEntry",
    "HealingLog",
    "REPORT_FILE_PREFIX",
]
