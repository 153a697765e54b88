"""
================================================================================
Allure Report Utilities
================================================================================

This module provides helpers for attaching self-healing diagnostics to
Allure test reports.

Features:
- JSON / text attachments (healing reports, healing logs)
- File attachments (failure screenshots)

================================================================================
"""

import json
from pathlib import Path
from typing import Any, Iterable, Union

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str, ensure_ascii=False)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_lines(lines: Iterable[str], name: str = "Log"):
    """
    Attach a sequence of log lines as one text attachment.

    Nothing is attached for an empty sequence.
    """
    lines = list(lines)
    if not lines:
        return
    attach_text("\n".join(lines), name=name)


def attach_png(path: Union[str, Path], name: str = "Screenshot") -> bool:
    """
    Attach a PNG file from disk to Allure report.

    Args:
        path: Path to the PNG file
        name: Attachment name

    Returns:
        True if the file was attached, False if it could not be read
    """
    try:
        allure.attach.file(
            str(path),
            name=name,
            attachment_type=allure.attachment_type.PNG
        )
        return True
    except OSError as e:
        logger.warning(f"Could not attach screenshot {path}: {e}")
        return False


__all__ = [
    "attach_json",
    "attach_text",
    "attach_lines",
    "attach_png",
]
