"""
Output files for a scrape run: the JSON record, the full-page screenshot and,
when a run fails, the error log. Every file is overwritten on each run.
"""
import json
import logging
import os
import tempfile
import traceback
from datetime import datetime, timezone
from pathlib import Path

from .tire_data import iso_utc

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_json(data: dict, path: Path) -> Path:
    """Write data as indented UTF-8 JSON, replacing path in a single rename."""
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        # mkstemp creates 0600; give the file the mode a plain open() would
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.info("Data saved to %s", path)
    return path


def capture_screenshot(page, path: Path) -> Path:
    path = Path(path)
    page.screenshot(path=str(path), full_page=True)
    logger.info("Full page screenshot saved as %s", path)
    return path


def save_outputs(page, data: dict, json_path: Path, screenshot_path: Path) -> tuple[Path, Path]:
    """
    Write the JSON record and the screenshot.

    Both are attempted even if the first one fails; the first error is
    re-raised once both have been tried.
    """
    errors = []
    try:
        write_json(data, json_path)
    except Exception as exc:
        logger.error("Could not write %s: %s", json_path, exc)
        errors.append(exc)
    try:
        capture_screenshot(page, screenshot_path)
    except Exception as exc:
        logger.error("Could not capture %s: %s", screenshot_path, exc)
        errors.append(exc)
    if errors:
        raise errors[0]
    return Path(json_path), Path(screenshot_path)


def format_error_log(exc: BaseException, when: datetime = None) -> str:
    stamp = iso_utc(when or datetime.now(timezone.utc))
    detail = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip()
    return f"Error at {stamp}\n{detail or repr(exc)}"


def write_error_log(exc: BaseException, path: Path, when: datetime = None) -> Path:
    path = Path(path)
    path.write_text(format_error_log(exc, when), encoding="utf-8")
    logger.info("Error details written to %s", path)
    return path
