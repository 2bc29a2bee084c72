# otui_preview/client.py
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from .config import load_config

logger = logging.getLogger(__name__)


def read_otui_from_file(filepath: str) -> str:
    with open(filepath, "r", encoding="utf-8") as f:
        return f.read()


def push_otui(otui_text: str, daemon_url: Optional[str] = None, timeout: Optional[float] = None) -> Dict[str, Any]:
    """
    Sends OTUI text to a running preview daemon and returns its render result.

    Raises:
        requests.HTTPError: if the daemon answers with an error status
    """
    config = load_config()
    base_url = (daemon_url or config.daemon_url).rstrip("/")
    response = requests.post(
        f"{base_url}/render",
        json={"otui": otui_text},
        timeout=timeout if timeout is not None else config.request_timeout,
    )
    response.raise_for_status()
    result = response.json()
    logger.info("[PUSH] Daemon at %s answered with status '%s'", base_url, result.get("status"))
    return result


def push_otui_file(filepath: str, daemon_url: Optional[str] = None) -> Dict[str, Any]:
    path = Path(filepath)
    logger.info("[PUSH] Sending %s", path.resolve())
    return push_otui(read_otui_from_file(str(path)), daemon_url=daemon_url)
