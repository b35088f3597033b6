# utils.py
import asyncio
import json
import re
import time
import uuid
from typing import Any, Callable, Dict

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def flatten_metadata(metadata: Dict[str, Any]) -> Dict[str, Any]:
    """
    Chroma only accepts str/int/float/bool metadata values; anything else
    (nested dicts, lists, None) is stored as its JSON encoding.
    """
    flat = {}
    for key, value in (metadata or {}).items():
        if isinstance(value, (str, int, float, bool)):
            flat[str(key)] = value
        else:
            flat[str(key)] = json.dumps(value, ensure_ascii=False, default=str)
    return flat


def timestamped_filename(filename: str) -> str:
    name = _UNSAFE_CHARS.sub("_", (filename or "").rsplit("/", 1)[-1].rsplit("\\", 1)[-1]).strip("._")
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{name or 'upload'}"


async def run_with_deadline(func: Callable, *args, timeout: float, **kwargs):
    """
    Run a blocking call in a worker thread and give up waiting after `timeout`
    seconds (raises asyncio.TimeoutError). The thread itself is not killed.
    """
    return await asyncio.wait_for(asyncio.to_thread(func, *args, **kwargs), timeout=timeout)
