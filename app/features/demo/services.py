"""
➡️ But : Endpoints annexes (attente non bloquante, lecture de fichier bloquante, écho de config).

wait() : attend sans bloquer la boucle (asyncio.sleep), sans toucher au pool DB.

read_blocking_file() : la lecture disque est bloquante → exécutée dans un thread worker
(run_in_threadpool), la route attend le résultat.

Une OSError devient FileReadError ; tout autre échec du worker devient TaskFailureError.
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable, Optional

from starlette.concurrency import run_in_threadpool

from app.core.config import Settings
from app.core.errors import FileReadError, TaskFailureError

logger = logging.getLogger(__name__)

GREETING = "Hello, world!"


async def wait(seconds: int) -> str:
    await asyncio.sleep(seconds)
    return f"Waited for {seconds} seconds"


def read_file_bytes(path: str) -> bytes:
    return Path(path).read_bytes()


async def read_blocking_file(path: str, reader: Optional[Callable[[str], bytes]] = None) -> bytes:
    reader = reader or read_file_bytes
    try:
        return await run_in_threadpool(reader, path)
    except OSError as e:
        logger.error("Blocking read of %s failed: %s", path, e)
        raise FileReadError(f"File {path} could not be read: {e.strerror or e}") from e
    except Exception as e:
        logger.exception("Blocking read task for %s did not complete", path)
        raise TaskFailureError(f"Blocking task reading {path} did not complete: {e}") from e


def config_greeting(cfg: Settings) -> str:
    return f"Hello, {cfg.NAME}! You are {cfg.AGE} years old."
