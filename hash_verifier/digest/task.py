"""One-shot isolated execution of a single digest computation."""

import asyncio
import logging
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from concurrent.futures.process import BrokenProcessPool
from typing import Optional

from ..errors import DigestComputationError, HashVerifierError
from ..models.common import HashAlgorithm
from .engine import digest

logger = logging.getLogger(__name__)


class HashTask:
    """Runs exactly one digest off the event loop, then tears itself down.

    Each task owns a private single-worker executor. ``isolation`` selects a
    worker process (the default, keeps CPU-bound MD5 off the GIL) or a
    worker thread.
    """

    def __init__(self, buffer: bytes, algorithm: HashAlgorithm, isolation: str = "process"):
        if isolation not in ("process", "thread"):
            raise ValueError(f"Unknown isolation mode: {isolation}")
        self._buffer: Optional[bytes] = buffer
        self.algorithm = HashAlgorithm.parse(algorithm)
        self.isolation = isolation
        self._started = False

    def _make_executor(self) -> Executor:
        if self.isolation == "thread":
            return ThreadPoolExecutor(max_workers=1, thread_name_prefix="hash-task")
        return ProcessPoolExecutor(max_workers=1)

    async def run(self) -> str:
        if self._started:
            raise RuntimeError("HashTask has already been run")
        self._started = True

        buffer, self._buffer = self._buffer, None
        loop = asyncio.get_running_loop()
        executor = self._make_executor()
        try:
            return await loop.run_in_executor(executor, digest, buffer, self.algorithm)
        except HashVerifierError:
            raise
        except BrokenProcessPool as e:
            logger.error(f"Hash worker died while computing {self.algorithm.value}")
            raise DigestComputationError("Hash worker terminated unexpectedly", e)
        except Exception as e:
            raise DigestComputationError(
                str(e) or "An unknown error occurred in the hash worker.", e,
            )
        finally:
            executor.shutdown(wait=False)
