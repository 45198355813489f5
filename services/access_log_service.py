"""
Plain-text access and performance logs.

One access line is written when a request arrives and one performance line
when its response is sent. Lines are queued and appended by a background
task, so slow or failing log I/O never delays a response.
"""

import asyncio
from pathlib import Path
from typing import Optional, Union
import structlog

from exceptions import LogNotFoundError, StorageError

logger = structlog.get_logger(__name__)

UNKNOWN = "Unknown"


def format_access_line(
    method: str,
    url: str,
    timestamp: str,
    client: Optional[str],
    user_agent: Optional[str]
) -> str:
    """
    Access log line.

    Example:
        🌐 | GET    | /get?id=abc123                 | 2026-10-19T08:15:30.123Z | 127.0.0.1       | curl/8.5 |
    """
    return (
        f"🌐 | {method.ljust(6)} | {url.ljust(30)} | {timestamp} | "
        f"{(client or UNKNOWN).ljust(15)} | {user_agent or UNKNOWN} |\n"
    )


def format_performance_line(method: str, url: str, status_code: int, duration_ms: int) -> str:
    """
    Performance log line, marked ❌ for 4xx/5xx responses.

    Example:
        ✅ | POST   | /setData                       | 200 | 3ms |
    """
    marker = "❌" if status_code >= 400 else "✅"
    return f"{marker} | {method.ljust(6)} | {url.ljust(30)} | {status_code} | {duration_ms}ms |\n"


class AccessLogService:
    """
    Asynchronous sink for request logs.

    start() and stop() are driven by the application lifespan. Before
    start() (or after stop()) lines are appended synchronously.
    """

    def __init__(
        self,
        access_path: Union[str, Path],
        performance_path: Union[str, Path],
        queue_size: int = 1000
    ):
        self.access_path = Path(access_path)
        self.performance_path = Path(performance_path)
        self.queue_size = queue_size
        self._queue: Optional[asyncio.Queue] = None
        self._worker: Optional[asyncio.Task] = None

    # ===================
    # LIFECYCLE
    # ===================

    async def start(self) -> None:
        """Start the background writer on the running loop."""
        if self._worker is not None:
            return
        self._queue = asyncio.Queue(maxsize=self.queue_size)
        self._worker = asyncio.create_task(self._run())
        logger.debug("access_log_started", queue_size=self.queue_size)

    async def stop(self) -> None:
        """Write every pending line, then stop the background writer."""
        if self._worker is None:
            return
        await self._queue.join()
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        self._queue = None
        logger.debug("access_log_stopped")

    async def _run(self) -> None:
        while True:
            path, line = await self._queue.get()
            try:
                await asyncio.to_thread(self._append, path, line)
            except OSError as e:
                logger.warning("access_log_write_failed", path=str(path), error=str(e))
            finally:
                self._queue.task_done()

    # ===================
    # RECORDING
    # ===================

    def record_request(
        self,
        method: str,
        url: str,
        timestamp: str,
        client: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> None:
        """Queue an access line for an incoming request."""
        self._enqueue(
            self.access_path,
            format_access_line(method, url, timestamp, client, user_agent)
        )

    def record_response(self, method: str, url: str, status_code: int, duration_ms: int) -> None:
        """Queue a performance line for a finished response."""
        self._enqueue(
            self.performance_path,
            format_performance_line(method, url, status_code, duration_ms)
        )

    def _enqueue(self, path: Path, line: str) -> None:
        if self._queue is None:
            try:
                self._append(path, line)
            except OSError as e:
                logger.warning("access_log_write_failed", path=str(path), error=str(e))
            return

        try:
            self._queue.put_nowait((path, line))
        except asyncio.QueueFull:
            logger.warning("access_log_line_dropped", path=str(path))

    @staticmethod
    def _append(path: Path, line: str) -> None:
        with path.open("a", encoding="utf-8") as f:
            f.write(line)

    # ===================
    # READING
    # ===================

    def read_access_log(self) -> str:
        """
        Return the full access log.

        Raises:
            LogNotFoundError: Nothing has been logged yet
            StorageError: File exists but cannot be read
        """
        try:
            return self.access_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise LogNotFoundError() from e
        except OSError as e:
            logger.error("access_log_read_failed", path=str(self.access_path), error=str(e))
            raise StorageError("read", str(e), {"path": str(self.access_path)}) from e
