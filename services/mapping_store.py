"""
File-backed store for mappings.

The whole store is one JSON document, read fully on load and rewritten
wholesale on save. Saves go through a temporary file in the same directory
followed by os.replace, so a reader sees either the old or the new document.
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from models.mapping import StoreDocument
from exceptions import StorageError

logger = structlog.get_logger(__name__)


class MappingStore:
    """
    Read-all/write-all access to the store document.

    Holds an in-process re-entrant lock; callers doing load+modify+save
    take it for the whole sequence. Other processes are not coordinated.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.lock = threading.RLock()

    # ===================
    # READ OPERATIONS
    # ===================

    def load(self) -> StoreDocument:
        """
        Load the current document.

        A missing file is initialized to an empty store and persisted
        before returning.

        Returns:
            StoreDocument with mappings in insertion order

        Raises:
            StorageError: On I/O failure or a malformed document
        """
        with self.lock:
            try:
                raw = self.path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.info("store_initialized", path=str(self.path))
                document = StoreDocument()
                self.save(document)
                return document
            except OSError as e:
                logger.error("store_read_failed", path=str(self.path), error=str(e))
                raise StorageError("read", str(e), {"path": str(self.path)}) from e

        try:
            return StoreDocument.model_validate(json.loads(raw))
        except (json.JSONDecodeError, PydanticValidationError) as e:
            logger.error(
                "store_malformed",
                path=str(self.path),
                error=str(e),
                error_type=type(e).__name__
            )
            raise StorageError("decode", "store document is malformed", {"path": str(self.path)}) from e

    def count(self) -> int:
        """Number of stored mappings."""
        return len(self.load().mappings)

    # ===================
    # WRITE OPERATIONS
    # ===================

    def save(self, document: StoreDocument) -> None:
        """
        Replace the stored document.

        Args:
            document: Full document to persist

        Raises:
            StorageError: If the temporary file cannot be written or moved
        """
        payload = json.dumps(
            document.model_dump(mode="json", by_alias=True),
            indent=2,
            ensure_ascii=False
        )

        with self.lock:
            directory = self.path.parent
            tmp_name = None
            try:
                directory.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{self.path.name}.",
                    suffix=".tmp",
                    dir=directory
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
                tmp_name = None
            except OSError as e:
                logger.error("store_write_failed", path=str(self.path), error=str(e))
                raise StorageError("write", str(e), {"path": str(self.path)}) from e
            finally:
                if tmp_name is not None:
                    try:
                        os.unlink(tmp_name)
                    except OSError as e:
                        logger.warning("store_tmp_cleanup_failed", path=tmp_name, error=str(e))

        logger.debug("store_saved", path=str(self.path), count=len(document.mappings))
