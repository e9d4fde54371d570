"""JSON-file-backed data store and Unit of Work.

All tables (members, products, cart items, orders) live in one JSON
document.  A unit of work takes the store lock (a lock file next to the
data file, so separate processes are serialized too), loads the document,
lets the repositories stage changes on the in-memory copy, and on
``commit()`` writes the whole document to a temporary file that then
replaces the data file.  Readers therefore see either the old document
or the new one, never a mix.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from types import TracebackType

import structlog
from filelock import FileLock

from cart.domain.repository.unit_of_work import UnitOfWork
from cart.infrastructure.persistence.json_cart_item_repository import (
    JsonCartItemRepository,
)
from cart.infrastructure.persistence.json_member_repository import (
    JsonMemberRepository,
)
from cart.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from cart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = structlog.get_logger(__name__)

TABLES = ("members", "products", "cart_items", "orders")


class JsonDataStore:
    """Owns the data file and the lock that serializes units of work."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self.lock = FileLock(f"{file_path}.lock", thread_local=True)
        with self.lock:
            self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> dict[str, list[dict]]:
        document = json.loads(self._file_path.read_text(encoding="utf-8"))
        for table in TABLES:
            document.setdefault(table, [])
        return document

    def write(self, document: dict[str, list[dict]]) -> None:
        payload = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self.write({table: [] for table in TABLES})


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonDataStore) -> None:
        self._store = store
        self._document: dict[str, list[dict]] = {}
        self._committed = False

    def __enter__(self) -> JsonUnitOfWork:
        self._store.lock.acquire()
        try:
            self._document = self._store.load()
        except BaseException:
            self._store.lock.release()
            raise
        self._committed = False

        self.products = JsonProductRepository(self._document)
        self.members = JsonMemberRepository(self._document)
        self.cart_items = JsonCartItemRepository(self._document, self.products)
        self.orders = JsonOrderRepository(self._document)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.rollback()
        finally:
            self._store.lock.release()

    def commit(self) -> None:
        self._store.write(self._document)
        self._committed = True

    def rollback(self) -> None:
        if self._committed:
            return
        # Repositories share this dict, so reloading in place resets them too.
        fresh = self._store.load()
        self._document.clear()
        self._document.update(fresh)
        logger.debug("Unit of work rolled back", file=str(self._store.file_path))
