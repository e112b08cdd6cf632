from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Protocol

import mysql.connector

from ..core.exceptions import StorageError


class ConnectionFactory(Protocol):
    def connect(self): ...


@contextmanager
def kv_cursor(conn_factory: ConnectionFactory, action: str, *, dictionary: bool = True) -> Iterator:
    """Cursor inside one short transaction; driver errors surface as StorageError."""
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StorageError(f"Cannot {action}: {e}") from e

    cur = None
    try:
        cur = conn.cursor(dictionary=dictionary)
        yield cur
        conn.commit()
    except mysql.connector.Error as e:
        conn.rollback()
        raise StorageError(f"Cannot {action}: {e}") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        if cur is not None:
            cur.close()
        conn.close()
