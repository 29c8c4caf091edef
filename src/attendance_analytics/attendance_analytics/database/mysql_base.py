from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List

import mysql.connector

from ..core.exceptions import StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Short-lived connection + cursor; commit on success, rollback on error.

    Driver errors surface as StoreError carrying the driver message.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("database connection failed: %s", e)
        raise StoreError(str(e)) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("database operation failed: %s", e)
        raise StoreError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
