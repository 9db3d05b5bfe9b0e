"""
Generic table CRUD over the MySQL connection pool.

Every page reads and writes through this one client. Table and column names
are checked against the schema declared in models.py before they are placed
into SQL; values are always bound as parameters.
"""

import logging
import mysql.connector
from models import db

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """Raised when the backend rejects or cannot complete a call."""


class UnknownTableError(RecordStoreError):
    pass


class UnknownColumnError(RecordStoreError):
    pass


def table_columns(table):
    if table not in db.metadata.tables:
        raise UnknownTableError(f"Unknown table: {table}")
    return set(db.metadata.tables[table].columns.keys())


def _check_columns(table, names):
    columns = table_columns(table)
    for name in names:
        if name not in columns:
            raise UnknownColumnError(f"Unknown column {name!r} on {table}")


class RecordStore:
    def __init__(self, pool):
        self.pool = pool

    def _run(self, sql, params=(), fetch=False, dictionary=True):
        conn = None
        try:
            conn = self.pool.get_connection()
            with conn.cursor(dictionary=dictionary) as cur:
                cur.execute(sql, params)
                if fetch:
                    return cur.fetchall()
                conn.commit()
                return cur.lastrowid
        except mysql.connector.Error as e:
            logger.error("Query failed: %s (%s)", sql, e)
            raise RecordStoreError(str(e)) from e
        finally:
            if conn is not None:
                conn.close()

    def list(self, table, filters=None, order_by=None, descending=False, limit=None):
        filters = filters or {}
        _check_columns(table, list(filters) + ([order_by] if order_by else []))

        sql = f"SELECT * FROM {table}"
        params = []
        if filters:
            sql += " WHERE " + " AND ".join(f"{col}=%s" for col in filters)
            params.extend(filters.values())
        if order_by:
            sql += f" ORDER BY {order_by} {'DESC' if descending else 'ASC'}"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))
        return self._run(sql, tuple(params), fetch=True) or []

    def get(self, table, id):
        rows = self.list(table, filters={'id': id}, limit=1)
        return rows[0] if rows else None

    def first(self, table):
        rows = self.list(table, order_by='id', limit=1)
        return rows[0] if rows else None

    def insert(self, table, row):
        _check_columns(table, row)
        columns = ", ".join(row)
        placeholders = ", ".join(["%s"] * len(row))
        new_id = self._run(
            f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
            tuple(row.values())
        )
        return dict(row, id=new_id)

    def update(self, table, id, patch):
        if not patch:
            return
        _check_columns(table, patch)
        assignments = ", ".join(f"{col}=%s" for col in patch)
        self._run(
            f"UPDATE {table} SET {assignments} WHERE id=%s",
            tuple(patch.values()) + (id,)
        )

    def delete(self, table, id):
        self.delete_where(table, 'id', id)

    def delete_where(self, table, column, value):
        _check_columns(table, [column])
        self._run(f"DELETE FROM {table} WHERE {column}=%s", (value,))

    def count(self, table):
        table_columns(table)
        rows = self._run(f"SELECT COUNT(*) AS cnt FROM {table}", fetch=True)
        return int(rows[0]['cnt']) if rows else 0
