"""
Helpers shared by the page blueprints: fetching rows, running mutations,
parsing form fields and the delete confirmation step.
"""

import json
import logging
from decimal import Decimal, InvalidOperation
from flask import current_app, flash, redirect, render_template, request, abort
from record_store import RecordStoreError
from praise import get_praise

logger = logging.getLogger(__name__)

FAILED_MESSAGE = "Operation failed"


def store():
    return current_app.record_store


def load_rows(table, **kwargs):
    """Fetch rows, or an empty list if the backend fails."""
    try:
        return store().list(table, **kwargs)
    except RecordStoreError:
        logger.exception("Failed to load %s", table)
        return []


def load_first(table):
    try:
        return store().first(table)
    except RecordStoreError:
        logger.exception("Failed to load %s", table)
        return None


def load_count(table):
    try:
        return store().count(table)
    except RecordStoreError:
        logger.exception("Failed to count %s", table)
        return 0


def mutate(action, success, praise=None):
    """Run ``action``; flash ``success`` on success or a generic failure."""
    try:
        action()
    except RecordStoreError:
        logger.exception("Mutation failed")
        flash(FAILED_MESSAGE, "error")
        return False
    message = f"{success} - {get_praise(praise)}" if praise else success
    flash(message, "success")
    return True


def lookup(table, row_id):
    """The row, None when it does not exist, or False when the backend failed."""
    try:
        return store().get(table, row_id)
    except RecordStoreError:
        logger.exception("Failed to look up %s %s", table, row_id)
        flash(FAILED_MESSAGE, "error")
        return False


def save_row(table, row_id, data, created, updated, praise=None):
    """Insert when ``row_id`` is empty, otherwise update that row."""
    if row_id:
        existing = lookup(table, row_id)
        if existing is False:
            return False
        if existing is None:
            abort(404)
        return mutate(lambda: store().update(table, row_id, data), updated, praise)
    return mutate(lambda: store().insert(table, data), created, praise)


def confirm_delete(table, row_id, label, action_url, cancel_url, delete=None):
    """
    Delete a row once the request carries ``confirmed=yes``.

    Without it, the confirmation page is rendered and nothing is deleted.
    """
    row = lookup(table, row_id)
    if row is False:
        return redirect(cancel_url)
    if row is None:
        abort(404)
    if request.form.get('confirmed') != 'yes':
        return render_template('confirm_delete.html', label=label, action_url=action_url, cancel_url=cancel_url)
    mutate(delete or (lambda: store().delete(table, row_id)), "Deleted")
    return redirect(cancel_url)


def parse_int(form, key, default=0):
    try:
        return int(Decimal(form.get(key, '').strip()))
    except (InvalidOperation, ValueError, OverflowError, AttributeError):
        return default


def parse_decimal(form, key, default=Decimal('0')):
    try:
        value = Decimal(form.get(key, '').strip())
    except (InvalidOperation, AttributeError):
        return default
    return value if value.is_finite() else default


def parse_text(form, key):
    value = (form.get(key) or '').strip()
    return value or None


def parse_skills(value):
    """Stored skills are a JSON array; anything else reads as no skills."""
    if not value:
        return []
    if isinstance(value, list):
        return value
    try:
        skills = json.loads(value)
    except ValueError:
        return []
    return [s for s in skills if isinstance(s, str)] if isinstance(skills, list) else []
