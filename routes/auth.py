import logging
from flask import Blueprint, render_template, request, redirect, url_for, session, flash
from werkzeug.security import check_password_hash
from page_utils import store
from record_store import RecordStoreError

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if request.method == 'POST':
        email = request.form.get('email', '').strip().lower()
        password = request.form.get('password', '')

        try:
            users = store().list('users', filters={'email': email}, limit=1)
        except RecordStoreError:
            logger.exception("Login lookup failed")
            flash("Operation failed", "error")
            return redirect(url_for('auth.login'))
        user = users[0] if users else None

        if not user or not check_password_hash(user['password_hash'], password):
            flash("Invalid credentials.", "error")
            return redirect(url_for('auth.login'))

        session.clear()
        session['user_id'] = user['id']
        session['user_name'] = user['name']
        return redirect(url_for('dashboard.index'))

    return render_template('auth/login.html')


@auth_bp.route('/logout', methods=['POST'])
def logout():
    session.clear()
    return redirect(url_for('dashboard.index'))
