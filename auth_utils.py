from functools import wraps
from flask import session, redirect, url_for

def can_mutate():
    return 'user_id' in session

def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not can_mutate():
            return redirect(url_for('auth.login'))
        return fn(*args, **kwargs)
    return wrapper
