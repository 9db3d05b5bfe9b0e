"""
Security-focused tests: CSRF protection, session cookie flags and
form input handling.
"""

from tests.conftest import login_session


class TestCSRFProtection:
    """Test CSRF protection on forms."""

    def test_login_without_token_rejected(self, client):
        response = client.post('/auth/login', data={'email': 'a@b.c', 'password': 'x'})
        assert response.status_code == 400

    def test_mutation_without_token_rejected(self, client, app):
        login_session(client)
        conn = app.db_pool.get_connection.return_value

        response = client.post('/finance/expenses/save', data={'expense_date': '2026-10-01'})
        assert response.status_code == 400
        conn.cursor.assert_not_called()

    def test_logout_without_token_rejected(self, client):
        login_session(client)
        response = client.post('/auth/logout')
        assert response.status_code == 400

    def test_forms_carry_token(self, client):
        response = client.get('/auth/login')
        assert b'name="csrf_token"' in response.data


class TestSessionCookie:
    def test_cookie_flags_configured(self, app):
        assert app.config['SESSION_COOKIE_HTTPONLY'] is True
        assert app.config['SESSION_COOKIE_SAMESITE'] == 'Lax'


class TestInputHandling:
    """Form values are parsed defensively."""

    def test_non_numeric_amount_saved_as_zero(self, logged_in_client, mock_db):
        conn, cursor = mock_db
        logged_in_client.post('/finance/expenses/save', data={
            'expense_date': '2026-10-01', 'category': 'Other', 'amount': 'abc',
        })
        sql, params = cursor.execute.call_args.args
        assert params[2] == 0

    def test_markup_is_escaped(self, logged_in_client, mock_db):
        conn, cursor = mock_db
        cursor.fetchall.return_value = [
            {'id': 1, 'title': '<script>alert(1)</script>', 'category': 'Other', 'post_date': None,
             'impressions': 0, 'likes': 0, 'saves': 0, 'comments': 0, 'followers_gained': 0, 'notes': None},
        ]
        response = logged_in_client.get('/xiaohongshu/')
        assert b'<script>alert(1)</script>' not in response.data
        assert b'&lt;script&gt;' in response.data
