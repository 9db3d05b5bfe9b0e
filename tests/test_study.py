"""
Test suite for the OPIC study log.
"""

import mysql.connector
from datetime import date, timedelta

from tests.conftest import executed_sql


def flashed(client):
    with client.session_transaction() as sess:
        return sess.get('_flashes', [])


class TestStudyPage:
    def test_summary_and_streak(self, client_no_csrf, mock_db):
        conn, cursor = mock_db
        today = date.today()
        cursor.fetchall.return_value = [
            {'id': 3, 'date': today, 'study_content': 'Role play', 'duration_minutes': 45, 'notes': None},
            {'id': 2, 'date': today - timedelta(days=1), 'study_content': 'Vocabulary', 'duration_minutes': 30, 'notes': None},
            {'id': 1, 'date': today - timedelta(days=5), 'study_content': 'Listening', 'duration_minutes': 15, 'notes': None},
        ]

        response = client_no_csrf.get('/opic/')
        html = response.data.decode()
        assert response.status_code == 200
        assert 'id="study-days">3<' in html
        assert 'id="study-hours">1.5 hours' in html
        assert 'id="study-streak">2 days' in html

    def test_empty_log(self, client_no_csrf, mock_db):
        conn, cursor = mock_db
        cursor.fetchall.return_value = []
        response = client_no_csrf.get('/opic/')
        assert b'No study logs yet.' in response.data
        assert b'class="praise"' not in response.data


class TestStudyMutations:
    def test_add_log(self, logged_in_client, mock_db):
        conn, cursor = mock_db
        logged_in_client.post('/opic/save', data={
            'date': '2026-10-19', 'study_content': 'Mock test', 'duration_minutes': '40',
        })
        sql, params = cursor.execute.call_args.args
        assert sql == 'INSERT INTO opic_daily (date, study_content, duration_minutes, notes) VALUES (%s, %s, %s, %s)'
        assert params == ('2026-10-19', 'Mock test', 40, None)

    def test_pool_exhausted_flashes_error(self, logged_in_client, app_no_csrf):
        app_no_csrf.db_pool.get_connection.side_effect = mysql.connector.errors.PoolError("exhausted")

        response = logged_in_client.post('/opic/save', data={
            'date': '2026-10-19', 'study_content': 'Mock test',
        })
        assert response.status_code == 302
        assert flashed(logged_in_client) == [('error', 'Operation failed')]

    def test_content_required(self, logged_in_client, mock_db):
        conn, cursor = mock_db
        logged_in_client.post('/opic/save', data={'date': '2026-10-19'})
        cursor.execute.assert_not_called()
        assert flashed(logged_in_client) == [('error', 'Date and study content are required')]

    def test_delete_needs_confirmation(self, logged_in_client, mock_db):
        conn, cursor = mock_db
        cursor.fetchall.return_value = [{'id': 1}]
        response = logged_in_client.post('/opic/1/delete')
        assert response.status_code == 200
        assert b'Delete this study log?' in response.data

        logged_in_client.post('/opic/1/delete', data={'confirmed': 'yes'})
        assert executed_sql(cursor)[-1] == 'DELETE FROM opic_daily WHERE id=%s'
