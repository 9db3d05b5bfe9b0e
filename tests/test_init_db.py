"""
Test suite for the schema creation script.
"""

from unittest.mock import MagicMock, patch

import init_db
from models import db


class TestInitDb:
    def test_engine_url_uses_mysql_connector(self):
        url = init_db.engine_url()
        assert url.drivername == 'mysql+mysqlconnector'

    def test_creates_every_table(self):
        engine = MagicMock()
        with patch('init_db.create_engine', return_value=engine), \
                patch.object(db.metadata, 'create_all') as create_all:
            init_db.init_db()

        create_all.assert_called_once_with(engine)
        engine.begin.assert_not_called()
        engine.dispose.assert_called_once()

    def test_optional_admin_account(self):
        engine = MagicMock()
        conn = engine.begin.return_value.__enter__.return_value
        with patch('init_db.create_engine', return_value=engine), \
                patch.object(db.metadata, 'create_all'), \
                patch('init_db.getpass.getpass', return_value='s3cret'):
            init_db.init_db('Mina@Example.com ')

        statement = conn.execute.call_args.args[0]
        params = statement.compile().params
        assert params['email'] == 'mina@example.com'
        assert params['name'] == 'Mina'
        assert params['password_hash'] != 's3cret'

    def test_schema_covers_all_tables(self):
        expected = {
            'users', 'finance_fixed_costs', 'finance_expenses', 'finance_savings',
            'finance_monthly_records', 'finance_debt', 'finance_settings',
            'sidejob_teaching', 'sidejob_xiaohongshu', 'learning_projects',
            'learning_records', 'work_achievements', 'xiaohongshu_notes', 'opic_daily',
        }
        assert expected <= set(db.metadata.tables)
