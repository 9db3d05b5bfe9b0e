import os
from decimal import Decimal
import mysql.connector
from mysql.connector import pooling
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY')
    MYSQL_HOST = os.getenv('MYSQL_HOST')
    MYSQL_USER = os.getenv('MYSQL_USER')
    MYSQL_PASSWORD = os.getenv('MYSQL_PASSWORD')
    MYSQL_DATABASE = os.getenv('MYSQL_DATABASE', 'life_dashboard')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    KEYWORDS_FILE = os.getenv('KEYWORDS_FILE', os.path.join(os.path.dirname(os.path.abspath(__file__)), 'instance', 'work_keywords.json'))

    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Used until the singleton settings rows exist
    DEFAULT_DEBT_PRINCIPAL = Decimal('3250')
    DEFAULT_EXCHANGE_RATE = Decimal('190')
    DEFAULT_MONTHLY_SALARY = 2820000
    DEFAULT_TARGET_SAVINGS = 1000000

    @staticmethod
    def init_db(app):
        from record_store import RecordStore

        app.db_pool = mysql.connector.pooling.MySQLConnectionPool(
            pool_name="dashboard_pool",
            pool_size=5,
            host=Config.MYSQL_HOST,
            user=Config.MYSQL_USER,
            password=Config.MYSQL_PASSWORD,
            database=Config.MYSQL_DATABASE
        )
        app.record_store = RecordStore(app.db_pool)
