import argparse
import getpass
from sqlalchemy import create_engine, insert
from sqlalchemy.engine import URL
from werkzeug.security import generate_password_hash
from config import Config
from models import db, User

def engine_url():
    return URL.create(
        "mysql+mysqlconnector",
        username=Config.MYSQL_USER,
        password=Config.MYSQL_PASSWORD,
        host=Config.MYSQL_HOST,
        database=Config.MYSQL_DATABASE,
    )

def init_db(admin_email=None, admin_name=None):
    engine = create_engine(engine_url())
    try:
        db.metadata.create_all(engine)
        if admin_email:
            password = getpass.getpass(f"Password for {admin_email}: ")
            with engine.begin() as conn:
                conn.execute(insert(User.__table__).values(
                    name=admin_name or admin_email.split('@')[0],
                    email=admin_email.strip().lower(),
                    password_hash=generate_password_hash(password),
                ))
    finally:
        engine.dispose()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the dashboard tables.")
    parser.add_argument('--admin-email', help="also create an operator account")
    parser.add_argument('--admin-name')
    args = parser.parse_args()
    init_db(args.admin_email, args.admin_name)
