import logging
from flask import Flask
from flask_wtf.csrf import CSRFProtect
from config import Config
from auth_utils import can_mutate
from routes.dashboard import dashboard_bp
from routes.finance import finance_bp
from routes.sidejob import sidejob_bp
from routes.work import work_bp
from routes.personal_dev import personal_dev_bp
from routes.study import study_bp
from routes.social import social_bp
from routes.auth import auth_bp

csrf = CSRFProtect()

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if not app.config.get("SECRET_KEY"):
        import secrets
        app.config["SECRET_KEY"] = secrets.token_hex(32)

    config_class.init_db(app)
    csrf.init_app(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(finance_bp)
    app.register_blueprint(sidejob_bp)
    app.register_blueprint(work_bp)
    app.register_blueprint(personal_dev_bp)
    app.register_blueprint(study_bp)
    app.register_blueprint(social_bp)

    app.jinja_env.filters['won'] = won_filter
    app.jinja_env.filters['amount'] = amount_filter
    app.jinja_env.filters['clamp'] = clamp_filter

    @app.context_processor
    def inject_auth_gate():
        return {'can_mutate': can_mutate()}

    return app

def won_filter(value):
    """Whole-won amount, or "-" when there is no entry."""
    if value is None:
        return '-'
    return f"₩{int(value):,}"

def amount_filter(value):
    if value is None:
        return '-'
    return f"{value:,}"

def clamp_filter(value, min_val=0, max_val=100):
    try:
        return max(min(float(value), max_val), min_val)
    except (ValueError, TypeError):
        return 0

app = create_app()
