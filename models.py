from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class FixedCost(db.Model):
    __tablename__ = 'finance_fixed_costs'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    amount = db.Column(db.BigInteger, nullable=False, default=0)
    due_day = db.Column(db.Integer, nullable=False, default=1)
    category = db.Column(db.String(50), nullable=False, default='Fixed')
    notes = db.Column(db.Text)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class DailyExpense(db.Model):
    __tablename__ = 'finance_expenses'
    id = db.Column(db.Integer, primary_key=True)
    expense_date = db.Column(db.Date, nullable=False)
    category = db.Column(db.String(50), nullable=False)
    amount = db.Column(db.BigInteger, nullable=False, default=0)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class MonthlySaving(db.Model):
    __tablename__ = 'finance_savings'
    id = db.Column(db.Integer, primary_key=True)
    month = db.Column(db.String(7), nullable=False)
    target_amount = db.Column(db.BigInteger, nullable=False, default=0)
    actual_amount = db.Column(db.BigInteger, nullable=False, default=0)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class MonthlyRecord(db.Model):
    __tablename__ = 'finance_monthly_records'
    id = db.Column(db.Integer, primary_key=True)
    month = db.Column(db.String(7), nullable=False)
    salary = db.Column(db.BigInteger, nullable=False, default=0)
    fixed_costs_total = db.Column(db.BigInteger, nullable=False, default=0)
    debt_payment = db.Column(db.BigInteger, nullable=False, default=0)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class DebtSettings(db.Model):
    __tablename__ = 'finance_debt'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, default='Study loan')
    original_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    remaining_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    currency = db.Column(db.String(3), nullable=False, default='CNY')
    exchange_rate = db.Column(db.Numeric(10, 4), nullable=False, default=0)
    monthly_payment = db.Column(db.BigInteger, nullable=False, default=0)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class MonthlySettings(db.Model):
    __tablename__ = 'finance_settings'
    id = db.Column(db.Integer, primary_key=True)
    monthly_salary = db.Column(db.BigInteger, nullable=False, default=0)
    target_savings = db.Column(db.BigInteger, nullable=False, default=0)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class TeachingSession(db.Model):
    __tablename__ = 'sidejob_teaching'
    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False)
    student_name = db.Column(db.String(100), nullable=False)
    hours = db.Column(db.Numeric(5, 2), nullable=False, default=1)
    income = db.Column(db.BigInteger, nullable=False, default=0)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class Collaboration(db.Model):
    __tablename__ = 'sidejob_xiaohongshu'
    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False)
    brand = db.Column(db.String(100), nullable=False)
    collaboration_type = db.Column(db.String(50), nullable=False)
    income = db.Column(db.BigInteger, nullable=False, default=0)
    product_value = db.Column(db.BigInteger, nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default='pending')
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class LearningProject(db.Model):
    __tablename__ = 'learning_projects'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class LearningRecord(db.Model):
    __tablename__ = 'learning_records'
    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, db.ForeignKey('learning_projects.id'), nullable=False)
    content = db.Column(db.Text, nullable=False)
    record_date = db.Column(db.Date, nullable=False)
    progress = db.Column(db.Integer, nullable=False, default=0)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class WorkAchievement(db.Model):
    __tablename__ = 'work_achievements'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    achievement_date = db.Column(db.Date)
    category = db.Column(db.String(50), nullable=False, default='Other')
    situation = db.Column(db.Text)
    task = db.Column(db.Text)
    action = db.Column(db.Text)
    result = db.Column(db.Text)
    # JSON-encoded list of keyword tags
    skills = db.Column(db.Text)
    metrics = db.Column(db.Text)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class SocialNote(db.Model):
    __tablename__ = 'xiaohongshu_notes'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(50), nullable=False, default='Other')
    post_date = db.Column(db.Date)
    impressions = db.Column(db.Integer, nullable=False, default=0)
    likes = db.Column(db.Integer, nullable=False, default=0)
    saves = db.Column(db.Integer, nullable=False, default=0)
    comments = db.Column(db.Integer, nullable=False, default=0)
    followers_gained = db.Column(db.Integer, nullable=False, default=0)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())


class StudyLog(db.Model):
    __tablename__ = 'opic_daily'
    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False)
    study_content = db.Column(db.Text, nullable=False)
    duration_minutes = db.Column(db.Integer, nullable=False, default=0)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, server_default=db.func.now())
