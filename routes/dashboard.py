from datetime import datetime
from flask import Blueprint, render_template
import metrics
from page_utils import load_rows, load_count
from praise import get_praise

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='')


def greeting(hour):
    if hour < 12:
        return "Good morning"
    if hour < 18:
        return "Good afternoon"
    return "Good evening"


@dashboard_bp.route('/')
def index():
    now = datetime.now()
    stats = {
        'notes': load_count('xiaohongshu_notes'),
        'expenses': metrics.total(load_rows('finance_expenses')),
        'achievements': load_count('work_achievements'),
        'sidejob_income': metrics.total(load_rows('sidejob_teaching'), 'income'),
        'study_days': load_count('opic_daily'),
        'savings': metrics.total(load_rows('finance_savings'), 'actual_amount'),
    }
    return render_template(
        "dashboard.html",
        greeting=greeting(now.hour),
        today=now,
        praise=get_praise('general'),
        stats=stats,
    )
