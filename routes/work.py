import json
import logging
from datetime import date
from flask import Blueprint, render_template, request, redirect, url_for, current_app, flash
import metrics
import view_state
from auth_utils import login_required
from keywords import KeywordList, filter_keywords
from page_utils import load_rows, save_row, confirm_delete, parse_text, parse_skills

logger = logging.getLogger(__name__)

work_bp = Blueprint('work', __name__, url_prefix='/work')

WORK_CATEGORIES = ['Project', 'Process Improvement', 'Customer', 'Team', 'Recognition', 'Other']
STAR_FIELDS = ('situation', 'task', 'action', 'result')


def load_keywords():
    keywords, error = KeywordList.load_or_default(current_app.config['KEYWORDS_FILE'])
    if error:
        flash("Saved keywords could not be read; using the defaults", "warning")
    return keywords


def load_achievements():
    rows = load_rows('work_achievements', order_by='achievement_date', descending=True)
    return [dict(row, skills=parse_skills(row.get('skills'))) for row in rows]


@work_bp.route('/')
def index():
    achievements = load_achievements()
    keywords = load_keywords()
    selected = request.args.get('keyword', '')
    filtered = [a for a in achievements if selected in a['skills']] if selected else achievements

    starts = metrics.period_starts(date.today())
    counts = {
        'total': len(achievements),
        'year': metrics.count_since(achievements, 'achievement_date', starts['year']),
        'month': metrics.count_since(achievements, 'achievement_date', starts['month']),
        'week': metrics.count_since(achievements, 'achievement_date', starts['week']),
    }
    state = view_state.resolve(request.args, achievements, {'category': WORK_CATEGORIES[-1], 'skills': []})

    return render_template(
        'work.html',
        achievements=filtered,
        counts=counts,
        keywords=list(keywords),
        filter_counts=metrics.keyword_counts(achievements, filter_keywords(keywords, achievements)),
        selected_keyword=selected,
        categories=WORK_CATEGORIES,
        star_fields=STAR_FIELDS,
        state=state,
        values=view_state.form_values(state),
    )


@work_bp.route('/save', methods=['POST'])
@login_required
def save():
    title = parse_text(request.form, 'title')
    if not title:
        flash("Title is required", "error")
        return redirect(url_for('work.index'))
    skills = []
    for skill in request.form.getlist('skills'):
        skill = skill.strip()
        if skill and skill not in skills:
            skills.append(skill)
    data = {
        'title': title,
        'achievement_date': parse_text(request.form, 'achievement_date'),
        'category': request.form.get('category') or WORK_CATEGORIES[-1],
        'skills': json.dumps(skills, ensure_ascii=False) if skills else None,
        'metrics': parse_text(request.form, 'metrics'),
        'notes': parse_text(request.form, 'notes'),
    }
    for name in STAR_FIELDS:
        data[name] = parse_text(request.form, name)
    save_row('work_achievements', request.form.get('id'), data,
             "Achievement recorded", "Achievement updated", praise='work')
    return redirect(url_for('work.index'))


@work_bp.route('/<int:id>/delete', methods=['POST'])
@login_required
def delete(id):
    return confirm_delete(
        'work_achievements', id, 'this achievement',
        action_url=url_for('work.delete', id=id),
        cancel_url=url_for('work.index'),
    )


def _save_keywords(keywords, message):
    try:
        keywords.save(current_app.config['KEYWORDS_FILE'])
    except OSError:
        logger.exception("Failed to save keywords")
        flash("Operation failed", "error")
        return
    flash(message, "success")


@work_bp.route('/keywords/add', methods=['POST'])
@login_required
def add_keyword():
    keywords = load_keywords()
    if keywords.add(request.form.get('keyword')):
        _save_keywords(keywords, "Keyword added")
    return redirect(url_for('work.index'))


@work_bp.route('/keywords/remove', methods=['POST'])
@login_required
def remove_keyword():
    keywords = load_keywords()
    if keywords.remove(request.form.get('keyword')):
        _save_keywords(keywords, "Keyword removed")
    # drops any active filter
    return redirect(url_for('work.index'))
