from datetime import date
from flask import Blueprint, render_template, request, redirect, url_for, flash
import metrics
import view_state
from auth_utils import login_required
from page_utils import load_rows, save_row, confirm_delete, parse_int, parse_text
from praise import get_achievement_praise

study_bp = Blueprint('study', __name__, url_prefix='/opic')


@study_bp.route('/')
def index():
    records = load_rows('opic_daily', order_by='date', descending=True)
    summary = metrics.study_summary(records, date.today())
    state = view_state.resolve(request.args, records, {'date': date.today().isoformat()})
    return render_template(
        'study.html',
        records=records,
        summary=summary,
        streak_message=get_achievement_praise('streak', summary['streak']) if summary['streak'] else None,
        state=state,
        values=view_state.form_values(state),
    )


@study_bp.route('/save', methods=['POST'])
@login_required
def save():
    study_date = parse_text(request.form, 'date')
    content = parse_text(request.form, 'study_content')
    if not study_date or not content:
        flash("Date and study content are required", "error")
        return redirect(url_for('study.index'))
    data = {
        'date': study_date,
        'study_content': content,
        'duration_minutes': parse_int(request.form, 'duration_minutes'),
        'notes': parse_text(request.form, 'notes'),
    }
    save_row('opic_daily', request.form.get('id'), data,
             "Study log added", "Study log updated", praise='study')
    return redirect(url_for('study.index'))


@study_bp.route('/<int:id>/delete', methods=['POST'])
@login_required
def delete(id):
    return confirm_delete(
        'opic_daily', id, 'this study log',
        action_url=url_for('study.delete', id=id),
        cancel_url=url_for('study.index'),
    )
