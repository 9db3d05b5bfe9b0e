from flask import Blueprint, render_template, request, redirect, url_for, flash
import metrics
import view_state
from auth_utils import login_required
from page_utils import load_rows, save_row, confirm_delete, parse_int, parse_text

social_bp = Blueprint('social', __name__, url_prefix='/xiaohongshu')

NOTE_CATEGORIES = ['Beauty', 'Fashion', 'Food', 'Travel', 'Lifestyle', 'Career', 'Study', 'Other']
COUNTERS = ('impressions', 'likes', 'saves', 'comments', 'followers_gained')


@social_bp.route('/')
def index():
    notes = load_rows('xiaohongshu_notes', order_by='post_date', descending=True)
    state = view_state.resolve(request.args, notes, {'category': NOTE_CATEGORIES[-1]})
    totals = {name: metrics.total(notes, name) for name in COUNTERS}
    return render_template(
        'social.html',
        notes=notes,
        totals=totals,
        categories=NOTE_CATEGORIES,
        state=state,
        values=view_state.form_values(state),
    )


@social_bp.route('/save', methods=['POST'])
@login_required
def save():
    title = parse_text(request.form, 'title')
    if not title:
        flash("Title is required", "error")
        return redirect(url_for('social.index'))
    data = {
        'title': title,
        'category': request.form.get('category') or NOTE_CATEGORIES[-1],
        'post_date': parse_text(request.form, 'post_date'),
        'notes': parse_text(request.form, 'notes'),
    }
    for name in COUNTERS:
        data[name] = parse_int(request.form, name)
    save_row('xiaohongshu_notes', request.form.get('id'), data,
             "Note added", "Note updated", praise='general')
    return redirect(url_for('social.index'))


@social_bp.route('/<int:id>/delete', methods=['POST'])
@login_required
def delete(id):
    return confirm_delete(
        'xiaohongshu_notes', id, 'this note',
        action_url=url_for('social.delete', id=id),
        cancel_url=url_for('social.index'),
    )
