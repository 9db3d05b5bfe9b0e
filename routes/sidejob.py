from datetime import date
from flask import Blueprint, render_template, request, redirect, url_for, flash, abort
import metrics
import view_state
from auth_utils import login_required
from page_utils import load_rows, save_row, confirm_delete, parse_int, parse_decimal, parse_text

sidejob_bp = Blueprint('sidejob', __name__, url_prefix='/sidejob')

COLLABORATION_TYPES = ['Paid Post', 'Product Exchange', 'Affiliate', 'Other']
COLLABORATION_STATUSES = ['pending', 'in_progress', 'completed']

DELETABLE = {
    'teaching': ('sidejob_teaching', 'this teaching session'),
    'collaborations': ('sidejob_xiaohongshu', 'this collaboration'),
}


def back_to(tab):
    return redirect(url_for('sidejob.index', tab=tab))


@sidejob_bp.route('/')
def index():
    tab = request.args.get('tab', 'teaching')
    teaching = load_rows('sidejob_teaching', order_by='date', descending=True)
    collaborations = load_rows('sidejob_xiaohongshu', order_by='date', descending=True)

    teaching_income = metrics.total(teaching, 'income')
    collaboration_income = metrics.total(collaborations, 'income')
    today = date.today().isoformat()
    forms = {
        'teaching': view_state.resolve(request.args, teaching, {'date': today, 'hours': 1}, form='teaching'),
        'collaboration': view_state.resolve(
            request.args, collaborations,
            {'date': today, 'collaboration_type': COLLABORATION_TYPES[0], 'status': COLLABORATION_STATUSES[0]},
            form='collaboration',
        ),
    }

    return render_template(
        'sidejob.html',
        tab=tab,
        teaching=teaching,
        collaborations=collaborations,
        teaching_income=teaching_income,
        teaching_hours=metrics.total(teaching, 'hours'),
        collaboration_income=collaboration_income,
        product_value=metrics.total(collaborations, 'product_value'),
        total_income=teaching_income + collaboration_income,
        collaboration_types=COLLABORATION_TYPES,
        statuses=COLLABORATION_STATUSES,
        forms=forms,
        form_values={name: view_state.form_values(state) for name, state in forms.items()},
    )


@sidejob_bp.route('/teaching/save', methods=['POST'])
@login_required
def save_teaching():
    session_date = parse_text(request.form, 'date')
    student = parse_text(request.form, 'student_name')
    if not session_date or not student:
        flash("Date and student are required", "error")
        return back_to('teaching')
    data = {
        'date': session_date,
        'student_name': student,
        'hours': parse_decimal(request.form, 'hours'),
        'income': parse_int(request.form, 'income'),
        'notes': parse_text(request.form, 'notes'),
    }
    save_row('sidejob_teaching', request.form.get('id'), data,
             "Session added", "Session updated", praise='sidejob')
    return back_to('teaching')


@sidejob_bp.route('/collaborations/save', methods=['POST'])
@login_required
def save_collaboration():
    collab_date = parse_text(request.form, 'date')
    brand = parse_text(request.form, 'brand')
    if not collab_date or not brand:
        flash("Date and brand are required", "error")
        return back_to('collaborations')
    status = request.form.get('status')
    data = {
        'date': collab_date,
        'brand': brand,
        'collaboration_type': request.form.get('collaboration_type') or COLLABORATION_TYPES[-1],
        'income': parse_int(request.form, 'income'),
        'product_value': parse_int(request.form, 'product_value'),
        'status': status if status in COLLABORATION_STATUSES else COLLABORATION_STATUSES[0],
        'notes': parse_text(request.form, 'notes'),
    }
    save_row('sidejob_xiaohongshu', request.form.get('id'), data,
             "Collaboration added", "Collaboration updated", praise='sidejob')
    return back_to('collaborations')


@sidejob_bp.route('/<kind>/<int:id>/delete', methods=['POST'])
@login_required
def delete(kind, id):
    if kind not in DELETABLE:
        abort(404)
    table, label = DELETABLE[kind]
    return confirm_delete(
        table, id, label,
        action_url=url_for('sidejob.delete', kind=kind, id=id),
        cancel_url=url_for('sidejob.index', tab=kind),
    )
