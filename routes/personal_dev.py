from datetime import date
from flask import Blueprint, render_template, request, redirect, url_for, flash
import metrics
import view_state
from auth_utils import login_required
from page_utils import load_rows, store, save_row, confirm_delete, parse_int, parse_text

personal_dev_bp = Blueprint('personal_dev', __name__, url_prefix='/personal-dev')


def back():
    return redirect(url_for('personal_dev.index'))


@personal_dev_bp.route('/')
def index():
    projects = load_rows('learning_projects', order_by='created_at', descending=True)
    records = load_rows('learning_records', order_by='record_date', descending=True)

    cards = []
    for project in projects:
        project_records = [r for r in records if r.get('project_id') == project['id']]
        progress = metrics.project_progress(project_records)
        cards.append({
            'project': project,
            'records': project_records,
            'progress': progress,
            'level': metrics.progress_level(progress),
        })

    project_state = view_state.resolve(request.args, projects, form='project')
    record_defaults = {'project_id': request.args.get('project_id'), 'record_date': date.today().isoformat(), 'progress': 0}
    record_state = view_state.resolve(request.args, records, record_defaults, form='record')

    return render_template(
        'personal_dev.html',
        cards=cards,
        level_of=metrics.progress_level,
        project_state=project_state,
        project_values=view_state.form_values(project_state),
        record_state=record_state,
        record_values=view_state.form_values(record_state),
    )


@personal_dev_bp.route('/projects/save', methods=['POST'])
@login_required
def save_project():
    name = parse_text(request.form, 'name')
    if not name:
        flash("Name is required", "error")
        return back()
    data = {'name': name, 'description': parse_text(request.form, 'description')}
    save_row('learning_projects', request.form.get('id'), data,
             "Project added", "Project updated", praise='study')
    return back()


@personal_dev_bp.route('/projects/<int:id>/delete', methods=['POST'])
@login_required
def delete_project(id):
    def cascade():
        store().delete_where('learning_records', 'project_id', id)
        store().delete('learning_projects', id)

    return confirm_delete(
        'learning_projects', id, 'this project and all of its records',
        action_url=url_for('personal_dev.delete_project', id=id),
        cancel_url=url_for('personal_dev.index'),
        delete=cascade,
    )


@personal_dev_bp.route('/records/save', methods=['POST'])
@login_required
def save_record():
    content = parse_text(request.form, 'content')
    project_id = parse_int(request.form, 'project_id', None)
    record_id = request.form.get('id')
    if not content:
        flash("Content is required", "error")
        return back()
    if not record_id and not project_id:
        flash("Pick a project first", "error")
        return back()
    data = {
        'content': content,
        'record_date': parse_text(request.form, 'record_date') or date.today().isoformat(),
        'progress': metrics.clamp_progress(parse_int(request.form, 'progress')),
        'notes': parse_text(request.form, 'notes'),
    }
    if not record_id:
        data['project_id'] = project_id
    save_row('learning_records', record_id, data,
             "Record added", "Record updated", praise='study')
    return back()


@personal_dev_bp.route('/records/<int:id>/delete', methods=['POST'])
@login_required
def delete_record(id):
    return confirm_delete(
        'learning_records', id, 'this record',
        action_url=url_for('personal_dev.delete_record', id=id),
        cancel_url=url_for('personal_dev.index'),
    )
