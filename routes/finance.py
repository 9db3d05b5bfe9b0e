from datetime import date
from flask import Blueprint, render_template, request, redirect, url_for, current_app, abort, flash
import metrics
import view_state
from auth_utils import login_required
from page_utils import (
    load_rows, load_first, lookup, store, mutate, save_row, confirm_delete,
    parse_int, parse_decimal, parse_text,
)

finance_bp = Blueprint('finance', __name__, url_prefix='/finance')

EXPENSE_CATEGORIES = ['Weekday Meals', 'Dining Out', 'Entertainment', 'Shopping', 'Beauty Fund', 'Other']
INCOME_SOURCES = ['Chinese Tutoring', 'Xiaohongshu', 'Other Income']
TABS = ('daily', 'monthly', 'savings', 'sidejob')

# kind in the URL -> (table, tab to return to, label)
DELETABLE = {
    'fixed-costs': ('finance_fixed_costs', 'daily', 'this fixed cost'),
    'expenses': ('finance_expenses', 'daily', 'this expense'),
    'monthly-records': ('finance_monthly_records', 'monthly', "this month's record"),
    'savings': ('finance_savings', 'savings', 'this saving'),
    'sidejob': ('sidejob_teaching', 'sidejob', 'this side income'),
}


def debt_settings(row):
    cfg = current_app.config
    if not row:
        return {'id': None, 'principal': cfg['DEFAULT_DEBT_PRINCIPAL'], 'exchange_rate': cfg['DEFAULT_EXCHANGE_RATE']}
    return {
        'id': row['id'],
        'principal': row.get('original_amount') if row.get('original_amount') is not None else cfg['DEFAULT_DEBT_PRINCIPAL'],
        'exchange_rate': row.get('exchange_rate') if row.get('exchange_rate') is not None else cfg['DEFAULT_EXCHANGE_RATE'],
    }


def monthly_settings(row):
    cfg = current_app.config
    row = row or {}
    return {
        'id': row.get('id'),
        'monthly_salary': row.get('monthly_salary') or cfg['DEFAULT_MONTHLY_SALARY'],
        'target_savings': row.get('target_savings') or cfg['DEFAULT_TARGET_SAVINGS'],
    }


def as_side_income(row):
    return {
        'id': row['id'],
        'date': row.get('date'),
        'source': row.get('student_name') or INCOME_SOURCES[0],
        'amount': row.get('income') or 0,
        'notes': row.get('notes'),
    }


def back_to(tab):
    return redirect(url_for('finance.index', tab=tab))


@finance_bp.route('/')
def index():
    tab = request.args.get('tab', 'daily')
    if tab not in TABS:
        tab = 'daily'
    today = date.today()
    month = metrics.current_month(today)
    year = today.year

    fixed_costs = load_rows('finance_fixed_costs', filters={'is_active': True}, order_by='name')
    expenses = load_rows('finance_expenses', order_by='expense_date', descending=True)
    savings = load_rows('finance_savings', order_by='month')
    side_income = [as_side_income(r) for r in load_rows('sidejob_teaching', order_by='date', descending=True)]
    records = load_rows('finance_monthly_records', order_by='month')
    debt = debt_settings(load_first('finance_debt'))
    settings = monthly_settings(load_first('finance_settings'))

    total_fixed = metrics.total(fixed_costs)
    debt_payment = metrics.convert_currency(debt['principal'], debt['exchange_rate'])

    month_expenses = metrics.filter_month(expenses, 'expense_date', month)
    breakdown = metrics.category_breakdown(month_expenses, EXPENSE_CATEGORIES)
    spent = metrics.total(month_expenses)
    forecast = metrics.savings_forecast(
        settings['monthly_salary'], total_fixed, debt_payment, settings['target_savings'], spent
    )
    month_side_income = metrics.filter_month(side_income, 'date', month)
    year_savings = metrics.filter_year(savings, 'month', year)
    year_actual = metrics.total(year_savings, 'actual_amount')

    args = request.args
    monthly_defaults = {}
    if args.get('form') == 'monthly' and args.get('month'):
        existing_saving = metrics.find_by_month(savings, args['month'])
        monthly_defaults = {
            'month': args['month'],
            'salary': settings['monthly_salary'],
            'fixed_costs_total': total_fixed,
            'debt_payment': debt_payment,
            'saving': existing_saving['actual_amount'] if existing_saving else 0,
        }
    monthly_state = view_state.resolve(args, records, monthly_defaults, form='monthly')
    if isinstance(monthly_state, view_state.Editing):
        existing_saving = metrics.find_by_month(savings, monthly_state.record.get('month'))
        monthly_state = view_state.Editing(dict(
            monthly_state.record,
            saving=existing_saving['actual_amount'] if existing_saving else 0,
        ))

    forms = {
        'fixed': view_state.resolve(args, fixed_costs, form='fixed'),
        'expense': view_state.resolve(args, expenses, {'expense_date': today.isoformat(), 'category': EXPENSE_CATEGORIES[0]}, form='expense'),
        'saving': view_state.resolve(args, savings, {'month': month, 'target_amount': settings['target_savings']}, form='saving'),
        'sidejob': view_state.resolve(args, side_income, {'date': today.isoformat(), 'source': INCOME_SOURCES[0]}, form='sidejob'),
        'monthly': monthly_state,
    }

    return render_template(
        'finance.html',
        tab=tab,
        month=month,
        year=year,
        categories=EXPENSE_CATEGORIES,
        income_sources=INCOME_SOURCES,
        fixed_costs=fixed_costs,
        expenses=expenses,
        savings=savings,
        side_income=side_income,
        debt=debt,
        settings=settings,
        total_fixed=total_fixed,
        debt_payment=debt_payment,
        forecast=forecast,
        month_expenses=month_expenses,
        breakdown=[(name, value, metrics.percentage_of(value, spent)) for name, value in breakdown],
        chart_slices=metrics.chart_slices(breakdown),
        all_time_breakdown=metrics.category_breakdown(expenses, EXPENSE_CATEGORIES),
        side_income_this_month=metrics.total(month_side_income),
        side_income_total=metrics.total(side_income),
        ledger=metrics.monthly_ledger(year, records, expenses, savings),
        year_summary=metrics.year_summary(year, records, expenses, savings),
        progress=metrics.savings_progress(year, savings, settings['target_savings']),
        year_actual_savings=year_actual,
        year_target_rate=min(metrics.percentage_of(year_actual, settings['target_savings'] * 12), 100),
        forms=forms,
        form_values={name: view_state.form_values(state) for name, state in forms.items()},
    )


@finance_bp.route('/fixed-costs/save', methods=['POST'])
@login_required
def save_fixed_cost():
    name = parse_text(request.form, 'name')
    if not name:
        flash("Name is required", "error")
        return back_to('daily')
    data = {
        'name': name,
        'amount': parse_int(request.form, 'amount'),
        'notes': parse_text(request.form, 'notes'),
        'is_active': True,
        'category': 'Fixed',
        'due_day': parse_int(request.form, 'due_day', 1) or 1,
    }
    save_row('finance_fixed_costs', request.form.get('id'), data,
             "Fixed cost added", "Fixed cost updated", praise='expense')
    return back_to('daily')


@finance_bp.route('/expenses/save', methods=['POST'])
@login_required
def save_expense():
    expense_date = parse_text(request.form, 'expense_date')
    if not expense_date:
        flash("Date is required", "error")
        return back_to('daily')
    data = {
        'expense_date': expense_date,
        'category': request.form.get('category') or EXPENSE_CATEGORIES[-1],
        'amount': parse_int(request.form, 'amount'),
        'notes': parse_text(request.form, 'notes'),
    }
    save_row('finance_expenses', request.form.get('id'), data,
             "Expense recorded", "Expense updated", praise='expense')
    return back_to('daily')


@finance_bp.route('/debt', methods=['POST'])
@login_required
def save_debt():
    principal = parse_decimal(request.form, 'principal')
    rate = parse_decimal(request.form, 'exchange_rate')
    data = {
        'original_amount': principal,
        'exchange_rate': rate,
        'monthly_payment': metrics.convert_currency(principal, rate),
    }

    def action():
        current = store().first('finance_debt')
        if current:
            store().update('finance_debt', current['id'], data)
        else:
            store().insert('finance_debt', dict(
                data, name='Study loan', remaining_amount=principal, currency='CNY',
            ))

    mutate(action, "Debt settings saved")
    return back_to('daily')


@finance_bp.route('/settings', methods=['POST'])
@login_required
def save_settings():
    data = {
        'monthly_salary': parse_int(request.form, 'monthly_salary'),
        'target_savings': parse_int(request.form, 'target_savings'),
    }

    def action():
        current = store().first('finance_settings')
        if current:
            store().update('finance_settings', current['id'], data)
        else:
            store().insert('finance_settings', data)

    mutate(action, "Settings saved")
    return back_to('daily')


@finance_bp.route('/monthly-records/save', methods=['POST'])
@login_required
def save_monthly_record():
    month = parse_text(request.form, 'month')
    if not month:
        flash("Month is required", "error")
        return back_to('monthly')
    record_id = request.form.get('id')
    saving_amount = parse_int(request.form, 'saving')
    data = {
        'month': month,
        'salary': parse_int(request.form, 'salary'),
        'fixed_costs_total': parse_int(request.form, 'fixed_costs_total'),
        'debt_payment': parse_int(request.form, 'debt_payment'),
        'notes': parse_text(request.form, 'notes'),
    }
    if record_id:
        existing = lookup('finance_monthly_records', record_id)
        if existing is False:
            return back_to('monthly')
        if existing is None:
            abort(404)

    def action():
        target = monthly_settings(store().first('finance_settings'))['target_savings']
        existing_saving = metrics.find_by_month(store().list('finance_savings', filters={'month': month}), month)
        if record_id:
            store().update('finance_monthly_records', record_id, data)
        else:
            store().insert('finance_monthly_records', data)
        # The ledger form also owns that month's saving row
        if existing_saving:
            store().update('finance_savings', existing_saving['id'],
                           {'actual_amount': saving_amount, 'target_amount': target})
        elif saving_amount > 0:
            store().insert('finance_savings', {
                'month': month, 'actual_amount': saving_amount, 'target_amount': target, 'notes': None,
            })

    mutate(action, "Monthly record updated" if record_id else "Monthly record added", praise='savings')
    return back_to('monthly')


@finance_bp.route('/savings/save', methods=['POST'])
@login_required
def save_saving():
    month = parse_text(request.form, 'month')
    if not month:
        flash("Month is required", "error")
        return back_to('savings')
    data = {
        'month': month,
        'target_amount': parse_int(request.form, 'target_amount'),
        'actual_amount': parse_int(request.form, 'actual_amount'),
        'notes': parse_text(request.form, 'notes'),
    }
    save_row('finance_savings', request.form.get('id'), data,
             "Saving added", "Saving updated", praise='savings')
    return back_to('savings')


@finance_bp.route('/sidejob/save', methods=['POST'])
@login_required
def save_side_income():
    income_date = parse_text(request.form, 'date')
    if not income_date:
        flash("Date is required", "error")
        return back_to('sidejob')
    data = {
        'date': income_date,
        'student_name': request.form.get('source') or INCOME_SOURCES[0],
        'income': parse_int(request.form, 'amount'),
        'hours': 1,
        'notes': parse_text(request.form, 'notes'),
    }
    save_row('sidejob_teaching', request.form.get('id'), data,
             "Side income added", "Side income updated", praise='sidejob')
    return back_to('sidejob')


@finance_bp.route('/<kind>/<int:id>/delete', methods=['POST'])
@login_required
def delete(kind, id):
    if kind not in DELETABLE:
        abort(404)
    table, tab, label = DELETABLE[kind]
    return confirm_delete(
        table, id, label,
        action_url=url_for('finance.delete', kind=kind, id=id),
        cancel_url=url_for('finance.index', tab=tab),
    )
