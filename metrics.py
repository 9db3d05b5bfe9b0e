"""
Derived metrics computed from already-fetched rows.

Everything here is a pure function of its arguments. Empty or partially
filled input never raises: missing amounts count as zero and missing
lookups come back as None, which templates render as "-".
"""

from collections import namedtuple
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation


SavingsForecast = namedtuple('SavingsForecast', 'disposable spent predicted gap meets_target')


def _number(value):
    if value is None or value == '':
        return 0
    if isinstance(value, (int, Decimal)):
        return value
    # floats and strings go through str() so 0.1 stays 0.1
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return 0


def total(rows, field='amount'):
    """Sum ``field`` over ``rows``; an empty list sums to 0."""
    return sum((_number(row.get(field)) for row in rows), 0)


def normalize_date(value):
    """Canonical ``YYYY-MM-DD`` string for a date, datetime or string."""
    if value is None:
        return ''
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)[:10]


def month_of(value):
    return normalize_date(value)[:7]


def current_month(today=None):
    today = today or date.today()
    return today.strftime('%Y-%m')


def filter_month(rows, field, month):
    return [row for row in rows if normalize_date(row.get(field)).startswith(month)]


def filter_year(rows, field, year):
    prefix = str(year)
    return [row for row in rows if normalize_date(row.get(field)).startswith(prefix)]


def category_breakdown(rows, categories, field='amount'):
    """(category, amount) for every category in ``categories``, zeros included."""
    return [
        (category, total([row for row in rows if row.get('category') == category], field))
        for category in categories
    ]


def chart_slices(breakdown):
    return [(name, value) for name, value in breakdown if value > 0]


def percentage_of(amount, total_amount, places=1):
    total_amount = _number(total_amount)
    if not total_amount:
        return 0
    value = Decimal(str(_number(amount))) / Decimal(str(total_amount)) * 100
    return float(value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def month_keys(year):
    return [f"{year}-{m:02d}" for m in range(1, 13)]


def find_by_month(rows, month):
    for row in rows:
        if row.get('month') == month:
            return row
    return None


def cumulative_to_month(savings, month):
    # Zero-padded YYYY-MM strings order correctly as plain strings
    return total([s for s in savings if (s.get('month') or '') <= month], 'actual_amount')


def convert_currency(amount, rate):
    """Foreign amount times rate, rounded half-up to a whole unit."""
    product = Decimal(str(_number(amount))) * Decimal(str(_number(rate)))
    return int(product.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def disposable_income(salary, fixed_total, debt_payment, target_savings):
    return _number(salary) - _number(fixed_total) - _number(debt_payment) - _number(target_savings)


def savings_forecast(salary, fixed_total, debt_payment, target_savings, spent):
    disposable = disposable_income(salary, fixed_total, debt_payment, target_savings)
    predicted = disposable - _number(spent)
    gap = predicted - _number(target_savings)
    return SavingsForecast(disposable, _number(spent), predicted, gap, predicted >= _number(target_savings))


def monthly_ledger(year, records, expenses, savings):
    """
    One row per calendar month of ``year``.

    Salary, fixed costs, debt and balance are None when the month has no
    ledger record; expenses and saving are None when they are zero.
    """
    ledger = []
    for month in month_keys(year):
        record = find_by_month(records, month)
        spent = total(filter_month(expenses, 'expense_date', month))
        saving_row = find_by_month(savings, month)
        saving = _number(saving_row.get('actual_amount')) if saving_row else 0

        row = {
            'month': month,
            'record': record,
            'salary': None,
            'fixed_costs_total': None,
            'debt_payment': None,
            'expenses': spent or None,
            'saving': saving or None,
            'balance': None,
        }
        if record:
            salary = _number(record.get('salary'))
            fixed = _number(record.get('fixed_costs_total'))
            debt = _number(record.get('debt_payment'))
            row.update(
                salary=salary,
                fixed_costs_total=fixed,
                debt_payment=debt,
                balance=salary - fixed - debt - spent - saving,
            )
        ledger.append(row)
    return ledger


def savings_progress(year, savings, monthly_target):
    rows = []
    monthly_target = _number(monthly_target)
    for index, month in enumerate(month_keys(year), start=1):
        saving = find_by_month(savings, month)
        cumulative_target = monthly_target * index
        cumulative_actual = cumulative_to_month(savings, month)
        rows.append({
            'month': month,
            'saving': saving,
            'target': monthly_target,
            'actual': _number(saving.get('actual_amount')) if saving else None,
            'cumulative_target': cumulative_target,
            'cumulative_actual': cumulative_actual,
            'rate': percentage_of(cumulative_actual, cumulative_target),
        })
    return rows


def year_summary(year, records, expenses, savings):
    year_records = filter_year(records, 'month', year)
    return {
        'salary': total(year_records, 'salary'),
        'fixed_costs_total': total(year_records, 'fixed_costs_total'),
        'debt_payment': total(year_records, 'debt_payment'),
        'expenses': total(filter_year(expenses, 'expense_date', year)),
        'savings': total(filter_year(savings, 'month', year), 'actual_amount'),
    }


def project_progress(records):
    if not records:
        return 0
    mean = Decimal(str(total(records, 'progress'))) / len(records)
    return int(mean.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def progress_level(progress):
    if progress < 30:
        return 'low'
    if progress < 70:
        return 'medium'
    return 'high'


def clamp_progress(value):
    return max(0, min(100, int(_number(value))))


def study_streak(dates, today=None):
    """Consecutive days with an entry, counting back from ``today``."""
    today = today or date.today()
    logged = sorted({normalize_date(d) for d in dates if d}, reverse=True)
    streak = 0
    for offset, day in enumerate(logged):
        if day != (today - timedelta(days=offset)).isoformat():
            break
        streak += 1
    return streak


def study_summary(rows, today=None):
    days = len(rows)
    minutes = total(rows, 'duration_minutes')
    hours = float((Decimal(str(minutes)) / 60).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))
    average = int((Decimal(str(minutes)) / days).quantize(Decimal(1), rounding=ROUND_HALF_UP)) if days else 0
    return {
        'days': days,
        'minutes': minutes,
        'hours': hours,
        'streak': study_streak([r.get('date') for r in rows], today),
        'average_minutes': average,
    }


def count_since(rows, field, start):
    start = normalize_date(start)
    return len([row for row in rows if row.get(field) and normalize_date(row.get(field)) >= start])


def period_starts(today=None):
    """First day of the year, month and week (weeks start on Sunday)."""
    today = today or date.today()
    return {
        'year': today.replace(month=1, day=1),
        'month': today.replace(day=1),
        'week': today - timedelta(days=(today.weekday() + 1) % 7),
    }


def keyword_counts(achievements, keywords):
    return [
        (keyword, len([a for a in achievements if keyword in (a.get('skills') or [])]))
        for keyword in keywords
    ]
