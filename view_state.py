"""
Which form, if any, a page is showing.

A page is either closed, creating a new row, or editing one of the rows it
just fetched. The state comes from the query string so every page owns its
own value and nothing is shared between requests.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Closed:
    is_open = False
    is_editing = False


@dataclass(frozen=True)
class Creating:
    defaults: dict = field(default_factory=dict)
    is_open = True
    is_editing = False


@dataclass(frozen=True)
class Editing:
    record: dict
    is_open = True
    is_editing = True


def resolve(args, rows, defaults=None, form=None):
    """
    ``?new=1`` -> Creating, ``?edit=<id>`` -> Editing when the id was fetched.

    Pages with several forms name the one they mean with ``?form=<name>``;
    every other form on the page stays Closed.
    """
    if form is not None and args.get('form') != form:
        return Closed()
    edit_id = args.get('edit')
    if edit_id:
        for row in rows:
            if str(row.get('id')) == str(edit_id):
                return Editing(row)
        return Closed()
    if args.get('new'):
        return Creating(dict(defaults or {}))
    return Closed()


def form_values(state):
    """The values a form should be pre-filled with."""
    if isinstance(state, Editing):
        return state.record
    if isinstance(state, Creating):
        return state.defaults
    return {}
