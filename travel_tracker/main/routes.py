# travel_tracker/main/routes.py
# Map page, add-country, user switching and new member routes

from flask import render_template, redirect, url_for, request, abort, current_app
from travel_tracker.main import bp
from travel_tracker.main.forms import AddCountryForm, NewUserForm
from travel_tracker.services import UserService, VisitedCountryService, AddCountryResult, AddOutcome
from travel_tracker.session_state import resolve_current_user, select_user


def render_home(users, current_user, error=None, form=None):
    """Render the map page for current_user with an optional error line."""
    countries = VisitedCountryService.get_visited_codes(current_user.id if current_user else None)
    return render_template(
        'index.html',
        countries=countries,
        total=len(countries),
        users=users,
        current_user=current_user,
        color=current_user.color if current_user else None,
        error=error,
        form=form or AddCountryForm(formdata=None),
    )


@bp.route('/')
def index():
    users = UserService.get_all_users()
    current_user = resolve_current_user(users)
    return render_home(users, current_user)


@bp.route('/add', methods=['POST'])
def add():
    users = UserService.get_all_users()
    current_user = resolve_current_user(users)
    form = AddCountryForm()

    if form.validate_on_submit():
        result = VisitedCountryService.add_country_for_user(current_user, form.country.data)
    elif current_user is None:
        result = AddCountryResult(AddOutcome.NO_USER)
    else:
        result = AddCountryResult(AddOutcome.NOT_FOUND)

    if result.ok:
        return redirect(url_for('main.index'))

    return render_home(users, current_user, error=result.message, form=form)


@bp.route('/user', methods=['POST'])
def user():
    if request.form.get('add') == 'new':
        return render_template('new.html', form=NewUserForm(formdata=None))

    try:
        user_id = int(request.form.get('user', ''))
    except ValueError:
        abort(400)

    if UserService.get_user(user_id) is None:
        current_app.logger.warning(f"Ignoring switch to unknown user {user_id}")
    else:
        select_user(user_id)

    return redirect(url_for('main.index'))


@bp.route('/new', methods=['POST'])
def new():
    form = NewUserForm()

    if not form.validate_on_submit():
        return render_template('new.html', form=form)

    new_user = UserService.create_user(form.name.data, form.color.data)
    select_user(new_user.id)
    return redirect(url_for('main.index'))
