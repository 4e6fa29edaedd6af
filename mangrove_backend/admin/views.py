# mangrove_backend/admin/views.py
from flask import Blueprint, abort, flash, g, redirect, render_template, request, session, url_for
from ..api.middleware import login_required
from ..services.auth_service import AuthService
from ..services.config_service import ConfigService
from ..services.mangrove_service import MangroveService
from ..utils.exceptions import APIError

admin = Blueprint('admin', __name__)

# ---------- SESSION ----------

@admin.route('/login', methods=['GET', 'POST'])
def login():
    if session.get('user_id'):
        return redirect(url_for('admin.dashboard'))

    if request.method == 'GET':
        return render_template('login.html')

    user = AuthService().authenticate(request.form.get('username'), request.form.get('password'))
    if user is None:
        # No detail on purpose: unknown user and wrong password look the same
        return redirect(url_for('admin.login'))

    session.clear()
    session.permanent = True
    session['user_id'] = user.id
    return redirect(url_for('admin.dashboard'))

@admin.route('/logout')
def logout():
    session.pop('user_id', None)
    return redirect(url_for('admin.login'))

@admin.route('/')
@login_required
def dashboard():
    return render_template('dashboard/index.html')

# ---------- USERS ----------

@admin.route('/users')
@login_required
def users_index():
    users, count = AuthService().list_users()
    return render_template('users/index.html', users=users, count=count, current_user_id=g.current_user_id)

@admin.route('/users/create')
@login_required
def users_create():
    return render_template('users/create.html')

@admin.route('/users', methods=['POST'])
@login_required
def users_store():
    try:
        AuthService().register(request.form.get('username'), request.form.get('password'))
        flash('User created.', 'success')
    except APIError as e:
        flash(e.message, 'error')
        return redirect(url_for('admin.users_create'))
    return redirect(url_for('admin.users_index'))

@admin.route('/users/<int:user_id>/delete', methods=['POST'])
@login_required
def users_delete(user_id):
    auth_service = AuthService()
    user = auth_service.get_user_by_id(user_id)
    if user is None:
        abort(404)
    auth_service.delete_user(user)
    flash('User deleted.', 'success')
    return redirect(url_for('admin.users_index'))

# ---------- MANGROVES ----------

@admin.route('/mangroves')
@login_required
def mangroves_index():
    mangroves, count = MangroveService().list_mangroves()
    return render_template('mangroves/index.html', mangroves=mangroves, count=count)

@admin.route('/mangroves/create')
@login_required
def mangroves_create():
    return render_template('mangroves/create.html')

@admin.route('/mangroves', methods=['POST'])
@login_required
def mangroves_store():
    try:
        MangroveService().create(request.form)
        flash('Mangrove created.', 'success')
    except APIError as e:
        flash(e.message, 'error')
        return redirect(url_for('admin.mangroves_create'))
    return redirect(url_for('admin.mangroves_index'))

@admin.route('/mangroves/<int:mangrove_id>/edit', methods=['GET', 'POST'])
@login_required
def mangroves_edit(mangrove_id):
    service = MangroveService()
    mangrove = service.get(mangrove_id)
    if mangrove is None:
        abort(404)
    if request.method == 'GET':
        return render_template('mangroves/edit.html', mangrove=mangrove)

    try:
        service.update(mangrove, request.form)
        flash('Mangrove updated.', 'success')
    except APIError as e:
        flash(e.message, 'error')
        return redirect(url_for('admin.mangroves_edit', mangrove_id=mangrove_id))
    return redirect(url_for('admin.mangroves_index'))

@admin.route('/mangroves/<int:mangrove_id>/delete', methods=['POST'])
@login_required
def mangroves_delete(mangrove_id):
    service = MangroveService()
    mangrove = service.get(mangrove_id)
    if mangrove is None:
        abort(404)
    service.delete(mangrove)
    flash('Mangrove deleted.', 'success')
    return redirect(url_for('admin.mangroves_index'))

# ---------- CONFIGS ----------

@admin.route('/configs')
@login_required
def configs_index():
    return render_template('configs/index.html', configs=ConfigService().list_configs())

@admin.route('/configs', methods=['POST'])
@login_required
def configs_update():
    updated = ConfigService().bulk_update(request.form)
    if updated:
        flash(f"Updated {', '.join(updated)}.", 'success')
    return redirect(url_for('admin.configs_index'))
