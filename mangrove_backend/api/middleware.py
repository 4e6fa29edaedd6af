# mangrove_backend/api/middleware.py
from functools import wraps
from flask import g, redirect, session, url_for
from ..services.auth_service import AuthService

def login_required(view):
    """Redirect to the login page unless the session holds an existing user.

    The authenticated id is exposed to the view as ``g.current_user_id``.
    """
    @wraps(view)
    def wrapped(*args, **kwargs):
        user_id = session.get('user_id')
        if user_id is None:
            return redirect(url_for('admin.login'))

        if AuthService().get_user_by_id(user_id) is None:
            # The account was deleted while this session was alive
            session.pop('user_id', None)
            return redirect(url_for('admin.login'))

        g.current_user_id = user_id
        return view(*args, **kwargs)
    return wrapped
