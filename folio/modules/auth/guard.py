"""
Admin session guard.

Every mutating workflow is wrapped with admin_required so the session cookie
is checked before any upload or write happens.
"""

from functools import wraps

from flask import current_app, g, jsonify, request

from folio.core.exceptions import Unauthorized
from folio.core.logging_service import LoggingService

SESSION_COOKIE = 'token'
USER_ID_COOKIE = 'userId'


def get_identity_provider():
    return current_app.extensions['folio'].identity


def current_session_token():
    """Session cookie of the current request, if any"""
    return request.cookies.get(SESSION_COOKIE)


def verify_admin_session(token):
    """Verify a session cookie and check it belongs to the admin.

    Returns the decoded claims; raises Unauthorized otherwise.
    """
    if not token:
        raise Unauthorized("Unauthorized: No token found")

    decoded = get_identity_provider().verify_session_cookie(token, check_revoked=True)

    admin_email = current_app.config.get('ADMIN_EMAIL')
    if not admin_email or decoded.get('email') != admin_email:
        raise Unauthorized("Unauthorized: Invalid user")
    return decoded


def _check_session():
    """Run the guard; returns (claims, error) and records the failure status"""
    try:
        claims = verify_admin_session(current_session_token())
    except Unauthorized as e:
        LoggingService.log_security_event(str(e), {'path': request.path})
        g.workflow_status = e.http_status
        return None, str(e)
    except Exception as e:
        LoggingService.log_error_with_traceback('security', e)
        g.workflow_status = 500
        return None, str(e)

    g.admin_claims = claims
    return claims, None


def admin_required(f):
    """Decorator for workflow entry points: failure becomes {'success': False}"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        claims, error = _check_session()
        if error:
            return {'success': False, 'message': error}
        return f(*args, **kwargs)
    return decorated_function


def admin_api_required(f):
    """Decorator for JSON routes: failure becomes a 401 response"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        claims, error = _check_session()
        if error:
            return jsonify({'success': False, 'message': error}), g.pop('workflow_status', 401)
        return f(*args, **kwargs)
    return decorated_function


def result_response(result):
    """JSON response for a workflow result envelope"""
    status = g.pop('workflow_status', 400)
    if result.get('success'):
        return jsonify(result)
    return jsonify(result), status
