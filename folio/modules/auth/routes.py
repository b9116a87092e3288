from flask import current_app, jsonify, request

from folio.core.logging_service import LoggingService
from . import auth_bp
from .guard import SESSION_COOKIE, USER_ID_COOKIE, current_session_token, get_identity_provider


def _is_production():
    return current_app.config.get('ENVIRONMENT') == 'production'


def user_sign_out():
    """Verify the current session (if any) and report whether cookies can be cleared"""
    try:
        token = current_session_token()
        if token:
            get_identity_provider().verify_session_cookie(token, check_revoked=True)
        return {'success': True, 'status': 200, 'message': 'Signed out successfully'}
    except Exception as e:
        LoggingService.warning('auth', f"Sign out failed: {e}")
        return {'success': False, 'status': 500, 'message': 'Something went wrong'}


@auth_bp.route('/api/login', methods=['POST'])
def login():
    """Exchange a Firebase ID token for a session cookie"""
    data = request.get_json(silent=True) or {}
    id_token = data.get('idToken')

    try:
        provider = get_identity_provider()
        decoded = provider.verify_id_token(id_token)

        admin_email = current_app.config.get('ADMIN_EMAIL')
        if not admin_email or decoded.get('email') != admin_email:
            LoggingService.log_security_event("Login attempt by non-admin identity", {
                'email': decoded.get('email'),
            })
            return jsonify({'success': False, 'message': 'Unauthorized'})

        max_age = current_app.config.get('SESSION_MAX_AGE', 60 * 60 * 24)
        session_cookie = provider.create_session_cookie(id_token, max_age)

        response = jsonify({'success': True, 'token': session_cookie})
        response.set_cookie(
            SESSION_COOKIE,
            session_cookie,
            max_age=max_age,
            httponly=True,
            secure=_is_production(),
            samesite='Strict',
            path='/',
        )
        LoggingService.log_user_action('auth', 'login', user_id=decoded.get('uid'))
        return response
    except Exception as e:
        print(f"Login failed: {e}")
        return jsonify({'success': False, 'message': 'Invalid token'})


@auth_bp.route('/api/logout', methods=['POST'])
def logout():
    had_session = bool(current_session_token())
    result = user_sign_out()
    response = jsonify(result)
    if result['success'] and had_session:
        response.delete_cookie(SESSION_COOKIE, path='/')
        response.delete_cookie(USER_ID_COOKIE, path='/')
    return response, result['status']
