# storefront/auth.py
from flask import Blueprint, jsonify, g
from . import get_store, request_data
from .core import accounts
from .decorators import with_session
from .tokens import issue_token

users_bp = Blueprint('users', __name__)


@users_bp.route('', methods=['POST'])
def register():
    data = request_data()
    user_id = accounts.register(
        get_store(),
        data.get('email'),
        data.get('password'),
        is_admin=data.get('isAdmin'),
    )
    return jsonify({'message': 'Registered successfully.', 'userId': user_id}), 201


@users_bp.route('/login', methods=['POST'])
@with_session
def login():
    data = request_data()
    # A failed attempt also revokes the session the caller is presenting
    session = accounts.login(
        get_store(),
        data.get('email'),
        data.get('password'),
        session_id=g.session_id,
    )
    token = issue_token(session)
    return jsonify({
        'message': 'Logged in successfully',
        'access_token': token,
        'user': session.user.to_dict(),
    }), 200


@users_bp.route('', methods=['GET'])
@with_session
def list_users():
    users = accounts.list_users(get_store(), g.current_session)
    return jsonify([user.to_dict() for user in users]), 200


@users_bp.route('/me', methods=['GET'])
@with_session
def get_current_user_info():
    """Returns information about the user behind the presented token."""
    user = accounts.whoami(get_store(), g.current_session)
    return jsonify(user.to_dict()), 200


@users_bp.route('/<string:user_id>/setadmin', methods=['PUT'])
@with_session
def set_admin(user_id):
    accounts.promote_user(get_store(), g.current_session, user_id)
    return jsonify({'message': 'User set as admin successfully'}), 200
