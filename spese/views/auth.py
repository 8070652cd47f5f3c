"""Blueprint per la verifica della password condivisa"""
from flask import Blueprint, current_app, jsonify

from spese.services.auth.auth_service import AuthService
from spese.views import corpo_json

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Controlla la password; il client la conserva e la rimanda in ogni richiesta"""
    data = corpo_json()
    AuthService(current_app.config.get('APP_PASSWORD')).require(data.get('password'))
    return jsonify({'success': True})
