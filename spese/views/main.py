"""Blueprint principale: pagina del client e controllo di salute"""
from datetime import date

from flask import Blueprint, current_app, jsonify, render_template
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from spese import API_PREFIX, db
from spese.defaults import PANNELLI
from spese.errors import StorageFailure

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Single page del client: login, pannelli, form di inserimento e report"""
    return render_template(
        'index.html',
        pannelli=PANNELLI,
        mese_corrente=date.today().strftime('%Y-%m'),
        oggi=date.today().isoformat(),
        header_password=current_app.config['HEADER_PASSWORD'],
    )


@main_bp.route(API_PREFIX + '/health')
def health():
    """Verifica che il database risponda (protetta dalla password come le altre API)"""
    try:
        db.session.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        current_app.logger.exception('Health check: database non raggiungibile')
        raise StorageFailure(str(e)) from e
    return jsonify({'status': 'ok'})
