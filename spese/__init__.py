"""Applicazione Flask per la gestione delle spese di casa"""

import os

from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from werkzeug.exceptions import HTTPException

from spese.config import config

# Istanze globali
db = SQLAlchemy()

API_PREFIX = '/api'
# Unica rotta API accessibile senza password
PERCORSI_PUBBLICI = {API_PREFIX + '/login'}


def create_app(config_name='default'):
    """Factory pattern per creare l'applicazione Flask"""
    template_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), 'templates'))
    static_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), 'static'))

    app = Flask(__name__,
                template_folder=template_dir,
                static_folder=static_dir)

    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Inizializza le estensioni
    db.init_app(app)

    # Jinja filter: format_currency
    from spese.utils.formatting import format_currency
    app.jinja_env.filters['format_currency'] = format_currency

    # Importa e registra i blueprint
    from spese.views.main import main_bp
    from spese.views.auth import auth_bp
    from spese.views.movimenti import movimenti_bp
    from spese.views.report import report_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp, url_prefix=API_PREFIX)
    app.register_blueprint(movimenti_bp, url_prefix=API_PREFIX)
    app.register_blueprint(report_bp, url_prefix=API_PREFIX + '/report')

    # Protezione globale delle API: ogni richiesta deve portare la password
    # condivisa nell'header configurato (tranne il login). La pagina del client
    # e gli asset statici restano pubblici.
    @app.before_request
    def require_app_password():
        from spese.services.auth.auth_service import AuthService

        path = (request.path or '').rstrip('/')
        if not path.startswith(API_PREFIX) or path in PERCORSI_PUBBLICI:
            return None
        auth = AuthService(app.config.get('APP_PASSWORD'))
        if not auth.authorize(request.headers.get(app.config['HEADER_PASSWORD'])):
            app.logger.info('Accesso negato a %s %s', request.method, request.path)
            return jsonify({'error': 'Non autorizzato'}), 401
        return None

    _register_error_handlers(app)

    # Crea le tabelle mancanti all'avvio. Le categorie non vengono caricate
    # qui: il provisioning avviene con INIT_DB=1 o scripts/seed_categorie.py
    with app.app_context():
        import spese.models  # noqa: F401 - registra i modelli
        db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
        if db_uri.startswith('sqlite:///'):
            os.makedirs(os.path.dirname(db_uri[len('sqlite:///'):]), exist_ok=True)
        db.create_all()

    return app


def _register_error_handlers(app):
    """Tutti gli errori delle API tornano al client come ``{error: messaggio}``"""
    from spese.errors import SpeseError

    @app.errorhandler(SpeseError)
    def handle_spese_error(e):
        if e.status_code >= 500:
            app.logger.error('%s su %s %s: %s', type(e).__name__, request.method, request.path, e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if not request.path.startswith(API_PREFIX):
            return e
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception('Errore non gestito su %s %s', request.method, request.path)
        return jsonify({'error': str(e) or type(e).__name__}), 500
