"""Configurazione per l'applicazione di gestione spese"""
import os

from dotenv import load_dotenv

# Le variabili definite in un eventuale .env locale hanno la precedenza sui default
load_dotenv()


def _database_uri(base_dir):
    """Ricava l'URI del database da DATABASE_URL, con fallback su SQLite locale."""
    uri = os.environ.get('DATABASE_URL')
    if not uri:
        return f'sqlite:///{os.path.join(base_dir, "db", "spese.db")}'
    # Render/Supabase espongono ancora lo schema legacy 'postgres://'
    if uri.startswith('postgres://'):
        uri = 'postgresql://' + uri[len('postgres://'):]
    return uri


class Config:
    """Configurazione principale dell'applicazione"""

    # Database
    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    SQLALCHEMY_DATABASE_URI = _database_uri(BASE_DIR)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY', 'gestione-spese-secret-key')

    # Accesso: password condivisa inviata dal client in un header
    APP_PASSWORD = os.environ.get('APP_PASSWORD')
    HEADER_PASSWORD = 'X-App-Password'

    # Report su Google Drive (web app Apps Script)
    GOOGLE_SCRIPT_URL = os.environ.get('GOOGLE_SCRIPT_URL')
    GOOGLE_DRIVE_FOLDER_ID = os.environ.get('GOOGLE_DRIVE_FOLDER_ID')

    # Grafici (endpoint compatibile con QuickChart /chart/create)
    CHART_SERVICE_URL = os.environ.get('CHART_SERVICE_URL', 'https://quickchart.io/chart/create')
    CHART_TYPE = os.environ.get('CHART_TYPE', 'bar')
    CHART_WIDTH = 800
    CHART_HEIGHT = 500

    # Timeout (secondi) per le chiamate ai servizi esterni
    UPSTREAM_TIMEOUT = int(os.environ.get('UPSTREAM_TIMEOUT', '30'))

    # Server
    HOST = '0.0.0.0'
    PORT = int(os.environ.get('PORT', '5000'))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class TestingConfig(Config):
    """Configurazione per i test: database in memoria e servizi esterni fittizi"""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    APP_PASSWORD = 'password-di-test'
    GOOGLE_SCRIPT_URL = 'https://script.example.test/exec'
    GOOGLE_DRIVE_FOLDER_ID = 'cartella-test'
    CHART_SERVICE_URL = 'https://chart.example.test/chart/create'
    CHART_TYPE = 'bar'


config = {
    'default': Config,
    'testing': TestingConfig,
}
