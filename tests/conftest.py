import pytest
import requests

from spese import create_app, db
from spese.defaults import CATEGORIE_DEFAULT
from spese.services.categorie.categorie_service import CategorieService
from spese.services.movimenti.movimenti_service import MovimentiService
from spese.services.report import collaboratori

PASSWORD = 'password-di-test'


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        CategorieService().seed_categorie(CATEGORIE_DEFAULT)
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    return {app.config['HEADER_PASSWORD']: PASSWORD}


@pytest.fixture
def movimenti(app):
    return MovimentiService()


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Server Error')

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeUpstream:
    """Sostituto di requests.post che registra le chiamate"""

    def __init__(self):
        self.chiamate = []
        self.risposta = FakeResponse({'status': 'success', 'url': 'https://docs.example.test/report'})

    def post(self, url, json=None, timeout=None):
        self.chiamate.append({'url': url, 'json': json, 'timeout': timeout})
        if isinstance(self.risposta, Exception):
            raise self.risposta
        return self.risposta


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr(collaboratori.requests, 'post', fake.post)
    return fake
