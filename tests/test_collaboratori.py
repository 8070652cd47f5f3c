import pytest
import requests

from spese.errors import UpstreamFailure
from spese.services.report.collaboratori import ChartClient, DriveClient

from tests.conftest import FakeResponse


def test_drive_successo(upstream):
    client = DriveClient('https://script.example.test/exec', 'cartella', timeout=5)

    url = client.crea_foglio('Report', ['A'], [[1]])

    assert url == 'https://docs.example.test/report'
    assert upstream.chiamate[0]['timeout'] == 5
    assert upstream.chiamate[0]['json'] == {
        'folderId': 'cartella',
        'filename': 'Report',
        'headers': ['A'],
        'data': [[1]],
    }


def test_drive_servizio_irraggiungibile(upstream):
    upstream.risposta = requests.ConnectionError('connessione rifiutata')

    with pytest.raises(UpstreamFailure) as exc:
        DriveClient('https://script.example.test/exec', 'cartella').crea_foglio('R', [], [])
    assert 'connessione rifiutata' in exc.value.message


def test_drive_status_http_di_errore(upstream):
    upstream.risposta = FakeResponse({}, status_code=502)

    with pytest.raises(UpstreamFailure):
        DriveClient('https://script.example.test/exec', 'cartella').crea_foglio('R', [], [])


def test_drive_risposta_non_json(upstream):
    upstream.risposta = FakeResponse(ValueError('Expecting value'))

    with pytest.raises(UpstreamFailure) as exc:
        DriveClient('https://script.example.test/exec', 'cartella').crea_foglio('R', [], [])
    assert 'risposta non valida' in exc.value.message


def test_drive_url_non_configurato(upstream):
    with pytest.raises(UpstreamFailure):
        DriveClient(None, 'cartella').crea_foglio('R', [], [])
    assert upstream.chiamate == []


def test_grafico_risposta_senza_successo(upstream):
    upstream.risposta = FakeResponse({'success': False, 'message': 'Invalid chart'})

    with pytest.raises(UpstreamFailure) as exc:
        ChartClient('https://chart.example.test/chart/create').crea_grafico({'type': 'bar'})
    assert exc.value.message == 'Invalid chart'


def test_drive_errore_http_con_messaggio_del_servizio(upstream):
    upstream.risposta = FakeResponse({'status': 'error', 'message': 'Script sospeso'}, status_code=500)

    with pytest.raises(UpstreamFailure) as exc:
        DriveClient('https://script.example.test/exec', 'cartella').crea_foglio('R', [], [])
    assert exc.value.message == 'Script sospeso'


def test_grafico_errore_http_con_campo_error(upstream):
    upstream.risposta = FakeResponse({'success': False, 'error': 'Chart troppo grande'}, status_code=400)

    with pytest.raises(UpstreamFailure) as exc:
        ChartClient('https://chart.example.test/chart/create').crea_grafico({'type': 'bar'})
    assert exc.value.message == 'Chart troppo grande'


@pytest.mark.parametrize('risposta', [
    {'status': 'success'},
    {'status': 'success', 'url': None},
])
def test_drive_successo_senza_url(upstream, risposta):
    upstream.risposta = FakeResponse(risposta)

    with pytest.raises(UpstreamFailure) as exc:
        DriveClient('https://script.example.test/exec', 'cartella').crea_foglio('R', [], [])
    assert exc.value.message == 'Errore generazione report'


def test_grafico_successo_senza_url(upstream):
    upstream.risposta = FakeResponse({'success': True})

    with pytest.raises(UpstreamFailure) as exc:
        ChartClient('https://chart.example.test/chart/create').crea_grafico({'type': 'bar'})
    assert exc.value.message == 'Errore generazione grafico'
