"""Client HTTP verso i servizi esterni di report e grafici."""
import logging

import requests

from spese.errors import UpstreamFailure

logger = logging.getLogger(__name__)


def _messaggio_errore(corpo):
    if isinstance(corpo, dict):
        return corpo.get('message') or corpo.get('error')
    return None


def _post_json(url, payload, timeout, servizio):
    """POST JSON verso ``url`` e restituisce la risposta già decodificata.

    Rete irraggiungibile, status HTTP di errore o corpo non JSON diventano
    UpstreamFailure. Con uno status di errore il messaggio del servizio, se
    presente nel corpo, ha la precedenza sul testo generico dell'HTTP.
    """
    if not url:
        raise UpstreamFailure(f'{servizio}: URL del servizio non configurato')
    try:
        response = requests.post(url, json=payload, timeout=timeout)
    except requests.RequestException as e:
        logger.exception('%s: chiamata a %s fallita', servizio, url)
        raise UpstreamFailure(f'{servizio}: {e}') from e

    try:
        corpo = response.json()
    except ValueError:
        corpo = None

    try:
        response.raise_for_status()
    except requests.HTTPError as e:
        messaggio = _messaggio_errore(corpo)
        logger.error('%s: %s ha risposto %s: %s', servizio, url, response.status_code, messaggio or e)
        raise UpstreamFailure(messaggio or f'{servizio}: {e}') from e

    if corpo is None:
        logger.error('%s: risposta non JSON da %s', servizio, url)
        raise UpstreamFailure(f'{servizio}: risposta non valida')
    return corpo


class DriveClient:
    """Scrive un foglio di calcolo su Google Drive tramite una web app Apps Script.

    Il servizio riceve ``{folderId, filename, headers, data}`` e risponde
    ``{status: 'success', url}`` oppure ``{status: 'error', message}``.
    """

    def __init__(self, script_url, folder_id, timeout=30):
        self.script_url = script_url
        self.folder_id = folder_id
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(config.get('GOOGLE_SCRIPT_URL'), config.get('GOOGLE_DRIVE_FOLDER_ID'),
                   config.get('UPSTREAM_TIMEOUT', 30))

    def crea_foglio(self, filename, headers, righe):
        payload = {
            'folderId': self.folder_id,
            'filename': filename,
            'headers': headers,
            'data': righe,
        }
        risultato = _post_json(self.script_url, payload, self.timeout, 'Google Drive')
        if not isinstance(risultato, dict) or risultato.get('status') != 'success' or not risultato.get('url'):
            messaggio = _messaggio_errore(risultato)
            logger.error('Google Drive ha rifiutato il report %s: %s', filename, messaggio)
            raise UpstreamFailure(messaggio or 'Errore generazione report')
        logger.info('Report %s creato: %s', filename, risultato['url'])
        return risultato['url']


class ChartClient:
    """Rende un grafico da una specifica dichiarativa (contratto QuickChart ``/chart/create``).

    Risposta attesa: ``{success: true, url}``.
    """

    def __init__(self, service_url, width=800, height=500, timeout=30):
        self.service_url = service_url
        self.width = width
        self.height = height
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(config.get('CHART_SERVICE_URL'), config.get('CHART_WIDTH', 800),
                   config.get('CHART_HEIGHT', 500), config.get('UPSTREAM_TIMEOUT', 30))

    def crea_grafico(self, chart):
        payload = {
            'chart': chart,
            'width': self.width,
            'height': self.height,
            'format': 'png',
            'backgroundColor': 'white',
        }
        risultato = _post_json(self.service_url, payload, self.timeout, 'Servizio grafici')
        if not isinstance(risultato, dict) or not risultato.get('success') or not risultato.get('url'):
            messaggio = _messaggio_errore(risultato)
            logger.error('Il servizio grafici ha risposto con errore: %s', messaggio)
            raise UpstreamFailure(messaggio or 'Errore generazione grafico')
        return risultato['url']
