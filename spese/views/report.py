"""Blueprint per i report su Google Drive e il grafico delle spese"""
from flask import Blueprint, current_app, jsonify

from spese.errors import InvalidMonth
from spese.services.report.collaboratori import ChartClient, DriveClient
from spese.services.report.report_service import ReportService
from spese.views import corpo_json

report_bp = Blueprint('report', __name__)


def _report_service():
    cfg = current_app.config
    return ReportService(
        drive_client=DriveClient.from_config(cfg),
        chart_client=ChartClient.from_config(cfg),
        chart_type=cfg.get('CHART_TYPE', 'bar'),
    )


def _mese_dal_body():
    data = corpo_json()
    mese = data.get('mese')
    if not mese:
        raise InvalidMonth('Parametro mese obbligatorio (YYYY-MM)')
    return mese


@report_bp.route('', methods=['POST'])
def report_sintetico():
    """Totali per categoria del mese su un nuovo foglio"""
    mese = _mese_dal_body()
    url = _report_service().esporta_sintesi(mese)
    return jsonify({'success': True, 'url': url})


@report_bp.route('/detail', methods=['POST'])
def report_dettaglio():
    """Elenco completo dei movimenti del mese su un nuovo foglio"""
    mese = _mese_dal_body()
    url = _report_service().esporta_dettaglio(mese)
    return jsonify({'success': True, 'url': url})


@report_bp.route('/chart', methods=['POST'])
def report_grafico():
    """Grafico delle uscite per categoria"""
    mese = _mese_dal_body()
    url = _report_service().esporta_grafico(mese)
    return jsonify({'success': True, 'url': url})
