"""Blueprint per bilancio mensile, movimenti e categorie"""
from flask import Blueprint, current_app, jsonify, request

from spese.errors import InvalidMonth
from spese.services.categorie.categorie_service import CategorieService
from spese.services.movimenti.movimenti_service import MovimentiService
from spese.utils.campi import CAMPI_BILANCIO, CAMPI_MOVIMENTO, rinomina
from spese.views import corpo_json

movimenti_bp = Blueprint('movimenti', __name__)


def _mese_richiesto(valore):
    if not valore:
        raise InvalidMonth('Parametro mese obbligatorio (YYYY-MM)')
    return valore


def movimento_json(movimento):
    """Movimento interno -> chiavi dell'API, importi come numeri JSON"""
    return rinomina({
        'id': movimento['id'],
        'importo': float(movimento['importo']),
        'nota': movimento['nota'],
        'data': movimento['data'].isoformat(),
        'categoria': movimento['categoria'],
    }, CAMPI_MOVIMENTO)


def bilancio_json(bilancio):
    return rinomina({
        'mese': bilancio['mese'],
        'entrate': float(bilancio['entrate']),
        'uscite': float(bilancio['uscite']),
        'saldo': float(bilancio['saldo']),
    }, CAMPI_BILANCIO)


@movimenti_bp.route('/bilancio')
def bilancio():
    """Entrate, uscite e saldo del mese (zeri se il mese è vuoto)"""
    mese = _mese_richiesto(request.args.get('mese'))
    return jsonify(bilancio_json(MovimentiService().calcola_bilancio(mese)))


@movimenti_bp.route('/movimenti', methods=['GET'])
def lista_movimenti():
    """Movimenti del mese per la vista ENTRATE o per una singola CATEGORIA"""
    mese = _mese_richiesto(request.args.get('mese'))
    risultato = MovimentiService().get_movimenti_filtrati(
        mese,
        request.args.get('tipo'),
        request.args.get('categoria'),
    )
    return jsonify({
        'movimenti': [movimento_json(m) for m in risultato['movimenti']],
        'totale': float(risultato['totale']),
    })


@movimenti_bp.route('/movimenti', methods=['POST'])
def aggiungi_movimento():
    """Inserisce un nuovo movimento"""
    data = corpo_json()
    movimento_id = MovimentiService().crea_movimento(
        data.get('categoria'),
        data=data.get('data'),
        importo=data.get('importo'),
        nota=data.get('nota'),
    )
    return jsonify({'success': True, 'id': movimento_id})


@movimenti_bp.route('/movimenti/<int:movimento_id>', methods=['DELETE'])
def elimina_movimento(movimento_id):
    """Cancella un movimento; un id già assente risponde comunque con successo"""
    eliminato = MovimentiService().elimina_movimento(movimento_id)
    if not eliminato:
        current_app.logger.debug('DELETE su movimento inesistente %s', movimento_id)
    return jsonify({'success': True})


@movimenti_bp.route('/categorie')
def categorie():
    """Nomi delle categorie in ordine alfabetico"""
    return jsonify(CategorieService().get_nomi_categorie())
