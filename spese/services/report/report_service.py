"""
Servizio per la preparazione e l'esportazione dei report mensili
"""
import logging

from sqlalchemy import func

from spese.defaults import PALETTE_GRAFICO
from spese.errors import NoDataForPeriod
from spese.models.Categorie import Categorie, tipo_label
from spese.models.Movimenti import Movimenti
from spese.services import BaseService, get_month_name
from spese.services.movimenti.movimenti_service import MovimentiService
from spese.utils import to_decimal
from spese.utils.formatting import format_currency, format_data

logger = logging.getLogger(__name__)

HEADERS_SINTESI = ["Categoria", "Tipo Movimento", "Totale"]
HEADERS_DETTAGLIO = ["Data Movimento", "Importo", "Nota", "Descrizione", "Tipo Movimento"]


class ReportService(BaseService):
    """Prepara righe e grafici del mese e li consegna ai servizi esterni.

    I metodi ``sintesi``, ``dettaglio`` e ``grafico`` non hanno effetti esterni;
    i metodi ``esporta_*`` inviano il risultato al client configurato e
    restituiscono l'URL del documento creato.
    """

    def __init__(self, session=None, drive_client=None, chart_client=None, chart_type='bar'):
        super().__init__(session)
        self.movimenti = MovimentiService(self.session)
        self.drive_client = drive_client
        self.chart_client = chart_client
        self.chart_type = chart_type

    # ------------------------------------------------------------------
    # Formattazione
    # ------------------------------------------------------------------
    def sintesi(self, mese):
        """Totali per (categoria, tipo) del mese, ordinati per tipo e nome"""
        totale = func.sum(Movimenti.importo)
        query = (
            self.movimenti.query_mese(mese, Categorie.nome, Categorie.tipo, totale.label('totale'))
            .group_by(Categorie.nome, Categorie.tipo)
            .order_by(Categorie.tipo.asc(), Categorie.nome.asc())
        )
        righe = [
            [r.nome, tipo_label(r.tipo), float(to_decimal(r.totale))]
            for r in self.run_query(query, f'report sintetico {mese}')
        ]
        if not righe:
            raise NoDataForPeriod('Nessun dato.')
        return {
            'filename': f'Report Sintetico {mese}',
            'headers': HEADERS_SINTESI,
            'data': righe,
        }

    def dettaglio(self, mese):
        """Un rigo per movimento del mese in ordine cronologico"""
        query = (
            self.movimenti.query_mese(mese, Movimenti, Categorie.nome, Categorie.tipo)
            .order_by(Movimenti.data.asc(), Movimenti.id.asc())
        )
        righe = [
            [
                format_data(mov.data),
                float(to_decimal(mov.importo)),
                mov.nota or '',
                nome,
                tipo_label(tipo),
            ]
            for mov, nome, tipo in self.run_query(query, f'report dettaglio {mese}')
        ]
        if not righe:
            raise NoDataForPeriod('Nessun movimento trovato.')
        return {
            'filename': f'Report Dettaglio {mese}',
            'headers': HEADERS_DETTAGLIO,
            'data': righe,
        }

    def grafico(self, mese):
        """Specifica del grafico delle uscite per categoria (formato Chart.js)"""
        stats = self.movimenti.get_statistiche_per_categoria(mese)
        if not stats:
            raise NoDataForPeriod('Nessuna uscita da rappresentare.')

        etichette = [[s['categoria'], format_currency(s['totale'])] for s in stats]
        valori = [float(s['totale']) for s in stats]
        colori = [PALETTE_GRAFICO[i % len(PALETTE_GRAFICO)] for i in range(len(stats))]

        return {
            'type': self.chart_type,
            'data': {
                'labels': etichette,
                'datasets': [{
                    'label': 'Uscite',
                    'data': valori,
                    'backgroundColor': colori,
                    'borderColor': '#ffffff',
                    'borderWidth': 1,
                }],
            },
            'options': {
                'title': {
                    'display': True,
                    'text': f'Spese per categoria - {get_month_name(mese)}',
                    'fontSize': 18,
                },
                'legend': {'display': self.chart_type == 'pie', 'position': 'right'},
            },
        }

    # ------------------------------------------------------------------
    # Esportazione
    # ------------------------------------------------------------------
    def esporta_sintesi(self, mese):
        report = self.sintesi(mese)
        return self.drive_client.crea_foglio(report['filename'], report['headers'], report['data'])

    def esporta_dettaglio(self, mese):
        report = self.dettaglio(mese)
        return self.drive_client.crea_foglio(report['filename'], report['headers'], report['data'])

    def esporta_grafico(self, mese):
        url = self.chart_client.crea_grafico(self.grafico(mese))
        logger.info('Grafico %s creato: %s', mese, url)
        return url
