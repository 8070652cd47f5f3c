"""Servizio per la gestione dei movimenti e dei totali mensili"""
import logging
from datetime import date

from sqlalchemy import case, func

from spese.errors import ValidationError
from spese.models.Categorie import Categorie, TIPO_ENTRATA, TIPO_USCITA
from spese.models.Movimenti import Movimenti, NOTA_MAX_LENGTH
from spese.services import BaseService, get_month_boundaries
from spese.services.categorie.categorie_service import CategorieService
from spese.utils import ValidationUtils, to_decimal

logger = logging.getLogger(__name__)

TIPO_VISTA_ENTRATE = 'ENTRATE'
TIPO_VISTA_CATEGORIA = 'CATEGORIA'
TIPI_VISTA = (TIPO_VISTA_ENTRATE, TIPO_VISTA_CATEGORIA)


class MovimentiService(BaseService):
    """Servizio per inserimento, cancellazione e aggregazione dei movimenti"""

    def __init__(self, session=None):
        super().__init__(session)
        self.categorie = CategorieService(self.session)

    def query_mese(self, mese, *colonne):
        """Query sui movimenti del mese (join con la categoria) per le colonne richieste"""
        start_date, end_date = get_month_boundaries(mese)
        return (
            self.session.query(*colonne)
            .select_from(Movimenti)
            .join(Categorie, Movimenti.categoria_id == Categorie.id)
            .filter(Movimenti.data >= start_date, Movimenti.data < end_date)
        )

    def calcola_bilancio(self, mese):
        """Calcola entrate, uscite e saldo del mese ``YYYY-MM``.

        Un mese senza movimenti restituisce tutti zeri.
        """
        entrate = func.coalesce(func.sum(case((Categorie.tipo == TIPO_ENTRATA, Movimenti.importo), else_=0)), 0)
        uscite = func.coalesce(func.sum(case((Categorie.tipo == TIPO_USCITA, Movimenti.importo), else_=0)), 0)
        query = self.query_mese(mese, entrate.label('entrate'), uscite.label('uscite'))
        riga = self.run_query(query, f'bilancio {mese}')[0]

        tot_entrate = to_decimal(riga.entrate)
        tot_uscite = to_decimal(riga.uscite)
        return {
            'mese': mese,
            'entrate': tot_entrate,
            'uscite': tot_uscite,
            'saldo': tot_entrate - tot_uscite,
        }

    def get_movimenti_filtrati(self, mese, tipo, categoria=None):
        """Movimenti del mese filtrati per vista, dal più recente.

        ``tipo='ENTRATE'`` restituisce tutte le entrate, ``tipo='CATEGORIA'``
        i movimenti della sola categoria ``categoria`` (confronto esatto).
        A parità di data l'id più alto viene prima.
        """
        if tipo not in TIPI_VISTA:
            raise ValidationError(f"Tipo vista non valido: {tipo!r} (ENTRATE o CATEGORIA)")

        query = self.query_mese(mese, Movimenti, Categorie.nome)
        if tipo == TIPO_VISTA_ENTRATE:
            query = query.filter(Categorie.tipo == TIPO_ENTRATA)
        else:
            if not categoria:
                raise ValidationError('Categoria obbligatoria per la vista CATEGORIA')
            query = query.filter(Categorie.nome == categoria)
        query = query.order_by(Movimenti.data.desc(), Movimenti.id.desc())

        movimenti = []
        for mov, nome_categoria in self.run_query(query, f'movimenti {mese} {tipo}'):
            movimenti.append({
                'id': mov.id,
                'importo': to_decimal(mov.importo),
                'nota': mov.nota,
                'data': mov.data,
                'categoria': nome_categoria,
            })
        totale = sum((m['importo'] for m in movimenti), to_decimal(0))
        return {'movimenti': movimenti, 'totale': totale}

    def crea_movimento(self, categoria, data=None, importo=None, nota=None):
        """Crea un nuovo movimento e restituisce il suo id.

        Controlli nell'ordine: categoria esistente, importo valido, data valida,
        nota entro NOTA_MAX_LENGTH caratteri.
        """
        cat = self.categorie.get_by_nome(categoria)
        valore = ValidationUtils.validate_amount(importo)
        data_movimento = ValidationUtils.validate_date(data, default=date.today())

        movimento = Movimenti(
            categoria_id=cat.id,
            data=data_movimento,
            importo=valore,
            nota=ValidationUtils.clean_optional_text(nota, max_length=NOTA_MAX_LENGTH),
        )
        self.save(movimento)
        logger.info('Inserito movimento %s: %s %s il %s', movimento.id, cat.nome, valore, data_movimento)
        return movimento.id

    def elimina_movimento(self, movimento_id):
        """Elimina il movimento se esiste. Un id inesistente non è un errore.

        Restituisce True se una riga è stata cancellata.
        """
        movimento = self.session.get(Movimenti, movimento_id)
        if movimento is None:
            logger.info('Movimento %s già assente, nessuna cancellazione', movimento_id)
            return False
        self.delete(movimento)
        logger.info('Eliminato movimento %s', movimento_id)
        return True

    def get_statistiche_per_categoria(self, mese):
        """Totali di uscita per categoria nel mese, solo categorie con totale > 0.

        Ordinati per importo decrescente, poi per nome.
        """
        totale = func.sum(Movimenti.importo)
        query = (
            self.query_mese(mese, Categorie.nome, totale.label('totale'))
            .filter(Categorie.tipo == TIPO_USCITA)
            .group_by(Categorie.id, Categorie.nome)
            .having(totale > 0)
            .order_by(totale.desc(), Categorie.nome.asc())
        )
        return [
            {'categoria': r.nome, 'totale': to_decimal(r.totale)}
            for r in self.run_query(query, f'statistiche categorie {mese}')
        ]
