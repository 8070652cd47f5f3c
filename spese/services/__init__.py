"""
Servizio base per la gestione della business logic
"""
import logging

from dateutil.relativedelta import relativedelta
from sqlalchemy.exc import SQLAlchemyError

from spese import db
from spese.defaults import MESI_ITALIANI
from spese.errors import StorageFailure
from spese.utils import ValidationUtils

__all__ = ['BaseService', 'get_month_boundaries', 'get_month_name']

logger = logging.getLogger(__name__)


class BaseService:
    """Classe base per i servizi con metodi comuni.

    La sessione del database viene passata dal chiamante; senza argomenti si usa
    la sessione di Flask-SQLAlchemy legata alla richiesta corrente.
    """

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def commit(self):
        """Conferma le modifiche in sessione; in caso di errore annulla e solleva StorageFailure"""
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception('Commit fallito')
            raise StorageFailure(str(e)) from e

    def save(self, obj):
        """Salva un oggetto nel database"""
        self.session.add(obj)
        self.commit()
        return obj

    def delete(self, obj):
        """Elimina un oggetto dal database"""
        self.session.delete(obj)
        self.commit()

    def run_query(self, query, descrizione):
        """Esegue una query di lettura convertendo gli errori del driver in StorageFailure"""
        try:
            return query.all()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception('Errore nella query: %s', descrizione)
            raise StorageFailure(str(e)) from e


def get_month_boundaries(mese):
    """Calcola i confini di un mese ``YYYY-MM``: [primo giorno, primo giorno del mese successivo)"""
    start_date = ValidationUtils.validate_mese(mese)
    return start_date, start_date + relativedelta(months=1)


def get_month_name(mese):
    """Restituisce il nome del mese in italiano con l'anno (es. 'Febbraio 2026')"""
    start_date = ValidationUtils.validate_mese(mese)
    return f"{MESI_ITALIANI[start_date.month - 1]} {start_date.year}"
