"""Eccezioni applicative.

Ogni errore porta con sé lo status HTTP con cui viene restituito al client
(vedi gli error handler registrati in ``create_app``).
"""


class SpeseError(Exception):
    """Errore base dell'applicazione"""

    status_code = 500

    def __init__(self, message=None, status_code=None):
        super().__init__(message)
        self.message = message or self.__class__.default_message()
        if status_code is not None:
            self.status_code = status_code

    @classmethod
    def default_message(cls):
        return 'Errore interno'

    def to_dict(self):
        return {'error': self.message}


class Unauthorized(SpeseError):
    status_code = 401

    @classmethod
    def default_message(cls):
        return 'Password errata'


class ValidationError(SpeseError):
    """Input del client non valido"""
    status_code = 400

    @classmethod
    def default_message(cls):
        return 'Richiesta non valida'


class CategoryNotFound(ValidationError):

    @classmethod
    def default_message(cls):
        return 'Categoria non trovata'


class InvalidAmount(ValidationError):

    @classmethod
    def default_message(cls):
        return 'Importo non valido'


class InvalidDate(ValidationError):

    @classmethod
    def default_message(cls):
        return 'Formato data non valido (YYYY-MM-DD)'


class InvalidMonth(ValidationError):

    @classmethod
    def default_message(cls):
        return 'Formato mese non valido (YYYY-MM)'


class InvalidNote(ValidationError):

    @classmethod
    def default_message(cls):
        return 'Nota non valida'


class NoDataForPeriod(SpeseError):
    status_code = 404

    @classmethod
    def default_message(cls):
        return 'Nessun dato.'


class UpstreamFailure(SpeseError):
    """Il servizio esterno (report o grafico) ha risposto con errore o non è raggiungibile"""
    status_code = 500

    @classmethod
    def default_message(cls):
        return 'Servizio esterno non disponibile'


class StorageFailure(SpeseError):
    status_code = 500

    @classmethod
    def default_message(cls):
        return 'Errore del database'
