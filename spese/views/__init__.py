"""Blueprint dell'applicazione: pagina del client e API JSON."""
from flask import request

from spese.errors import ValidationError


def corpo_json():
    """Corpo JSON della richiesta come dizionario (vuoto se assente).

    Un corpo JSON che non è un oggetto (lista, numero, stringa) è un errore 400.
    """
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('Il corpo della richiesta deve essere un oggetto JSON')
    return data
