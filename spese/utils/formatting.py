from decimal import Decimal

from flask import current_app


def _to_number(value):
    try:
        if value is None:
            return Decimal('0')
        return value if isinstance(value, Decimal) else Decimal(str(value))
    except Exception:
        return Decimal('0')


def format_currency(value, fmt=None):
    """Formatta un importo alla maniera italiana (es. ``1.250,50 €``).

    Il template finale può essere cambiato con ``FORMATO_VALUTA`` in config,
    il segnaposto ``{}`` riceve l'importo già formattato.
    """
    if fmt is None:
        try:
            fmt = current_app.config.get('FORMATO_VALUTA', '{} €')
        except RuntimeError:
            # fuori da un app context (es. script o test puri)
            fmt = '{} €'
    v = _to_number(value)
    testo = '{:,.2f}'.format(v).replace(',', 'X').replace('.', ',').replace('X', '.')
    return fmt.format(testo)


def format_decimal(value, decimals=2):
    """Formatta un valore come stringa decimale semplice (es. "123.45")"""
    v = _to_number(value)
    return f"{v:.{int(decimals)}f}"


def format_data(date_obj, format_string='%d/%m/%Y'):
    """Formatta una data nel formato dei report (giorno/mese/anno)"""
    if date_obj is None:
        return ''
    if isinstance(date_obj, str):
        return date_obj
    return date_obj.strftime(format_string)
