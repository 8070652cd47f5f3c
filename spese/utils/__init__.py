"""
Utilità comuni per l'applicazione
"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from spese.errors import InvalidAmount, InvalidDate, InvalidMonth, InvalidNote

CENTESIMO = Decimal('0.01')


def to_decimal(value):
    """Converte un valore numerico (Decimal, float, int, stringa, None) in Decimal al centesimo."""
    if value is None:
        return Decimal('0.00')
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTESIMO, rounding=ROUND_HALF_UP)


class ValidationUtils:
    """Utilità per la validazione"""

    @staticmethod
    def validate_amount(amount):
        """Valida e converte un importo in Decimal (accetta la virgola come separatore)"""
        if isinstance(amount, bool) or amount is None:
            raise InvalidAmount()
        try:
            valore = Decimal(str(amount).strip().replace(',', '.'))
        except (InvalidOperation, ValueError):
            raise InvalidAmount()
        if not valore.is_finite():
            raise InvalidAmount()
        if valore < 0:
            raise InvalidAmount("L'importo non può essere negativo")
        # oltre 28 cifre significative (10^26 al centesimo) quantize fallisce,
        # stesso limite della colonna NUMERIC(28, 2)
        try:
            return valore.quantize(CENTESIMO, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise InvalidAmount('Importo troppo grande')

    @staticmethod
    def validate_date(date_str, default=None):
        """Valida e converte una data YYYY-MM-DD; se vuota restituisce ``default`` (oggi)"""
        if date_str is None or (isinstance(date_str, str) and not date_str.strip()):
            return default or date.today()
        try:
            return datetime.strptime(str(date_str).strip(), '%Y-%m-%d').date()
        except ValueError:
            raise InvalidDate()

    @staticmethod
    def validate_mese(mese):
        """Valida una chiave mese YYYY-MM e restituisce il primo giorno del mese"""
        if not mese or not isinstance(mese, str):
            raise InvalidMonth()
        try:
            return datetime.strptime(mese.strip(), '%Y-%m').date()
        except ValueError:
            raise InvalidMonth()

    @staticmethod
    def clean_optional_text(value, max_length=None):
        """Normalizza un testo opzionale: stringa vuota o solo spazi diventa None.

        Un testo più lungo di ``max_length`` viene rifiutato, non troncato.
        """
        if value is None:
            return None
        testo = str(value).strip()
        if not testo:
            return None
        if max_length and len(testo) > max_length:
            raise InvalidNote(f'La nota supera i {max_length} caratteri')
        return testo
