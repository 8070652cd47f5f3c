from datetime import date
from decimal import Decimal

import pytest

from spese.errors import InvalidAmount, InvalidDate, InvalidMonth, InvalidNote, Unauthorized
from spese.services import get_month_boundaries, get_month_name
from spese.services.auth.auth_service import AuthService
from spese.utils import ValidationUtils, to_decimal
from spese.utils.campi import CAMPI_BILANCIO, CAMPI_MOVIMENTO, rinomina
from spese.utils.formatting import format_currency, format_data, format_decimal
from spese.views.movimenti import bilancio_json, movimento_json


@pytest.mark.parametrize('valore, atteso', [
    ('42.50', Decimal('42.50')),
    ('42,5', Decimal('42.50')),
    (42.5, Decimal('42.50')),
    (7, Decimal('7.00')),
    ('0.005', Decimal('0.01')),
    (' 1000 ', Decimal('1000.00')),
])
def test_validate_amount(valore, atteso):
    assert ValidationUtils.validate_amount(valore) == atteso


@pytest.mark.parametrize('valore', ['-0.01', 'abc', '', None, True, 'nan', '-inf', '1e30', '1e26'])
def test_validate_amount_non_valido(valore):
    with pytest.raises(InvalidAmount):
        ValidationUtils.validate_amount(valore)


def test_validate_amount_limite_superiore():
    massimo = '99999999999999999999999999.99'
    assert ValidationUtils.validate_amount(massimo) == Decimal(massimo)


def test_clean_optional_text():
    assert ValidationUtils.clean_optional_text('  ') is None
    assert ValidationUtils.clean_optional_text(' ciao ', max_length=4) == 'ciao'
    with pytest.raises(InvalidNote):
        ValidationUtils.clean_optional_text('x' * 501, max_length=500)


def test_validate_date():
    assert ValidationUtils.validate_date('2024-02-29') == date(2024, 2, 29)
    assert ValidationUtils.validate_date('', default=date(2020, 1, 1)) == date(2020, 1, 1)
    with pytest.raises(InvalidDate):
        ValidationUtils.validate_date('2025-02-29')


@pytest.mark.parametrize('mese', [None, '', '2026', '2026-00', '02-2026', 202602])
def test_validate_mese_non_valido(mese):
    with pytest.raises(InvalidMonth):
        ValidationUtils.validate_mese(mese)


def test_confini_del_mese():
    assert get_month_boundaries('2026-12') == (date(2026, 12, 1), date(2027, 1, 1))
    assert get_month_boundaries('2024-02') == (date(2024, 2, 1), date(2024, 3, 1))


def test_nome_mese():
    assert get_month_name('2026-02') == 'Febbraio 2026'
    assert get_month_name('2025-12') == 'Dicembre 2025'


def test_to_decimal():
    assert to_decimal(None) == Decimal('0.00')
    assert to_decimal(0.1 + 0.2) == Decimal('0.30')


def test_format_currency_italiano():
    assert format_currency(Decimal('1250.5')) == '1.250,50 €'
    assert format_currency(0) == '0,00 €'
    assert format_currency(-42.5) == '-42,50 €'
    assert format_currency(None) == '0,00 €'


def test_format_currency_nel_contesto_app(app):
    app.config['FORMATO_VALUTA'] = '€ {}'
    assert format_currency(3) == '€ 3,00'


def test_format_varie():
    assert format_decimal(Decimal('3.456')) == '3.46'
    assert format_data(date(2026, 2, 5)) == '05/02/2026'
    assert format_data(None) == ''


def test_mappatura_movimento_completa():
    riga = movimento_json({
        'id': 1, 'importo': Decimal('42.50'), 'nota': None,
        'data': date(2026, 2, 15), 'categoria': 'Utenze',
    })
    assert set(riga) == set(CAMPI_MOVIMENTO.values())
    assert riga['IMPORTO'] == 42.5


def test_mappatura_bilancio_completa():
    riga = bilancio_json({
        'mese': '2026-02', 'entrate': Decimal('0'), 'uscite': Decimal('0'), 'saldo': Decimal('0'),
    })
    assert set(riga) == set(CAMPI_BILANCIO.values())


def test_mappature_senza_chiavi_duplicate():
    for mappa in (CAMPI_MOVIMENTO, CAMPI_BILANCIO):
        assert len(set(mappa.values())) == len(mappa)


def test_rinomina_rifiuta_campi_non_mappati():
    with pytest.raises(KeyError):
        rinomina({'id': 1}, CAMPI_MOVIMENTO)
    with pytest.raises(KeyError):
        rinomina({'mese': 'x', 'entrate': 0, 'uscite': 0, 'saldo': 0, 'extra': 1}, CAMPI_BILANCIO)


def test_auth_service():
    auth = AuthService('segreto-è')
    assert auth.authorize('segreto-è') is True
    assert auth.authorize('segreto') is False
    assert auth.authorize(None) is False
    with pytest.raises(Unauthorized):
        auth.require('altro')


def test_auth_service_senza_password_configurata():
    assert AuthService(None).authorize('qualsiasi') is False
    assert AuthService('').authorize('') is False
