#!/usr/bin/env python3
"""Stampa bilancio e uscite per categoria di uno o più mesi.

Uso:
  python scripts/check_month.py 2026-02
  python scripts/check_month.py 2026-01 2026-02 --dettaglio
"""
import argparse
from datetime import date

from spese import create_app
from spese.errors import NoDataForPeriod
from spese.utils.formatting import format_currency


def main(argv=None):
    parser = argparse.ArgumentParser(description='Controllo dei totali mensili')
    parser.add_argument('mesi', nargs='*', help='Mesi YYYY-MM (default: mese corrente)')
    parser.add_argument('--dettaglio', action='store_true', help='Stampa anche le righe del report di dettaglio')
    args = parser.parse_args(argv)

    mesi = args.mesi or [date.today().strftime('%Y-%m')]

    app = create_app()
    with app.app_context():
        from spese.services.movimenti.movimenti_service import MovimentiService
        from spese.services.report.report_service import ReportService

        svc = MovimentiService()
        report = ReportService()
        for mese in mesi:
            b = svc.calcola_bilancio(mese)
            print(f"== {mese}")
            print(f"  Entrate: {format_currency(b['entrate'])}")
            print(f"  Uscite:  {format_currency(b['uscite'])}")
            print(f"  Saldo:   {format_currency(b['saldo'])}")
            for s in svc.get_statistiche_per_categoria(mese):
                print(f"    {s['categoria']:<25} {format_currency(s['totale'])}")
            if args.dettaglio:
                try:
                    righe = report.dettaglio(mese)['data']
                except NoDataForPeriod:
                    righe = []
                for riga in righe:
                    print('    ' + ' | '.join(str(v) for v in riga))


if __name__ == '__main__':
    main()
