#!/usr/bin/env python3
"""Carica nel database le categorie predefinite mancanti.

Uso: eseguire nello stesso ambiente dell'app Flask (usa create_app()).
Le categorie già presenti (stesso nome) non vengono toccate.
"""
import argparse

from spese import create_app


def main(argv=None):
    parser = argparse.ArgumentParser(description='Carica le categorie predefinite (nome, tipo)')
    parser.add_argument('--config', default='default', help='Nome della configurazione (default: default)')
    args = parser.parse_args(argv)

    app = create_app(args.config)
    with app.app_context():
        from spese.defaults import CATEGORIE_DEFAULT
        from spese.services.categorie.categorie_service import CategorieService

        svc = CategorieService()
        create = svc.seed_categorie(CATEGORIE_DEFAULT)
        print(f'Categorie create: {create}')
        for categoria in svc.get_all_categories():
            print(f' - {categoria.nome} ({categoria.tipo})')


if __name__ == '__main__':
    main()
