"""Entry point per l'applicazione.

Questo script avvia l'app Flask e può caricare le categorie predefinite se
la variabile d'ambiente `INIT_DB` è impostata (es. INIT_DB=1).
"""

import logging
import os

from spese import create_app


def init_database():
    """Carica le categorie predefinite mancanti.
    Viene eseguita solo quando INIT_DB=1: in produzione le categorie sono
    gestite fuori dall'applicazione.
    """
    from spese.defaults import CATEGORIE_DEFAULT
    from spese.services.categorie.categorie_service import CategorieService

    create = CategorieService().seed_categorie(CATEGORIE_DEFAULT)
    logging.getLogger(__name__).info('Provisioning completato: %d nuove categorie', create)


def main():
    logging.basicConfig(
        level=os.environ.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app = create_app(os.environ.get('SPESE_CONFIG', 'default'))

    if os.environ.get('INIT_DB') == '1':
        with app.app_context():
            init_database()

    app.run(host=app.config.get('HOST', '0.0.0.0'), port=app.config.get('PORT', 5000),
            debug=os.environ.get('FLASK_DEBUG') == '1')


if __name__ == '__main__':
    main()
