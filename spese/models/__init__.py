"""
Modelli del database

Import espliciti per registrare le tabelle quando l'app esegue ``db.create_all()``.
"""
from spese.models.Categorie import Categorie  # noqa: F401
from spese.models.Movimenti import Movimenti  # noqa: F401
