"""
Servizio per la gestione delle categorie
"""
import logging

from spese.errors import CategoryNotFound
from spese.models.Categorie import Categorie, TIPI_MOVIMENTO
from spese.services import BaseService

logger = logging.getLogger(__name__)


class CategorieService(BaseService):
    """Servizio per la lettura delle categorie.

    Le categorie sono gestite fuori dall'applicazione: l'unica scrittura è il
    caricamento iniziale usato in fase di provisioning.
    """

    def get_all_categories(self):
        """Recupera tutte le categorie ordinate per nome"""
        query = self.session.query(Categorie).order_by(Categorie.nome.asc())
        return self.run_query(query, 'elenco categorie')

    def get_nomi_categorie(self):
        """Nomi delle categorie in ordine alfabetico (per la select di inserimento)"""
        return [c.nome for c in self.get_all_categories()]

    def get_by_nome(self, nome):
        """Recupera la categoria con nome esatto (case-sensitive) o solleva CategoryNotFound"""
        if not nome:
            raise CategoryNotFound()
        query = self.session.query(Categorie).filter(Categorie.nome == nome)
        risultati = self.run_query(query, f'categoria {nome!r}')
        if not risultati:
            raise CategoryNotFound()
        return risultati[0]

    def seed_categorie(self, categorie):
        """Inserisce le categorie (nome, tipo) mancanti; restituisce quante ne ha create"""
        esistenti = set(self.get_nomi_categorie())
        create = 0
        for nome, tipo in categorie:
            if tipo not in TIPI_MOVIMENTO:
                raise ValueError(f"Tipo non valido per la categoria '{nome}': {tipo}")
            if nome in esistenti:
                continue
            self.session.add(Categorie(nome=nome, tipo=tipo))
            esistenti.add(nome)
            create += 1
        if create:
            self.commit()
            logger.info('Create %d categorie predefinite', create)
        return create
