"""Modello per le categorie dei movimenti"""
from spese import db

TIPO_ENTRATA = 'entrata'
TIPO_USCITA = 'uscita'
TIPI_MOVIMENTO = (TIPO_ENTRATA, TIPO_USCITA)


class Categorie(db.Model):
    """Categoria con tipo fisso: 'entrata' o 'uscita'"""
    __tablename__ = 'categorie'

    id = db.Column(db.Integer, primary_key=True)
    nome = db.Column(db.String(100), nullable=False, unique=True)
    tipo = db.Column(db.String(20), nullable=False)  # 'entrata' o 'uscita'

    @property
    def tipo_label(self):
        """Etichetta usata nei report ('Entrata' / 'Uscita')"""
        return tipo_label(self.tipo)

    def __repr__(self):
        return f'<Categorie {self.nome} ({self.tipo})>'


def tipo_label(tipo):
    return 'Entrata' if tipo == TIPO_ENTRATA else 'Uscita'
