"""Modello per i movimenti (entrate e uscite)"""
from spese import db

NOTA_MAX_LENGTH = 500


class Movimenti(db.Model):
    """Singolo movimento datato.

    L'importo è sempre positivo: il verso (entrata/uscita) deriva dal tipo
    della categoria collegata e non viene salvato sul movimento.
    """
    __tablename__ = 'movimenti'

    id = db.Column(db.Integer, primary_key=True)
    categoria_id = db.Column(db.Integer, db.ForeignKey('categorie.id'), nullable=False, index=True)
    categoria = db.relationship('Categorie', backref=db.backref('movimenti', lazy=True))
    data = db.Column(db.Date, nullable=False, index=True)
    importo = db.Column(db.Numeric(28, 2), nullable=False)
    nota = db.Column(db.String(NOTA_MAX_LENGTH), nullable=True)

    def __repr__(self):
        return f'<Movimenti {self.data}: {self.importo} (categoria {self.categoria_id})>'
