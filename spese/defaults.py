"""
Valori di contenuto separati dalla configurazione operativa.

Questo modulo contiene i dati usati dall'app (categorie di partenza, pannelli
dell'interfaccia, palette del grafico) che non vanno mescolati con le
impostazioni del runtime (DB, password, URL dei servizi, ecc.).
"""

# Categorie predefinite (nome, tipo). Vengono caricate solo dal provisioning
# (INIT_DB=1 o scripts/seed_categorie.py): l'app non modifica le categorie.
CATEGORIE_DEFAULT = [
    # Entrate
    ('Stipendio', 'entrata'),
    ('Entrate Extra', 'entrata'),

    # Uscite
    ('Negozi Vari', 'uscita'),
    ('Ricariche CCR', 'uscita'),
    ('Divertimento', 'uscita'),
    ('Macchina', 'uscita'),
    ('Fisse', 'uscita'),
    ('Extra', 'uscita'),
    ('Utenze', 'uscita'),
    ('Visite/Esami medici', 'uscita'),
]

# Pannelli dell'interfaccia: dashboard, lista entrate e una lista per categoria
PANNELLI = [
    {'id': 'dashboard', 'label': 'Bilancio'},
    {'id': 'entrate', 'label': 'Entrate', 'tipo': 'ENTRATE'},
    {'id': 'negozi', 'label': 'Negozi Vari', 'tipo': 'CATEGORIA', 'categoria': 'Negozi Vari'},
    {'id': 'ccr', 'label': 'Ricariche CCR', 'tipo': 'CATEGORIA', 'categoria': 'Ricariche CCR'},
    {'id': 'divertimento', 'label': 'Divertimento', 'tipo': 'CATEGORIA', 'categoria': 'Divertimento'},
    {'id': 'macchina', 'label': 'Macchina', 'tipo': 'CATEGORIA', 'categoria': 'Macchina'},
    {'id': 'fisse', 'label': 'Fisse', 'tipo': 'CATEGORIA', 'categoria': 'Fisse'},
    {'id': 'extra', 'label': 'Extra', 'tipo': 'CATEGORIA', 'categoria': 'Extra'},
    {'id': 'utenze', 'label': 'Utenze', 'tipo': 'CATEGORIA', 'categoria': 'Utenze'},
    {'id': 'medici', 'label': 'Visite/Esami medici', 'tipo': 'CATEGORIA', 'categoria': 'Visite/Esami medici'},
]

MESI_ITALIANI = [
    'Gennaio', 'Febbraio', 'Marzo', 'Aprile', 'Maggio', 'Giugno',
    'Luglio', 'Agosto', 'Settembre', 'Ottobre', 'Novembre', 'Dicembre'
]

# Palette del grafico: il colore i-esimo va alla categoria i-esima (ciclico)
PALETTE_GRAFICO = [
    '#2563eb',  # blu
    '#dc2626',  # rosso
    '#16a34a',  # verde
    '#d97706',  # ambra
    '#7c3aed',  # viola
    '#0891b2',  # ciano
    '#db2777',  # rosa
    '#65a30d',  # lime
    '#475569',  # ardesia
    '#ea580c',  # arancio
]
