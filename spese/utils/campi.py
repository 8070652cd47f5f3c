"""Mappatura fissa tra attributi interni e chiavi esposte dall'API.

Le chiavi maiuscole sono quelle che il client si aspetta; la serializzazione
passa sempre da queste tabelle invece di rinominare le colonne query per query.
"""

CAMPI_MOVIMENTO = {
    'id': 'ID_MOVIMENTO',
    'importo': 'IMPORTO',
    'nota': 'NOTA',
    'data': 'DATA_MOVIMENTO',
    'categoria': 'DESCRIZIONE',
}

CAMPI_BILANCIO = {
    'mese': 'MESE_ANNO',
    'entrate': 'TOTALE_ENTRATE',
    'uscite': 'TOTALE_USCITE',
    'saldo': 'SALDO',
}


def rinomina(valori, mappa):
    """Applica la mappatura a un dizionario di valori interni.

    Solleva KeyError se manca un campo o ne arriva uno non mappato, così
    un attributo nuovo non può sfuggire alla tabella.
    """
    if set(valori) != set(mappa):
        mancanti = set(mappa) ^ set(valori)
        raise KeyError(f'Campi non mappati: {sorted(mancanti)}')
    return {mappa[k]: v for k, v in valori.items()}
