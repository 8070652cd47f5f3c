"""Servizi per i movimenti e i totali mensili."""
