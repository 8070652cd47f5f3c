"""Controllo della password condivisa."""
