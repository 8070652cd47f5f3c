"""Servizio per la verifica della password condivisa"""
import hmac
import logging

from spese.errors import Unauthorized

logger = logging.getLogger(__name__)


class AuthService:
    """Confronta la password fornita dal client con quella configurata.

    Nessuna sessione o token: il client rimanda la password a ogni richiesta.
    Se la password non è configurata ogni richiesta viene rifiutata.
    """

    def __init__(self, password):
        self._password = password

    def authorize(self, supplied):
        """True se ``supplied`` coincide con la password configurata"""
        if not self._password:
            logger.warning('APP_PASSWORD non configurata: accesso negato')
            return False
        if not supplied:
            return False
        return hmac.compare_digest(str(supplied).encode('utf-8'), self._password.encode('utf-8'))

    def require(self, supplied):
        """Come ``authorize`` ma solleva Unauthorized in caso di rifiuto"""
        if not self.authorize(supplied):
            raise Unauthorized()
