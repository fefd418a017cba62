# alexa_auth.py

import logging

from alexa_response import AlexaResponse

logger = logging.getLogger(__name__)


def handle_accept_grant(directive):
    """
    Beantwortet Alexa.Authorization / AcceptGrant.
    Der Skill nutzt nur den statischen API-Key pro Gerät, daher wird der
    Grant nicht gegen ein Token getauscht. Die Antwort ist immer ein leeres Payload.
    """
    logger.info("AcceptGrant bestätigt")
    return AlexaResponse(namespace="Alexa.Authorization", name="AcceptGrant.Response").get()
