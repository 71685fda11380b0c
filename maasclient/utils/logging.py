import logging

logger = logging.getLogger("maasclient")
