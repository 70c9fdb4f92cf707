import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

def configure_logging(level: str = "INFO") -> None:
    """
    Root logger ko ek hi format ke saath set karta hai.
    Safe to call more than once (uvicorn reload, tests).
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
