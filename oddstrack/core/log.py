import logging

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=FORMAT)
    # uvicorn access lines duplicate what the routes already log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
