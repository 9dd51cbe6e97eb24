"""Logging helper."""
import logging
from typing import Union


def get_logger(name: str = "morphcli", level: Union[int, str] = logging.WARNING):
	logger = logging.getLogger(name)
	if not logger.handlers:
		ch = logging.StreamHandler()
		ch.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
		logger.addHandler(ch)
	logger.setLevel(level)
	return logger
