# logger.py

import os, sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    """
    Thin wrapper over a named stdlib logger.

    Handlers live on the shared stdlib logger, so the first enabled Logger
    for a name decides where output goes; later ones with another log_file
    reuse that handler. Enabled loggers do not propagate to the root logger.
    """
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self.enabled = logging_enabled
        if logging_enabled and not self._has_output_handler():
            if log_file == "-":
                handler = logging.StreamHandler(sys.stdout)
            else:
                if log_file is None:
                    project_root = os.path.dirname(os.path.dirname(__file__))
                    os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                    log_file = os.path.join(project_root, 'logs', 'dotanim_debug.log')
                handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)
            self._logger.propagate = False
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _has_output_handler(self) -> bool:
        return any(not isinstance(h, logging.NullHandler) for h in self._logger.handlers)

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
