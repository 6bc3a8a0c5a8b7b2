import logging
import sys
import os
import json
from datetime import datetime
from rich.logging import RichHandler
from drow_translator.tui import console

class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage()
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False)

system_logger = logging.getLogger('system')
input_logger = logging.getLogger('request_input')
output_logger = logging.getLogger('request_output')

default_handler = logging.StreamHandler(sys.stdout)
default_handler.setFormatter(JsonFormatter())
system_logger.addHandler(default_handler)
system_logger.setLevel(logging.INFO)
system_logger.propagate = False

for logger_instance in [input_logger, output_logger]:
    logger_instance.addHandler(logging.NullHandler())
    logger_instance.propagate = False

def _file_handler(log_dir: str, filename: str) -> logging.FileHandler:
    handler = logging.FileHandler(os.path.join(log_dir, filename), mode='a', encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(JsonFormatter())
    return handler

def setup_loggers(log_dir: str, debug_mode: bool):
    """Route system logs to the rich console; in debug mode also write JSON
    log files, including the raw text of every request and its translation.
    """
    for logger_instance in [system_logger, input_logger, output_logger]:
        if logger_instance.hasHandlers():
            logger_instance.handlers.clear()

    system_logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)
    input_logger.setLevel(logging.DEBUG)
    output_logger.setLevel(logging.DEBUG)

    console_handler = RichHandler(console=console, rich_tracebacks=True, markup=False)
    console_handler.setLevel(logging.INFO)
    system_logger.addHandler(console_handler)

    if not debug_mode:
        input_logger.addHandler(logging.NullHandler())
        output_logger.addHandler(logging.NullHandler())
        return

    os.makedirs(log_dir, exist_ok=True)

    system_logger.addHandler(_file_handler(log_dir, 'system_output.log'))
    input_logger.addHandler(_file_handler(log_dir, 'requests_input.log'))
    output_logger.addHandler(_file_handler(log_dir, 'requests_output.log'))

    system_logger.debug("Loggers configured in debug mode.")
