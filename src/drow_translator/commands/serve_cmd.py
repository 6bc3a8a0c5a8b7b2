from pathlib import Path

import uvicorn

from drow_translator.config import load_config, dictionary_path, log_dir
from drow_translator.discovery import DEFAULT_GREETING
from drow_translator.logger import setup_loggers, system_logger
from drow_translator.server import create_app


def run_serve(args):
    try:
        config = load_config()
    except FileNotFoundError as e:
        if not args.dictionary:
            print(f"Error: {e}")
            raise SystemExit(1)
        config = None

    if config is not None:
        server = config['server']
        debug = args.debug or config['logging']['debug']
        setup_loggers(str(log_dir(config)), debug)
        db_path = Path(args.dictionary) if args.dictionary else dictionary_path(config)
        host = args.host or server['host']
        port = args.port or server['port']
        greeting = server['greeting']
    else:
        setup_loggers(str(Path.cwd() / 'logs'), args.debug)
        db_path = Path(args.dictionary)
        host = args.host or '127.0.0.1'
        port = args.port or 7071
        greeting = DEFAULT_GREETING

    try:
        app = create_app(db_path, greeting)
    except FileNotFoundError as e:
        system_logger.error(f"[Server] {e}")
        raise SystemExit(1)

    system_logger.info(f"[Server] Serving {db_path} on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)
