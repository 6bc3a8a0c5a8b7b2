"""
HTTP front end for the translator.

Routes:
- GET|POST /api/Translate?text=...&lang=Drow|Common[&ver=1]

`lang` names the target language; the source is the other one. Parameters
missing from the query string are read from a URL-encoded request body.
Each request opens its own read-only dictionary connection inside a worker
thread, so requests share no mutable state.
"""
from pathlib import Path
from typing import Dict, List, Optional
from urllib.parse import parse_qs

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route

from drow_translator.dictionary import open_dictionary
from drow_translator.discovery import DEFAULT_GREETING
from drow_translator.engine import Translator
from drow_translator.languages import Direction, Language
from drow_translator.logger import system_logger, input_logger, output_logger

TRANSLATE_ROUTE = '/api/Translate'
MISSING_PARAMS_MESSAGE = "Please provide 'text' and 'lang' parameters."


def _first(form: Dict[str, List[str]], key: str) -> Optional[str]:
    values = form.get(key)
    return values[0] if values else None


def create_app(dictionary_path: Path, greeting: str = DEFAULT_GREETING) -> Starlette:
    """Build the Starlette app serving translations from `dictionary_path`.

    Raises FileNotFoundError when the dictionary does not exist, so a
    misconfigured service fails at startup rather than on every request.
    """
    dictionary_path = Path(dictionary_path)
    if not dictionary_path.is_file():
        raise FileNotFoundError(f"Dictionary database can't be found at {dictionary_path}")

    def run_translation(text: str, direction: Direction) -> str:
        with open_dictionary(dictionary_path) as dictionary:
            return Translator(dictionary).translate(text, direction)

    async def translate_endpoint(request: Request) -> Response:
        system_logger.info("Processing request.")
        text = request.query_params.get('text')
        lang = request.query_params.get('lang')
        ver = request.query_params.get('ver')

        if not text or not lang:
            body = (await request.body()).decode('utf-8', errors='replace')
            if body:
                form = parse_qs(body, keep_blank_values=True)
                text = text or _first(form, 'text')
                lang = lang or _first(form, 'lang')

        if ver:
            return PlainTextResponse(greeting)

        if not text or not lang:
            return PlainTextResponse(MISSING_PARAMS_MESSAGE, status_code=400)

        try:
            target = Language.parse(lang)
        except ValueError as e:
            system_logger.warning(f"[Server] Rejected request: {e}")
            return PlainTextResponse(str(e), status_code=400)

        direction = Direction.to(target)
        input_logger.debug(f"[{direction}] {text}")
        result = await run_in_threadpool(run_translation, text, direction)
        output_logger.debug(f"[{direction}] {result}")
        return PlainTextResponse(result)

    app = Starlette(routes=[
        Route(TRANSLATE_ROUTE, translate_endpoint, methods=['GET', 'POST']),
    ])
    app.state.dictionary_path = dictionary_path
    return app
