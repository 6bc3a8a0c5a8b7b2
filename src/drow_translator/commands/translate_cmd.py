import sys

from drow_translator.config import resolve_dictionary
from drow_translator.dictionary import open_dictionary
from drow_translator.engine import Translator
from drow_translator.languages import Direction, Language


def run_translate(args):
    try:
        target = Language.parse(args.lang)
    except ValueError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    text = ' '.join(args.text) if args.text else sys.stdin.read()
    if not text:
        print("Error: nothing to translate.")
        raise SystemExit(1)

    try:
        dictionary_path = resolve_dictionary(args.dictionary)
        with open_dictionary(dictionary_path) as dictionary:
            result = Translator(dictionary).translate(text, Direction.to(target))
    except FileNotFoundError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    print(result)
