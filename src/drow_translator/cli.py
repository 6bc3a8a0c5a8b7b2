import argparse

from drow_translator.languages import Language

LANGUAGE_CHOICES = [language.value for language in Language]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='drow-translator',
        description='Translate text between Common and Drow using a word dictionary'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    # --- init ---
    init_parser = subparsers.add_parser('init', help='Create a new translator project')
    init_parser.add_argument('name', type=str, help='Project directory name')

    # --- translate ---
    tr_parser = subparsers.add_parser('translate', help='Translate text')
    tr_parser.add_argument('text', nargs='*', help='Text to translate (default: read stdin)')
    tr_parser.add_argument('--lang', required=True, help='Target language (Drow or Common)')
    tr_parser.add_argument('--dictionary', type=str, help='Path to the dictionary database')

    # --- dictionary ---
    dict_parser = subparsers.add_parser('dictionary', help='Manage the dictionary')
    dict_parser.add_argument('--dictionary', type=str, help='Path to the dictionary database')
    dict_sub = dict_parser.add_subparsers(dest='dictionary_command', required=True)

    export_p = dict_sub.add_parser('export', help='Export the dictionary to TSV')
    export_p.add_argument('--output', '-o', type=str, help='Output file (default: stdout)')

    import_p = dict_sub.add_parser('import', help='Import word pairs from TSV')
    import_p.add_argument('file', type=str, help='Path to the TSV file')

    dict_sub.add_parser('list', help='Show all entries')

    lookup_p = dict_sub.add_parser('lookup', help='Look up a single word')
    lookup_p.add_argument('word', type=str, help='Word or phrase to look up')
    lookup_p.add_argument('--from', dest='source', default='Common', choices=LANGUAGE_CHOICES,
                          help='Language of the word (default: Common)')

    # --- serve ---
    serve_parser = subparsers.add_parser('serve', help='Run the HTTP translation service')
    serve_parser.add_argument('--host', type=str, help='Bind address (default: from config)')
    serve_parser.add_argument('--port', type=int, help='Port (default: from config)')
    serve_parser.add_argument('--dictionary', type=str, help='Path to the dictionary database')
    serve_parser.add_argument('--debug', action='store_true', help='Write request logs to the log directory')

    # --- status ---
    subparsers.add_parser('status', help='Show project status')

    return parser

def main():
    parser = build_parser()
    args = parser.parse_args()

    if args.command == 'init':
        from drow_translator.commands.init_cmd import run_init
        run_init(args)
    elif args.command == 'translate':
        from drow_translator.commands.translate_cmd import run_translate
        run_translate(args)
    elif args.command == 'dictionary':
        from drow_translator.commands.dictionary_cmd import run_dictionary
        run_dictionary(args)
    elif args.command == 'serve':
        from drow_translator.commands.serve_cmd import run_serve
        run_serve(args)
    elif args.command == 'status':
        from drow_translator.commands.status_cmd import run_status
        run_status(args)
