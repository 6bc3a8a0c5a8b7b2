from pathlib import Path

from drow_translator.config import resolve_dictionary
from drow_translator.db import get_entries, init_dictionary_db
from drow_translator.dictionary import open_dictionary
from drow_translator.dictionary_manager import export_tsv, import_rows, read_tsv
from drow_translator.languages import Direction, Language
from drow_translator.tui import import_progress


def run_dictionary(args):
    try:
        db_path = resolve_dictionary(args.dictionary)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    if args.dictionary_command == 'import':
        tsv_path = Path(args.file)
        if not tsv_path.is_file():
            print(f"Error: file not found: {tsv_path}")
            raise SystemExit(1)
        init_dictionary_db(db_path)
        rows = read_tsv(tsv_path)
        with import_progress(len(rows)) as advance:
            count = import_rows(db_path, rows, on_progress=advance)
        print(f"Imported {count} entries from {tsv_path}")
        return

    if not db_path.is_file():
        print(f"Error: dictionary database can't be found at {db_path}")
        raise SystemExit(1)

    if args.dictionary_command == 'export':
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                count = export_tsv(db_path, f)
            print(f"Exported {count} entries to {args.output}")
        else:
            export_tsv(db_path)

    elif args.dictionary_command == 'list':
        entries = get_entries(db_path)
        if not entries:
            print("Dictionary is empty.")
            return
        print(f"Dictionary ({len(entries)} entries):")
        print(f"{'Common':30} {'Drow':30} {'Notes'}")
        print('─' * 80)
        for e in entries:
            print(f"{e['common']:30} {e['drow']:30} {e['notes']}")

    elif args.dictionary_command == 'lookup':
        try:
            source = Language.parse(args.source)
        except ValueError as e:
            print(f"Error: {e}")
            raise SystemExit(1)
        direction = Direction(source, source.other())
        with open_dictionary(db_path) as dictionary:
            entry = dictionary.lookup(args.word.lower(), direction)
        if entry is None:
            print(f"'{args.word}' not found ({direction}).")
            raise SystemExit(1)
        print(entry.translation)
        if entry.notes:
            print(f"  {entry.notes}")
