from pathlib import Path

from drow_translator.discovery import MARKER_FILE, DEFAULT_DICTIONARY_PATH, DEFAULT_GREETING
from drow_translator.db import init_dictionary_db

TOML_TEMPLATE = '''[project]
name = "{name}"

[dictionary]
path = "{dictionary_path}"

[server]
host = "127.0.0.1"
port = 7071
greeting = "{greeting}"

[logging]
debug = false
log_dir = "logs"
'''

def run_init(args):
    project_dir = Path.cwd() / args.name

    if project_dir.exists():
        print(f"Error: directory '{args.name}' already exists.")
        raise SystemExit(1)

    project_dir.mkdir()

    # Write marker file (drow-translator.toml)
    toml_content = TOML_TEMPLATE.format(
        name=args.name,
        dictionary_path=DEFAULT_DICTIONARY_PATH,
        greeting=DEFAULT_GREETING,
    )
    (project_dir / MARKER_FILE).write_text(toml_content, encoding='utf-8')

    # Empty dictionary, ready for `dictionary import`
    init_dictionary_db(project_dir / DEFAULT_DICTIONARY_PATH)

    print(f"✅ Project '{args.name}' created.")
    print(f"""
Layout:
  {args.name}/
  ├── {MARKER_FILE}     ← project settings
  └── {DEFAULT_DICTIONARY_PATH}  ← word list (empty)

Next steps:
  cd {args.name}
  drow-translator dictionary import words.tsv
  drow-translator translate "The dark elf's blade" --lang Drow
""")
