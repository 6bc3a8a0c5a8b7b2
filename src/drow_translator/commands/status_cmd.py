from drow_translator.config import load_config, dictionary_path
from drow_translator.db import get_entry_count


def run_status(args):
    config = load_config()
    db_path = dictionary_path(config)

    print(f"📚 Project: {config['project']['name']}")
    print(f"   Root: {config['project']['root']}")
    print(f"   Server: http://{config['server']['host']}:{config['server']['port']}")
    print(f"   Dictionary: {db_path}")

    if db_path.is_file():
        print(f"   Entries: {get_entry_count(db_path)}")
    else:
        print("   Entries: n/a (database missing)")
