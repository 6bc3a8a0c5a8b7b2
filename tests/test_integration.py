"""Integration tests: verify all pieces work together end-to-end."""
from argparse import Namespace

from starlette.testclient import TestClient


def test_init_import_translate_flow(tmp_path, monkeypatch, capsys):
    """Test: init → import word list → translate → status."""
    from drow_translator.commands.init_cmd import run_init
    from drow_translator.commands.dictionary_cmd import run_dictionary
    from drow_translator.commands.translate_cmd import run_translate
    from drow_translator.commands.status_cmd import run_status

    monkeypatch.chdir(tmp_path)
    run_init(Namespace(name='Menzo'))

    monkeypatch.chdir(tmp_path / 'Menzo')
    tsv = tmp_path / 'words.tsv'
    tsv.write_text('drow\tdark elf\njal\telf\nfel\tcat\n', encoding='utf-8')
    run_dictionary(Namespace(dictionary=None, dictionary_command='import', file=str(tsv)))
    capsys.readouterr()

    run_translate(Namespace(text=["The", "Dark", "Elf's", "cats"], lang='Drow', dictionary=None))
    assert capsys.readouterr().out == "The Dark Jal's felen\n"

    run_status(Namespace())
    assert 'Entries: 3' in capsys.readouterr().out


def test_walk_up_from_subdirectory(tmp_path, monkeypatch):
    """Test: project discovery works from a nested directory."""
    from drow_translator.commands.init_cmd import run_init
    from drow_translator.discovery import find_project_root

    monkeypatch.chdir(tmp_path)
    run_init(Namespace(name='Menzo'))
    monkeypatch.chdir(tmp_path / 'Menzo' / 'Data')
    assert find_project_root() == (tmp_path / 'Menzo').resolve()


def test_server_uses_project_dictionary(tmp_path, monkeypatch):
    from drow_translator.commands.init_cmd import run_init
    from drow_translator.config import load_config, dictionary_path
    from drow_translator.db import add_entry
    from drow_translator.server import create_app, TRANSLATE_ROUTE

    monkeypatch.chdir(tmp_path)
    run_init(Namespace(name='Menzo'))
    config = load_config(tmp_path / 'Menzo')
    add_entry(dictionary_path(config), 'ilharess', 'matron mother')

    client = TestClient(create_app(dictionary_path(config), config['server']['greeting']))
    response = client.get(TRANSLATE_ROUTE, params={'text': 'Matron Mother', 'lang': 'Drow'})
    assert response.text == 'Ilharess'
