import pytest
from pathlib import Path
from drow_translator.discovery import find_project_root, load_project_config, MARKER_FILE, DEFAULT_GREETING
from drow_translator.config import load_config, dictionary_path, log_dir, resolve_dictionary


def make_toml(path: Path, content: str = '[project]\nname = "Test"'):
    """Helper: write a drow-translator.toml at path."""
    (path / MARKER_FILE).write_text(content, encoding='utf-8')


class TestFindProjectRoot:
    def test_finds_from_root(self, tmp_path):
        make_toml(tmp_path)
        assert find_project_root(tmp_path) == tmp_path.resolve()

    def test_finds_from_depth_2(self, tmp_path):
        make_toml(tmp_path)
        subdir = tmp_path / "Data" / "backups"
        subdir.mkdir(parents=True)
        assert find_project_root(subdir) == tmp_path.resolve()

    def test_raises_when_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="drow-translator.toml not found"):
            find_project_root(tmp_path)

    def test_raises_contains_init_hint(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="drow-translator init"):
            find_project_root(tmp_path)

    def test_nearest_marker_wins(self, tmp_path):
        make_toml(tmp_path, '[project]\nname = "Outer"')
        inner = tmp_path / "inner"
        inner.mkdir()
        make_toml(inner, '[project]\nname = "Inner"')
        assert find_project_root(inner) == inner.resolve()


class TestLoadProjectConfig:
    def test_empty_file_gets_all_defaults(self, tmp_path):
        make_toml(tmp_path, '')
        cfg = load_project_config(tmp_path)
        assert cfg['project']['name'] == tmp_path.name
        assert cfg['dictionary']['path'] == 'Data/drow_dictionary.db'
        assert cfg['server'] == {'host': '127.0.0.1', 'port': 7071, 'greeting': DEFAULT_GREETING}
        assert cfg['logging'] == {'debug': False, 'log_dir': 'logs'}

    def test_user_overrides(self, tmp_path):
        make_toml(tmp_path, '[server]\nport = 8080\n[dictionary]\npath = "/srv/words.db"')
        cfg = load_project_config(tmp_path)
        assert cfg['server']['port'] == 8080
        assert cfg['server']['host'] == '127.0.0.1'
        assert cfg['dictionary']['path'] == '/srv/words.db'

    def test_raises_on_non_table_section(self, tmp_path):
        make_toml(tmp_path, 'server = "localhost"')
        with pytest.raises(ValueError, match=r"\[server\]"):
            load_project_config(tmp_path)

    def test_raises_missing_toml_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_project_config(tmp_path)


class TestConfig:
    def test_load_config_records_root(self, tmp_path, monkeypatch):
        make_toml(tmp_path)
        monkeypatch.chdir(tmp_path)
        cfg = load_config()
        assert cfg['project']['root'] == tmp_path.resolve()

    def test_relative_paths_resolved_against_root(self, tmp_path):
        make_toml(tmp_path)
        cfg = load_config(tmp_path)
        assert dictionary_path(cfg) == tmp_path / 'Data' / 'drow_dictionary.db'
        assert log_dir(cfg) == tmp_path / 'logs'

    def test_absolute_dictionary_path_kept(self, tmp_path):
        target = tmp_path / 'elsewhere.db'
        make_toml(tmp_path, f'[dictionary]\npath = "{target.as_posix()}"')
        cfg = load_config(tmp_path)
        assert dictionary_path(cfg) == target

    def test_resolve_dictionary_prefers_override(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_dictionary('words.db') == Path('words.db')

    def test_resolve_dictionary_without_project_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(FileNotFoundError):
            resolve_dictionary(None)
