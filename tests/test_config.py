from conftest import write
from jkboot._impl import jk_config


def test_global_value_seen_from_any_descendant(tmp_path, jeka_home):
    write(jeka_home / 'global.properties', 'jeka.version=0.11.0\n')
    for base in (tmp_path / 'p', tmp_path / 'p' / 'a' / 'b'):
        base.mkdir(parents=True, exist_ok=True)
        assert jk_config.resolve(str(base), 'jeka.version') == '0.11.0'


def test_nearest_local_value_wins(tmp_path, jeka_home):
    write(jeka_home / 'global.properties', 'jeka.java.version=11\n')
    write(tmp_path / 'root' / 'jeka.properties', 'jeka.java.version=17\njeka.java.distrib=zulu\n')
    write(tmp_path / 'root' / 'sub' / 'jeka.properties', 'jeka.java.version=21\n')
    base = str(tmp_path / 'root' / 'sub')
    assert jk_config.resolve(base, 'jeka.java.version') == '21'
    assert jk_config.resolve(base, 'jeka.java.distrib') == 'zulu'
    assert jk_config.resolve(str(tmp_path / 'root'), 'jeka.java.version') == '17'


def test_environment_wins(tmp_path, jeka_home, monkeypatch):
    write(jeka_home / 'global.properties', 'jeka.java.version=11\n')
    write(tmp_path / 'p' / 'jeka.properties', 'jeka.java.version=17\n')
    base = str(tmp_path / 'p')
    monkeypatch.setenv('JEKA_JAVA_VERSION', '21')
    assert jk_config.resolve(base, 'jeka.java.version') == '21'
    monkeypatch.setenv('jeka.java.version', '22')
    assert jk_config.resolve(base, 'jeka.java.version') == '22'


def test_empty_value_is_absent(tmp_path, jeka_home, monkeypatch):
    write(jeka_home / 'global.properties', 'jeka.version=0.11.0\n')
    write(tmp_path / 'root' / 'jeka.properties', 'jeka.version=0.10.0\n')
    write(tmp_path / 'root' / 'sub' / 'jeka.properties', 'jeka.version=\n')
    monkeypatch.setenv('JEKA_VERSION', '')
    assert jk_config.resolve(str(tmp_path / 'root' / 'sub'), 'jeka.version') == '0.10.0'


def test_walk_stops_at_directory_without_config(tmp_path, jeka_home):
    write(jeka_home / 'global.properties', 'jeka.version=global\n')
    write(tmp_path / 'a' / 'jeka.properties', 'jeka.version=a\n')
    write(tmp_path / 'a' / 'b' / 'c' / 'jeka.properties', 'other=1\n')
    base = str(tmp_path / 'a' / 'b' / 'c')
    assert jk_config.local_config_dirs(base) == [base]
    assert jk_config.resolve(base, 'jeka.version') == 'global'


def test_parent_consulted_when_base_has_no_config(tmp_path, jeka_home):
    write(tmp_path / 'a' / 'jeka.properties', 'jeka.version=a\n')
    (tmp_path / 'a' / 'b').mkdir()
    base = str(tmp_path / 'a' / 'b')
    assert jk_config.local_config_dirs(base) == [base, str(tmp_path / 'a')]
    assert jk_config.resolve(base, 'jeka.version') == 'a'


def test_absent_everywhere(tmp_path, jeka_home):
    assert jk_config.resolve(str(tmp_path), 'jeka.version') is None


def test_chain_order(tmp_path, jeka_home):
    write(tmp_path / 'a' / 'jeka.properties')
    base = tmp_path / 'a' / 'b'
    base.mkdir()
    chain = jk_config.config_chain(str(base), environ={})
    assert [str(s) for s in chain.sources] == [
        'environment',
        str(base / 'jeka.properties'),
        str(tmp_path / 'a' / 'jeka.properties'),
        str(jeka_home / 'global.properties'),
    ]


def test_environment_source():
    source = jk_config.EnvironmentSource({'JEKA_JDK_17': '/opt/jdk17', 'jeka.version': ''})
    assert source.lookup('jeka.jdk.17') == '/opt/jdk17'
    assert source.lookup('jeka.version') is None


def test_blank_value_is_skipped(tmp_path, jeka_home, monkeypatch):
    write(jeka_home / 'global.properties', 'jeka.version=0.11.1\n')
    write(tmp_path / 'root' / 'jeka.properties', 'jeka.java.version=17\n')
    write(tmp_path / 'root' / 'sub' / 'jeka.properties', 'jeka.version=   \njeka.java.version=\t\n')
    base = str(tmp_path / 'root' / 'sub')
    assert jk_config.resolve(base, 'jeka.version') == '0.11.1'
    assert jk_config.resolve(base, 'jeka.java.version') == '17'
    monkeypatch.setenv('JEKA_JAVA_VERSION', '  ')
    assert jk_config.resolve(base, 'jeka.java.version') == '17'
