from conftest import write
from jkboot._impl import jk_config
from jkboot._impl.support.options import _opts, default_options


def test_default_options(monkeypatch):
    monkeypatch.delenv('JEKA_BOOT_VERBOSE', raising=False)
    opts = default_options()
    assert not opts.verbose
    assert not opts.very_verbose
    assert not opts.quiet
    assert opts.warn
    assert not opts.print_only
    monkeypatch.setenv('JEKA_BOOT_VERBOSE', 'true')
    assert default_options().verbose


def test_library_use_logs_immediately(tmp_path, jeka_home, capsys):
    vars(_opts).clear()
    vars(_opts).update(vars(default_options()))
    _opts.very_verbose = True
    write(tmp_path / 'jeka.properties', 'jeka.version=1\n')
    for _ in range(100):
        assert jk_config.resolve(str(tmp_path), 'jeka.version') == '1'
    assert capsys.readouterr().err.count('Property jeka.version=1 found in') == 100

    _opts.very_verbose = False
    for _ in range(100):
        jk_config.resolve(str(tmp_path), 'jeka.version')
    assert capsys.readouterr().err == ''
