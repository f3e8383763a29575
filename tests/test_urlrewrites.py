import json

from jkboot._impl import jk_urlrewrites
from jkboot._impl.jk_urlrewrites import parse_urlrewrite, rewriteurl, urlrewrites_from_env

MIRROR_RULE = {"https://repo.maven.apache.org/maven2/(.*)": {"replacement": r"https://maven.acme.com/central/\1"}}


def _raise(msg):
    raise ValueError(msg)


def test_rewrite_first_match():
    rules = parse_urlrewrite(MIRROR_RULE, _raise) + \
        parse_urlrewrite({"https://.*": {"replacement": "https://never.example.com/"}}, _raise)
    assert rewriteurl('https://repo.maven.apache.org/maven2/dev/jeka/x.zip', rules) == 'https://maven.acme.com/central/dev/jeka/x.zip'
    assert rewriteurl('https://api.foojay.io/disco', rules) == 'https://never.example.com/'
    assert rewriteurl('file:///tmp/x', rules) == 'file:///tmp/x'


def test_rules_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv('JEKA_URLREWRITES', json.dumps([MIRROR_RULE]))
    assert rewriteurl('https://repo.maven.apache.org/maven2/a') == 'https://maven.acme.com/central/a'

    rules_file = tmp_path / 'rewrites.json'
    rules_file.write_text(json.dumps(MIRROR_RULE))
    monkeypatch.setenv('JEKA_URLREWRITES', str(rules_file))
    assert len(urlrewrites_from_env()) == 1

    monkeypatch.delenv('JEKA_URLREWRITES')
    assert urlrewrites_from_env() == []
    assert jk_urlrewrites.rewriteurl('https://repo.maven.apache.org/maven2/a') == 'https://repo.maven.apache.org/maven2/a'


def test_malformed_rules(monkeypatch):
    for value in ['{"https://x": "not a dict"}', '{"https://x": {}}', '{"(": {"replacement": "y"}}',
                  '{"https://x": {"replacement": "y", "sha1": "z"}}', '[not json']:
        monkeypatch.setenv('JEKA_URLREWRITES', value)
        try:
            urlrewrites_from_env()
        except ValueError as e:
            assert 'JEKA_URLREWRITES' in str(e)
        else:
            assert False, "should have raised ValueError for " + value
