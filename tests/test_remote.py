import os
from os.path import exists, isdir, join, realpath

from conftest import write
from jkboot._impl import jk_remote
from jkboot._impl.jk_errors import CloneFailedError, DirectoryNotFoundError
from jkboot._impl.jk_git import GitCloner
from jkboot._impl.jk_remote import LocalPath, SourceRef, classify, giturl_to_foldername


class FakeCloner(GitCloner):
    """Records clones and creates a checkout containing a single marker file."""

    def __init__(self, marker='cloned', fail_with=None):
        self.marker = marker
        self.fail_with = fail_with
        self.clones = []

    def clone(self, url, dest, ref=None):
        self.clones.append((url, ref))
        if self.fail_with is not None:
            raise CloneFailedError(url, self.fail_with)
        os.makedirs(dest)
        with open(join(dest, self.marker), 'w') as f:
            f.write(url)


def test_classify():
    assert classify('https://example.com/org/repo') == SourceRef('https://example.com/org/repo')
    assert classify('ssh://git@example.com/org/repo.git#v2') == SourceRef('ssh://git@example.com/org/repo.git', 'v2')
    assert classify('git://example.com/repo') == SourceRef('git://example.com/repo')
    assert classify('git@github.com:org/repo.git') == SourceRef('git@github.com:org/repo.git')
    assert classify('bob@host.example.com:projects/x#main') == SourceRef('bob@host.example.com:projects/x', 'main')
    assert classify('../sibling') == LocalPath('../sibling')
    assert classify('/abs/path#notaref') == LocalPath('/abs/path#notaref')
    assert classify('http://example.com/repo') == LocalPath('http://example.com/repo')
    assert classify('C:\\work\\project') == LocalPath('C:\\work\\project')


def test_source_ref_parse():
    ref = classify('https://example.com/org/repo#v1')
    assert isinstance(ref, SourceRef)
    assert ref.url == 'https://example.com/org/repo'
    assert ref.ref == 'v1'
    assert ref.folder_name() == 'example.com_org_repo'
    assert SourceRef.parse('https://example.com/org/repo#') == SourceRef('https://example.com/org/repo')
    assert SourceRef.parse('https://example.com/r#a#b') == SourceRef('https://example.com/r', 'a#b')


def test_folder_names_deterministic_and_distinct():
    urls = [
        'https://example.com/org/repo',
        'https://example.com/org/repo.git',
        'https://example.com/org/other',
        'https://github.com/jeka-dev/demo-project-springboot-angular.git',
        'ssh://git@example.org/org/repo',
        'git://example.org/org/repo2',
    ]
    names = [giturl_to_foldername(u) for u in urls]
    assert names == [giturl_to_foldername(u) for u in urls]
    assert len(set(names)) == len(urls)
    # the same repository reached over ssh and https shares its cache entry
    assert giturl_to_foldername('git@github.com:org/demo.git') == giturl_to_foldername('https://github.com/org/demo.git')
    assert giturl_to_foldername('git@github.com:jeka-dev/demo.git') == 'github.com_jeka-dev_demo.git'
    assert giturl_to_foldername('ssh://git@example.org/org/repo') == 'example.org_org_repo'


def test_relative_local_path(tmp_path, jeka_home):
    cwd = tmp_path / 'a' / 'b'
    cwd.mkdir(parents=True)
    try:
        jk_remote.resolve('../sibling', cwd=str(cwd))
    except DirectoryNotFoundError:
        pass
    else:
        assert False, "should have raised DirectoryNotFoundError"

    (tmp_path / 'a' / 'sibling').mkdir()
    assert jk_remote.resolve('../sibling', cwd=str(cwd)) == realpath(str(tmp_path / 'a' / 'sibling'))


def test_absolute_local_path(tmp_path, jeka_home):
    assert jk_remote.resolve(str(tmp_path)) == realpath(str(tmp_path))
    write(tmp_path / 'file.txt')
    try:
        jk_remote.resolve(str(tmp_path / 'file.txt'))
    except DirectoryNotFoundError as e:
        assert e.path == str(tmp_path / 'file.txt')
    else:
        assert False, "should have raised DirectoryNotFoundError"


def test_clone_then_reuse(tmp_path, jeka_home):
    cloner = FakeCloner()
    base = jk_remote.resolve('https://example.com/org/repo#v1', cloner=cloner)
    assert base == join(str(tmp_path / 'cache'), 'git', 'example.com_org_repo')
    assert exists(join(base, 'cloned'))
    assert cloner.clones == [('https://example.com/org/repo', 'v1')]

    # no fetch on reuse, even for another ref of the same repository
    assert jk_remote.resolve('https://example.com/org/repo#v2', cloner=cloner) == base
    assert len(cloner.clones) == 1
    assert os.listdir(join(str(tmp_path / 'cache'), 'git')) == ['example.com_org_repo']


def test_force_clean_reclones(tmp_path, jeka_home):
    base = jk_remote.resolve('https://example.com/org/repo', cloner=FakeCloner(marker='old'))
    assert exists(join(base, 'old'))
    cloner = FakeCloner(marker='new')
    assert jk_remote.resolve('https://example.com/org/repo', force_clean=True, cloner=cloner) == base
    assert cloner.clones == [('https://example.com/org/repo', None)]
    assert os.listdir(base) == ['new']


def test_clone_failure_leaves_no_cache_entry(tmp_path, jeka_home):
    cloner = FakeCloner(fail_with="fatal: repository 'https://example.com/nope/' not found")
    try:
        jk_remote.resolve('https://example.com/nope', cloner=cloner)
    except CloneFailedError as e:
        assert "fatal: repository 'https://example.com/nope/' not found" in str(e)
    else:
        assert False, "should have raised CloneFailedError"
    git_dir = join(str(tmp_path / 'cache'), 'git')
    assert not isdir(join(git_dir, 'example.com_nope'))
    assert os.listdir(git_dir) == []


def test_alias_reference(tmp_path, jeka_home):
    write(jeka_home / 'global.properties', 'jeka.remote.alias.demo=git@github.com:org/demo.git#main\n')
    cloner = FakeCloner()
    base = jk_remote.resolve('@demo', cloner=cloner)
    assert base.endswith('github.com_org_demo.git')
    assert cloner.clones == [('git@github.com:org/demo.git', 'main')]


def test_git_clone_command():
    cloner = GitCloner()
    assert cloner.clone_cmd('https://example.com/r', '/tmp/r') == ['git', 'clone', '--quiet', '--depth', '1', 'https://example.com/r', '/tmp/r']
    assert cloner.clone_cmd('https://example.com/r', '/tmp/r', 'v1')[5:7] == ['--branch', 'v1']
