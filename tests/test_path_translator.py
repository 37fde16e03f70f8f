#!/usr/bin/env python3
"""
Test ForwardPathTranslator and ReversePathTranslator

FORWARD: C:\\path → {mount_root}c/path (arguments, key=value arguments)
REVERSE: {mount_root}c/path → c:/path (captured output, bytes)

Every case runs for the default root, a custom root and '/'.
"""
import pytest

from wslgit.argument_classifier import ArgumentClassifier
from wslgit.exceptions import PathTranslationError
from wslgit.path_translator import ForwardPathTranslator, ReversePathTranslator

MOUNT_ROOTS = ['/mnt/', '/abc/', '/']


def never_exists(_candidate):
    return False


@pytest.fixture
def forward():
    return ForwardPathTranslator('/mnt/', classifier=ArgumentClassifier(exists=never_exists))


# ============================================================================
# FORWARD: Windows → WSL
# ============================================================================

@pytest.mark.parametrize("root", MOUNT_ROOTS)
def test_win_to_unix_path(root):
    translator = ForwardPathTranslator(root, classifier=ArgumentClassifier(exists=never_exists))
    assert translator.translate_argument('d:\\test\\file.txt') == f'{root}d/test/file.txt'
    assert translator.translate_argument('C:\\Users\\test\\a space.txt') == f'{root}c/Users/test/a space.txt'


def test_mount_root_without_trailing_slash():
    translator = ForwardPathTranslator('/abc')
    assert translator.to_unix('d:\\a\\b') == '/abc/d/a/b'


def test_forward_slashes_and_mixed_separators(forward):
    assert forward.to_unix('C:/Users/test/file.txt') == '/mnt/c/Users/test/file.txt'
    assert forward.to_unix('C:\\Users/test\\file.txt') == '/mnt/c/Users/test/file.txt'


def test_no_double_separators(forward):
    assert forward.to_unix('C:\\Users\\\\test\\') == '/mnt/c/Users/test'


def test_drive_root_has_no_trailing_slash(forward):
    assert forward.to_unix('C:\\') == '/mnt/c'
    assert forward.to_unix('E:/') == '/mnt/e'


def test_drive_letter_is_lowercased(forward):
    assert forward.to_unix('Z:\\Data') == '/mnt/z/Data'


def test_verbatim_disk_path(forward):
    assert forward.to_unix('\\\\?\\C:\\repo\\file.txt') == '/mnt/c/repo/file.txt'


def test_unc_path_is_fatal(forward):
    with pytest.raises(PathTranslationError):
        forward.translate_argument('\\\\server\\share\\repo')


def test_unrepresentable_component_is_fatal(forward):
    with pytest.raises(PathTranslationError) as excinfo:
        forward.to_unix('C:\\repo\\bad\udcffname.txt')
    assert excinfo.value.path == 'C:\\repo\\bad\udcffname.txt'


# ============================================================================
# FORWARD: key=value arguments
# ============================================================================

@pytest.mark.parametrize("root", MOUNT_ROOTS)
def test_arguments_path_translation(root):
    translator = ForwardPathTranslator(root, classifier=ArgumentClassifier(exists=never_exists))
    assert translator.translate_argument('--file=C:\\some\\path.txt') == f'--file={root}c/some/path.txt'
    assert translator.translate_argument('-c core.editor=C:\\some\\editor.exe') == \
        f'-c core.editor={root}c/some/editor.exe'


def test_value_split_at_first_equals_only(forward):
    assert forward.translate_argument('--a=b=c') == '--a=b=c'


def test_non_path_value_is_unchanged(forward):
    assert forward.translate_argument('--pretty=format:%H') == '--pretty=format:%H'
    assert forward.translate_argument('status') == 'status'


# ============================================================================
# FORWARD: relative paths
# ============================================================================

@pytest.mark.parametrize("root", MOUNT_ROOTS)
def test_missing_relative_path_is_unchanged(root, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    translator = ForwardPathTranslator(root)
    assert translator.translate_argument('.\\src\\main.rs') == '.\\src\\main.rs'


def test_existing_relative_path_is_translated():
    translator = ForwardPathTranslator('/mnt/', classifier=ArgumentClassifier(exists=lambda _: True))
    assert translator.translate_argument('.\\src\\main.rs') == './src/main.rs'
    assert translator.translate_argument('src\\main.rs') == 'src/main.rs'


def test_existing_relative_directory_on_disk(tmp_path, monkeypatch):
    (tmp_path / 'a' / 'b').mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    translator = ForwardPathTranslator('/mnt/')
    assert translator.translate_argument('a//b/') == 'a/b'
    assert translator.translate_argument('./a/b/') == './a/b'
    assert translator.translate_argument('--work-tree=a/b/') == '--work-tree=a/b'


def test_missing_relative_directory_keeps_trailing_separator(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    translator = ForwardPathTranslator('/mnt/')
    assert translator.translate_argument('a//b/') == 'a//b/'


@pytest.mark.parametrize("argument", ['.', './'])
def test_current_directory_is_kept(argument, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    translator = ForwardPathTranslator('/mnt/')
    assert translator.translate_argument(argument) == '.'
    assert translator.to_unix('.\\') == '.'


def test_current_directory_in_key_value_argument(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    translator = ForwardPathTranslator('/mnt/')
    assert translator.to_unix('.') == '.'
    assert translator.translate_argument('--work-tree=.') == '--work-tree=.'


def test_existence_check_uses_given_directory(tmp_path, monkeypatch):
    (tmp_path / 'repo' / 'docs').mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    classifier = ArgumentClassifier(cwd=str(tmp_path / 'repo'))
    translator = ForwardPathTranslator('/mnt/', classifier=classifier)
    assert translator.translate_argument('docs/') == 'docs'
    assert translator.translate_argument('repo/') == 'repo/'


# ============================================================================
# REVERSE: WSL → Windows
# ============================================================================

@pytest.mark.parametrize("root", MOUNT_ROOTS)
def test_unix_to_win_path(root):
    translator = ReversePathTranslator(root)
    r = root.encode()
    assert translator.to_windows(r + b'd/some path/a file.md') == b'd:/some path/a file.md'
    assert translator.to_windows(b'origin  ' + r + b'c/path/ (fetch)') == b'origin  c:/path/ (fetch)'
    assert translator.to_windows(
        r + b'c  ' + r + b'c/ ' + r + b'c/d ' + r + b'c/d/'
    ) == b'c:/  c:/ c:/d c:/d/'


@pytest.mark.parametrize("root", MOUNT_ROOTS)
def test_multiline_output(root):
    translator = ReversePathTranslator(root)
    r = root.encode()
    output = b'mirror  ' + r + b'c/other/ (fetch)\nmirror  ' + r + b'c/other/ (push)\n'
    assert translator.to_windows(output) == b'mirror  c:/other/ (fetch)\nmirror  c:/other/ (push)\n'


def test_multiline_preserves_crlf_and_line_starts():
    translator = ReversePathTranslator('/mnt/')
    output = b'/mnt/c/repo\r\n/mnt/d\n\tmirror /mnt/e/x\n'
    assert translator.to_windows(output) == b'c:/repo\r\nd:/\n\tmirror e:/x\n'


@pytest.mark.parametrize("root", MOUNT_ROOTS)
def test_no_path_translation(root):
    translator = ReversePathTranslator(root)
    r = root.encode()
    output = r + b'other/file.sh ' + r + b'ab'
    assert translator.to_windows(output) == output


def test_reverse_requires_boundary_before_root():
    translator = ReversePathTranslator('/mnt/')
    assert translator.to_windows(b'x/mnt/c/repo') == b'x/mnt/c/repo'


def test_reverse_is_binary_safe():
    translator = ReversePathTranslator('/mnt/')
    output = b'/mnt/c/caf\xe9\xff.txt\n'
    assert translator.to_windows(output) == b'c:/caf\xe9\xff.txt\n'


def test_reverse_mount_root_is_literal():
    translator = ReversePathTranslator('/m.t/')
    assert translator.to_windows(b'/mxt/c/repo') == b'/mxt/c/repo'
    assert translator.to_windows(b'/m.t/c/repo') == b'c:/repo'


def test_round_trip():
    forward = ForwardPathTranslator('/abc/', classifier=ArgumentClassifier(exists=never_exists))
    reverse = ReversePathTranslator('/abc/')
    unix = forward.to_unix('d:\\a\\b')
    assert unix == '/abc/d/a/b'
    assert reverse.to_windows(unix.encode()) == b'd:/a/b'
