import io
import sys

import pytest

from testcolor.interface import cli


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.nofmt is False
    assert args.nocolor is False


@pytest.mark.parametrize(
    ('argv', 'nofmt', 'nocolor'),
    [
        (['-nofmt'], True, False),
        (['-nocolor'], False, True),
        (['--nofmt', '--nocolor'], True, True),
        (['-nocolor', '-nofmt'], True, True),
    ],
)
def test_parser_flags(argv, nofmt, nocolor):
    args = cli.build_parser().parse_args(argv)
    assert args.nofmt is nofmt
    assert args.nocolor is nocolor


def test_help_shows_usage_banner(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.build_parser().parse_args(['-h'])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert f'testcolor v{cli.VERSION}' in out
    assert "tc pretty prints your 'go test' output" in out
    assert 'go test -v ./... | tc [flags]' in out
    assert '-nofmt' in out


def test_version(capsys):
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(['--version'])
    assert capsys.readouterr().out.strip() == f'testcolor v{cli.VERSION}'


@pytest.mark.parametrize(
    ('argv', 'nofmt', 'nocolor'),
    [
        (['-nofmt=true'], True, False),
        (['-nocolor=1', '-nofmt=F'], False, True),
        (['--nofmt=TRUE', '--nocolor=false'], True, False),
        (['-nofmt=t', '-nocolor=True'], True, True),
    ],
)
def test_parser_accepts_explicit_bool_values(argv, nofmt, nocolor):
    args = cli.build_parser().parse_args(argv)
    assert args.nofmt is nofmt
    assert args.nocolor is nocolor


def test_parser_rejects_invalid_bool_value(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.build_parser().parse_args(['-nofmt=yes'])
    assert excinfo.value.code == 2
    assert "invalid boolean value 'yes'" in capsys.readouterr().err


def test_main_honors_explicit_false():
    stdout = io.BytesIO()
    assert cli.main(['-nocolor=false'], stdin=io.BytesIO(b'PASS\n'), stdout=stdout) == 0
    assert stdout.getvalue() == b'\x1b[1;32mPASS\x1b[0m\n'


def test_unknown_flag_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        cli.build_parser().parse_args(['-bogus'])
    assert excinfo.value.code == 2


def test_main_default():
    stdout = io.BytesIO()
    assert cli.main([], stdin=io.BytesIO(b'--- PASS: TestFoo (0.00s)\n'), stdout=stdout) == 0
    assert stdout.getvalue() == b'          \x1b[1;32m--- PASS: TestFoo (0.00s)\x1b[0m\n'


def test_main_nofmt_nocolor_is_passthrough():
    data = b'=== RUN   TestFoo\n    TestFoo: foo_test.go:3: hi\n--- FAIL: TestFoo (0.00s)\n'
    stdout = io.BytesIO()
    assert cli.main(['-nofmt', '-nocolor'], stdin=io.BytesIO(data), stdout=stdout) == 0
    assert stdout.getvalue() == data


def test_main_reads_process_streams(monkeypatch):
    stdin = io.TextIOWrapper(io.BytesIO(b'PASS\n'), encoding='utf-8')
    stdout = io.TextIOWrapper(io.BytesIO(), encoding='utf-8')
    monkeypatch.setattr(sys, 'stdin', stdin)
    monkeypatch.setattr(sys, 'stdout', stdout)
    assert cli.main(['-nocolor']) == 0
    assert stdout.buffer.getvalue() == b'PASS\n'


def test_main_reports_classification_error(capsys):
    stdout = io.BytesIO()
    assert cli.main([], stdin=io.BytesIO(b'PASS\nsee foo_test.go\n'), stdout=stdout) == 2
    assert stdout.getvalue() == b'\x1b[1;32mPASS\x1b[0m\n'
    err = capsys.readouterr().err
    assert err.startswith('testcolor: [FATAL] internal error:')
    assert 'foo_test.go' in err


def test_main_reports_stream_error(capsys):
    class BrokenPipe(io.RawIOBase):
        def writable(self):
            return True

        def write(self, data):
            raise BrokenPipeError('broken pipe')

    assert cli.main([], stdin=io.BytesIO(b'PASS\n'), stdout=BrokenPipe()) == 1
    assert 'testcolor: [FATAL] unhandled error writing output' in capsys.readouterr().err
