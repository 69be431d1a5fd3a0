'''
Command line interface tests
'''

import rpnstack.cli
from rpnstack.cli import CLI, InteractiveInput


def test_expressions(capsys):
    CLI().run(args=['-e', '1 2 +', '3 4'])
    out, err = capsys.readouterr()
    # Bottom of the stack first.
    assert out == '3\n3\n4\n'
    assert err == ''


def test_error_skips_line(capsys):
    CLI().run(args=['-e', 'abc +', '-1 sqrt', '2 dup *'])
    out, err = capsys.readouterr()
    assert out == '4\n'
    assert err.splitlines() == ['Less than 2 element(s) on stack',
                                'sqrt undefined for -1.0']


def test_dump(capsys):
    CLI().run(args=['-D', '-e', '1 iota'])
    out, _ = capsys.readouterr()
    assert out.splitlines() == ['<kind>\t<repr(token)>',
                                "literal\t'1'",
                                "command\t'iota'"]


def test_list(capsys):
    CLI().run(args=['-l', '-e'])
    _, err = capsys.readouterr()
    assert err.startswith('commands:')
    assert 'iota' in err.split()


def test_raw_grammar(capsys):
    CLI().run(args=['-G', '-e'])
    out, _ = capsys.readouterr()
    assert 'inf' in out


def test_copy(capsys, monkeypatch):
    copied = []
    monkeypatch.setattr(rpnstack.cli, 'store_selection',
                        lambda data, selection: copied.append((data,
                                                               selection)))
    CLI().run(args=['-c', '-e', '1 2 +', 'abc +', ''])
    assert copied == [('3', '+')]


def test_copy_primary(capsys, monkeypatch):
    copied = []
    monkeypatch.setattr(rpnstack.cli, 'store_selection',
                        lambda data, selection: copied.append((data,
                                                               selection)))
    CLI().run(args=['-c', '*', '-e', '5 iota'])
    assert copied == [('5', '*')]


def test_errors_reach_current_stderr(capsys):
    # Streams swapped after import still get the messages.
    CLI().run(args=['-e', 'swap'])
    _, err = capsys.readouterr()
    assert err == 'Less than 2 element(s) on stack\n'


def test_status(capsys):
    cli = CLI()
    assert cli.status() == '[0]'
    cli.run(args=['-e', '1 2', 'abc +'])
    # Failed lines leave the last good stack in place.
    assert cli.status() == '[2] 2'


def test_prompt_given():
    cli = CLI()
    cli.args = cli.argument_parser.parse_args(['-p', '$ '])
    lines = cli._input()
    assert isinstance(lines, InteractiveInput)
    assert lines.prompt == '$ '
    assert lines.status == cli.status
