import io

from BITree import FenwickTree
from BITree.shell.commands import INVALID_INDEX, INVALID_INPUT
from BITree.shell.shell import main, read_int, run_shell


def scripted(answers):
    answers = iter(answers)

    def input_fn(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError()
    return input_fn


def test_read_int_retries():
    printed = []
    assert read_int("> ", scripted(["a", " 12 "]), printed.append) == 12
    assert printed == [INVALID_INPUT]


def test_session():
    printed = []
    tree = run_shell(input_fn=scripted(["5", "1", "10", "3", "2", "3", "x", "2", "9", "3"]), print_fn=printed.append)
    assert tree.capacity == 6
    assert tree.point_value(3) == 10
    assert "    sum = 10" in printed
    assert INVALID_INPUT in printed
    assert INVALID_INDEX in printed
    assert "3. Quit" in printed[1]


def test_session_ends_on_eof():
    printed = []
    tree = run_shell(input_fn=scripted(["3", "1", "4"]), print_fn=printed.append)
    assert tree.capacity == 4
    assert tree.total() == 0


def test_invalid_size_leaves_tree_uninitialised():
    printed = []
    tree = run_shell(input_fn=scripted(["-1", "2", "1", "3"]), print_fn=printed.append)
    assert tree.capacity == 0
    assert INVALID_INDEX in printed


def test_existing_tree_skips_size_prompt():
    printed = []
    tree = FenwickTree.from_values([0, 1, 2, 3])
    run_shell(tree, scripted(["4", "1", "3", "3"]), printed.append)
    assert "    sum[1:3] = 6" in printed


def test_main_print(capsys):
    assert main(['--values', '1', '2', '3', '4', '5', '--print']) == 0
    out = capsys.readouterr().out
    assert "    BIT[ 4]:   10    // 1 + 2 + 3 + 4" in out


def test_main_table(capsys):
    assert main(['-v', '1', '2', '3', '--table', '--build-method', 'linear', '--range-method', 'prefix']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ['start', 'end', 'sum']
    assert len(lines) == 7
    assert lines[-1].split() == ['3', '3', '3']


def test_main_interactive(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO("2\n3\n5\n2\n3\n"))
    assert main(['--values', '1', '2', '3']) == 0
    out = capsys.readouterr().out
    assert "    sum = 6" in out
    assert "    value = 2" in out
