import re

from linkedkit.demo_dlist import format_dlist, main
from linkedkit.dlist import DoublyLinkedList

NODE_LINE = re.compile(r"^dlist\.node\[(\d{3})\]=(\d+), (\S+) -> (\S+) $", re.M)
BLOCK = re.compile(r"^List size is (\d+)\n((?:dlist\.node.*\n)*)", re.M)


def _snapshots(text):
    return [
        (int(size), [int(m.group(2)) for m in NODE_LINE.finditer(body)])
        for size, body in BLOCK.findall(text)
    ]


def _run_demo(capsys):
    status = main([])
    return status, capsys.readouterr().out


def _build(values):
    lst = DoublyLinkedList()
    for value in values:
        lst.insert_next(lst.tail, value)
    return lst


def test_format_dlist_lines_follow_list_order():
    lst = _build([4, 8, 15, 16])
    text = format_dlist(lst)
    assert text.splitlines()[0] == "List size is 4"
    assert [int(m.group(2)) for m in NODE_LINE.finditer(text)] == list(lst)


def test_format_dlist_links_chain():
    parsed = list(NODE_LINE.finditer(format_dlist(_build([1, 2, 3]))))
    assert [a.group(4) for a in parsed[:-1]] == [b.group(3) for b in parsed[1:]]
    assert parsed[-1].group(4) == "(nil)"


def test_format_empty_dlist():
    assert format_dlist(DoublyLinkedList()) == "List size is 0\n"


def test_main_without_arguments_succeeds():
    assert main() == 0


def test_main_sizes_match(capsys):
    status, out = _run_demo(capsys)
    assert status == 0
    snapshots = _snapshots(out)
    assert len(snapshots) == 8
    assert all(size == len(values) for size, values in snapshots)
    assert out.rstrip().endswith("Destroying the list")


def test_main_steps_transform_list(capsys):
    _, out = _run_demo(capsys)
    values = [vals for _, vals in _snapshots(out)]
    assert sorted(values[0]) == list(range(11, 21))
    assert values[0][0] == 20
    removed = int(re.search(r"Removing the node containing (\d+)", out).group(1))
    assert values[0].index(removed) == 7
    assert values[1] == [v for v in values[0] if v != removed]
    assert values[2] == values[1] + [187]
    assert values[3] == values[2][1:]
    assert values[4] == values[3][:-1]
    assert values[5] == values[4][:1] + [975] + values[4][1:]
    assert values[6] == values[5][:2] + values[5][3:]
    assert values[7] == values[6][:1] + [607] + values[6][1:]


def test_main_head_tail_checks(capsys):
    _, out = _run_demo(capsys)
    assert re.findall(r"value=(\d) \(1=OK\)", out) == ["1", "0", "1", "0"]