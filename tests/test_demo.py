import io

import pytest

from bintree.demo import main, run_demo


def _output(number):
    out = io.StringIO()
    run_demo(number, out)
    return out.getvalue()


def _trailing_numbers(text, count):
    return [int(line) for line in text.splitlines()[-count:]]


def test_unknown_demo_raises():
    with pytest.raises(ValueError):
        run_demo(19, io.StringIO())


def test_main_matches_run_demo(capsys):
    assert main(["4"]) == 0
    assert capsys.readouterr().out == _output(4)


def test_main_rejects_bad_number():
    with pytest.raises(SystemExit):
        main(["42"])


def test_node_demo_draws_all_values():
    labels = {
        token
        for line in _output(0).splitlines()
        for token in line.split()
        if token not in ("/", "\\")
    }
    assert labels == {"98", "12", "6", "16", "402", "256", "512"}


@pytest.mark.parametrize("number, added", [(1, ("54", "128")), (2, ("54", "128"))])
def test_insert_demos_show_before_and_after(number, added):
    before, after = _output(number).split("\n\n")
    for value in added:
        assert value not in before
        assert value in after


def test_preorder_demo_starts_at_root():
    values = _trailing_numbers(_output(6), 7)
    assert values[0] == 98
    assert sorted(values) == [6, 12, 56, 98, 256, 402, 512]


def test_inorder_demo_is_sorted():
    values = _trailing_numbers(_output(7), 7)
    assert values == sorted(values)


def test_postorder_demo_ends_at_root():
    values = _trailing_numbers(_output(8), 7)
    assert values[-1] == 98
    assert set(values) == {6, 12, 56, 98, 256, 402, 512}


def test_traversal_demos_share_tree_drawing():
    heads = {"\n".join(_output(n).splitlines()[:-7]) for n in (6, 7, 8)}
    assert len(heads) == 1


def test_reports_name_each_node():
    lines = _output(10).splitlines()[-3:]
    assert [line.split(":")[0] for line in lines] == [
        "Depth of 98",
        "Depth of 128",
        "Depth of 54",
    ]


def test_size_of_root_exceeds_subtrees():
    sizes = [int(line.rsplit(" ", 1)[1]) for line in _output(11).splitlines()[-3:]]
    assert sizes[0] > sizes[1] >= sizes[2]


def test_root_demo_flags_only_root():
    flags = [line.rsplit(" ", 1)[1] for line in _output(5).splitlines()[-3:]]
    assert flags == ["1", "0", "0"]


def test_perfect_demo_sequence():
    lines = [line for line in _output(16).splitlines() if line.startswith("Perfect")]
    assert lines == ["Perfect: 1", "Perfect: 0", "Perfect: 0"]


def test_balance_demo_uses_signed_format():
    lines = _output(14).splitlines()[-3:]
    assert all(line.split(": ")[1][0] in "+-" for line in lines)


def test_sibling_demo_root_has_none():
    last = _output(17).splitlines()[-1]
    assert last == "Sibling of 98: (nil)"


def test_uncle_demo_pairs():
    lines = _output(18).splitlines()[-3:]
    assert lines[0] == "Uncle of 110: 12"
    assert lines[1] == "Uncle of 54: 128"


def test_delete_demo_only_draws_tree():
    assert _output(3) == _output(4).rsplit("\n", 4)[0] + "\n"