import json
from pathlib import Path

import pytest

from fintree.domain import attach, create, example_tree
from fintree.exceptions import FintreeError, TreeFormatError
from fintree.recursion import find, total
from fintree.transforms import load_tree, tree_from_dict, tree_to_dict, tree_to_rows

SEED_PATH = Path(__file__).resolve().parent.parent / "data" / "financeiro.json"


def test_tree_from_dict_builds_nodes():
    root = tree_from_dict({
        "name": "root",
        "children": [{"name": "a", "amount": 2}, {"name": "b", "amount": -0.5}],
    })
    assert root.amount == 0.0
    assert isinstance(root.children[0].amount, float)
    assert total(root) == 1.5


def test_tree_from_dict_matches_example():
    assert tree_from_dict(tree_to_dict(example_tree())) == example_tree()


def test_tree_from_dict_invalid():
    with pytest.raises(TreeFormatError) as exc_info:
        tree_from_dict({"name": "root", "children": [{"name": "x", "amount": "a lot"}]})
    err = exc_info.value
    assert err.code == "TREE_FORMAT_ERROR"
    assert err.details["path"] == "$.children[0]"
    assert err.details["error"] == "invalid_amount"
    assert isinstance(err, FintreeError)


def test_tree_to_dict():
    data = tree_to_dict(example_tree())
    assert data["name"] == "Financeiro"
    assert data["children"][1]["children"][0] == {"name": "Aluguel", "amount": -1200.0, "children": []}


def test_tree_to_rows():
    rows = tree_to_rows(example_tree())
    assert len(rows) == 7
    assert rows[0] == {
        "id": "0",
        "parent_id": None,
        "path": "Financeiro",
        "name": "Financeiro",
        "depth": 0,
        "amount": 0.0,
        "total": 5000.0,
    }
    despesas = rows[4]
    assert despesas["path"] == "Financeiro/Despesas"
    assert despesas["total"] == -2000.0
    assert rows[5]["id"] == "0/1/0"
    assert rows[5]["parent_id"] == despesas["id"]
    assert rows[5]["depth"] == 2


def test_load_seed_file():
    root = load_tree(str(SEED_PATH))
    assert root == example_tree()
    assert total(root) == 5000.0


def test_load_tree_from_tmp_file(tmp_path):
    path = tmp_path / "tree.json"
    path.write_text(json.dumps({"name": "Casa", "amount": -10.0}), encoding="utf-8")
    root = load_tree(str(path))
    assert find(root, "Casa") is root


def test_load_tree_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(TreeFormatError) as exc_info:
        load_tree(str(path))
    assert exc_info.value.details["error"] == "invalid_json"


def test_load_tree_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tree(str(tmp_path / "nope.json"))


def test_tree_to_rows_ids_unique_for_duplicate_siblings():
    root = create("r", 0.0)
    attach(root, create("a", 1.0))
    attach(root, create("a", 2.0))
    rows = tree_to_rows(root)
    assert [row["path"] for row in rows] == ["r", "r/a", "r/a"]
    assert [row["id"] for row in rows] == ["0", "0/0", "0/1"]
    assert rows[1]["parent_id"] == rows[2]["parent_id"] == "0"


def test_tree_from_dict_amount_too_large():
    with pytest.raises(TreeFormatError) as exc_info:
        tree_from_dict({"name": "x", "amount": 10 ** 400})
    assert exc_info.value.details["error"] == "invalid_amount"


def test_load_tree_huge_integer_amount(tmp_path):
    path = tmp_path / "huge.json"
    path.write_text('{"name": "x", "amount": 1' + "0" * 400 + "}", encoding="utf-8")
    with pytest.raises(TreeFormatError):
        load_tree(str(path))


def test_load_tree_invalid_utf8(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes(b'{"name": "\xff\xfe"}')
    with pytest.raises(TreeFormatError) as exc_info:
        load_tree(str(path))
    assert exc_info.value.details["error"] == "invalid_encoding"
