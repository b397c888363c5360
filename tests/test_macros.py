import pytest

from labworks.macros import INITIAL_HASHSIZE, MacroTable, hash_key, main, process_lines


def test_hash_key_digit_values():
    assert hash_key("0", 128) == 0
    assert hash_key("A", 128) == 10
    assert hash_key("a", 128) == 36
    assert hash_key("10", 128) == 62


def test_hash_key_ignores_other_characters():
    assert hash_key("A_B", 128) == hash_key("AB", 128)
    assert hash_key("-", 128) == 0


def test_hash_key_in_range():
    for key in ("PI", "z" * 40, "MAX_VALUE", "x9"):
        assert 0 <= hash_key(key, 7) < 7


def test_hash_key_rejects_bad_size():
    with pytest.raises(ValueError):
        hash_key("A", 0)


def test_insert_and_find():
    table = MacroTable()
    table.insert("PI", "3.14")
    assert table.find("PI") == "3.14"
    assert table.find("E") is None
    assert table.num_items == 1


def test_redefinition_replaces_value():
    table = MacroTable()
    table.insert("N", "1")
    table.insert("N", "2")
    assert table.find("N") == "2"
    assert table.num_items == 1


def test_uneven_chains_trigger_rebuild():
    table = MacroTable()
    assert hash_key("4", INITIAL_HASHSIZE) == hash_key("28", INITIAL_HASHSIZE)
    keys = ["4", "28"] + [f"K{i}" for i in range(10)]
    for key in keys:
        table.insert(key, key.lower())
    assert table.size > INITIAL_HASHSIZE
    assert table.num_items == len(keys)
    for key in keys:
        assert table.find(key) == key.lower()


def test_process_lines_substitutes():
    table = MacroTable()
    output = list(process_lines(["#define PI 3.14\n", "x = PI * 2\n"], table))
    assert output == ["x = 3.14 * 2\n"]
    assert table.find("PI") == "3.14"


def test_process_lines_keeps_value_spaces():
    table = MacroTable()
    list(process_lines(["#define GREETING hello world\n"], table))
    assert table.find("GREETING") == "hello world"


def test_carriage_returns_removed_only_after_substitution():
    table = MacroTable()
    output = list(process_lines(["#define A B\r\n", "A\r\n", "plain\r\n"], table))
    assert output == ["B\n", "plain\r\n"]


def test_define_without_value_is_ignored():
    table = MacroTable()
    output = list(process_lines(["#define X\n", "X\n"], table))
    assert output == ["X\n"]
    assert table.num_items == 0


def test_self_expanding_macro_is_an_error():
    with pytest.raises(ValueError):
        list(process_lines(["#define A AA\n", "A\n"], MacroTable()))


def test_main_prints_substituted_file(tmp_path, capsys):
    path = tmp_path / "source.txt"
    path.write_text("#define PI 3.14\nx = PI * 2\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "x = 3.14 * 2\n"


def test_main_errors(tmp_path):
    assert main([]) == 1
    assert main([str(tmp_path / "missing.txt")]) == 4