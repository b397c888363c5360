import io
import sys

import pytest

from labworks.bitvectors import (
    LONG_MAX,
    LONG_MIN,
    Interpreter,
    apply_operation,
    main,
    parse_long,
    read_statements,
    to_base,
    to_bitstring,
)


def test_bitstring_lowest_bit_first():
    assert to_bitstring(1) == "1" + "0" * 63


def test_bitstring_of_minus_one_is_all_ones():
    assert to_bitstring(-1) == "1" * 64


@pytest.mark.parametrize("value", [0, 1, 5, -5, 255, 123456789, LONG_MAX - 1, LONG_MIN + 1])
@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
def test_to_base_parse_long_round_trip(value, base):
    assert parse_long(to_base(value, base), base) == value


def test_to_base_zero():
    assert to_base(0, 7) == "0"


def test_to_base_negative_decimal():
    assert to_base(-42, 10) == "-42"


def test_to_base_rejects_bad_base():
    with pytest.raises(ValueError):
        to_base(10, 40)


def test_parse_long_empty_string_is_zero():
    assert parse_long("", 10) == 0


def test_parse_long_hex_prefix():
    assert parse_long("0x1f", 16) == parse_long("1F", 16)


@pytest.mark.parametrize("text", ["12x", "  ", "2", str(LONG_MAX), str(LONG_MIN)])
def test_parse_long_rejects(text):
    with pytest.raises(ValueError):
        parse_long(text, 2 if text == "2" else 10)


def test_parse_long_rejects_bad_base():
    with pytest.raises(ValueError):
        parse_long("1", 1)


def test_apply_operation_logical_forms():
    assert apply_operation(0, 0, "!") == 1
    assert apply_operation(5, 6, "?") == 0
    assert apply_operation(0, 8, "->") == 9
    assert apply_operation(4, 4, "~") == 4


def test_apply_operation_unknown():
    with pytest.raises(ValueError):
        apply_operation(1, 2, "#")


def test_read_statements_normalises_and_skips_comments():
    text = "% a comment line\nread(a, 2);\n{ block } write(a,2);"
    assert list(read_statements(io.StringIO(text))) == ["READ(A,2);", "WRITE(A,2);"]


def test_read_statements_keeps_unterminated_tail():
    assert list(read_statements(io.StringIO("a:=b+c"))) == ["A:=B+C"]


def test_read_statements_unterminated_block():
    with pytest.raises(ValueError):
        list(read_statements(io.StringIO("{never closed")))


def test_read_and_write_round_trip():
    out = io.StringIO()
    interpreter = Interpreter(io.StringIO("ff\n"), out)
    interpreter.run(io.StringIO("READ(A, 16); WRITE(A, 16);"))
    assert "A = FF\n" in out.getvalue()
    assert interpreter.vectors["A"] == parse_long("ff", 16)


def test_trace_records_before_and_after():
    trace = io.StringIO()
    interpreter = Interpreter(io.StringIO("101 "), io.StringIO(), trace)
    interpreter.execute("READ(B,2);")
    value = interpreter.vectors["B"]
    assert trace.getvalue() == f"READ (B):\nbefore: not init\nafter: {to_bitstring(value)}\n\n"


def test_negation():
    interpreter = Interpreter(io.StringIO("12\n"), io.StringIO())
    interpreter.run(io.StringIO("read(b,10); a := \\b;"))
    assert interpreter.vectors["A"] + interpreter.vectors["B"] == -1


def test_binary_operation_uses_apply_operation():
    interpreter = Interpreter(io.StringIO("12 10 "), io.StringIO())
    interpreter.run(io.StringIO("READ(B,10);READ(C,10);A:=B<>C;D:=B->C;"))
    vectors = interpreter.vectors
    assert vectors["A"] == apply_operation(vectors["B"], vectors["C"], "<>")
    assert vectors["D"] == apply_operation(vectors["B"], vectors["C"], "->")


def test_write_missing_vector_is_only_traced():
    out = io.StringIO()
    Interpreter(io.StringIO(), out).execute("WRITE(Q,10);")
    assert out.getvalue() == "Write: vector missing\n\n"


@pytest.mark.parametrize(
    "statement",
    ["WRITE(A,1);", "READ(A,37);", "A:=B+C;", "A:=B#C;", "A:=\\B;", ";", "A:=B+C"],
)
def test_rejected_statements(statement):
    interpreter = Interpreter(io.StringIO("1\n"), io.StringIO())
    with pytest.raises(ValueError):
        interpreter.execute(statement)


def test_read_bad_value():
    interpreter = Interpreter(io.StringIO("12\n"), io.StringIO())
    with pytest.raises(ValueError):
        interpreter.execute("READ(A,2);")


def test_main_runs_program(tmp_path, monkeypatch, capsys):
    program = tmp_path / "program.txt"
    program.write_text("READ(A, 10);\nWRITE(A, 10);\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("7\n"))
    assert main([str(program)]) == 0
    assert "A = 7" in capsys.readouterr().out


def test_main_writes_trace(tmp_path, monkeypatch):
    program = tmp_path / "program.txt"
    program.write_text("READ(A, 10);", encoding="utf-8")
    trace = tmp_path / "trace.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO("7\n"))
    assert main([str(program), "/trace", str(trace)]) == 0
    assert trace.read_text(encoding="utf-8").startswith("READ (A):\nbefore: not init\n")


def test_main_rejects_same_paths(tmp_path):
    program = tmp_path / "program.txt"
    program.write_text("", encoding="utf-8")
    assert main([str(program), "/trace", str(program)]) == 1


def test_main_rejects_argument_count():
    assert main(["a", "b"]) == 1


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 4