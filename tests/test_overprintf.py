import io
import struct

import pytest

from labworks.overprintf import (
    from_base,
    main,
    memory_dump,
    overfprintf,
    oversprintf,
    to_base,
    to_roman,
    to_zeckendorf,
)


def _fib_weights(count):
    weights = [1, 2]
    while len(weights) < count:
        weights.append(weights[-1] + weights[-2])
    return weights[:count]


def test_roman_simple():
    assert to_roman(155) == "CLV"


@pytest.mark.parametrize("number", [1, 49, 1124, 3999])
def test_roman_negative_is_signed(number):
    assert to_roman(-number) == "-" + to_roman(number)


def test_roman_above_4000_repeats_thousands():
    assert to_roman(5023) == "M" * 5 + to_roman(23)


def test_roman_zero_is_empty():
    assert to_roman(0) == ""


def test_zeckendorf_worked_example():
    assert to_zeckendorf(100) == "00101000011"


@pytest.mark.parametrize("number", [1, 2, 3, 4, 7, 100, 1000, 123456])
def test_zeckendorf_decodes_back(number):
    code = to_zeckendorf(number)
    body = code[:-1]
    assert code.endswith("1")
    assert "11" not in body
    total = sum(w for w, d in zip(_fib_weights(len(body)), body) if d == "1")
    assert total == number


def test_zeckendorf_rejects_zero():
    with pytest.raises(ValueError):
        to_zeckendorf(0)


def test_zeckendorf_overflow():
    with pytest.raises(OverflowError):
        to_zeckendorf(2**32 - 1)


@pytest.mark.parametrize("number,base", [(124, 2), (124, 12), (-52, 10), (255, 16), (35, 36)])
def test_to_base_round_trip(number, base):
    assert int(to_base(number, base, True), base) == number


def test_to_base_lowercase():
    text = to_base(124, 12, False)
    assert text == text.lower()
    assert int(text, 12) == 124


def test_to_base_invalid_base_means_decimal():
    assert to_base(-52, 1, True) == "-52"
    assert to_base(0, 2, True) == "0"


@pytest.mark.parametrize("number,base,upper", [(41512, 16, True), (41512, 16, False), (-77, 8, True), (0, 2, True)])
def test_from_base_round_trip(number, base, upper):
    assert from_base(to_base(number, base, upper), base, upper) == number


def test_from_base_matches_int():
    assert from_base("a228", 16, False) == int("a228", 16)
    assert from_base("A228", 16, True) == int("A228", 16)
    assert from_base("-ff", 16, False) == -int("ff", 16)


def test_from_base_wrong_case():
    with pytest.raises(ValueError):
        from_base("A228", 16, False)


def test_from_base_invalid_digit_and_sign():
    with pytest.raises(ValueError):
        from_base("19", 8, True)
    with pytest.raises(ValueError):
        from_base("1+2", 10, True)


def test_from_base_limits():
    assert from_base("7FFFFFFF", 16, True) == 2**31 - 1
    with pytest.raises(OverflowError):
        from_base("80000000", 16, True)
    assert from_base("", 10, True) == 0


def test_from_base_bad_base():
    with pytest.raises(ValueError):
        from_base("1", 40, True)


def test_memory_dump_of_int_one():
    assert memory_dump(struct.pack("<i", 1)) == "00000001 00000000 00000000 00000000 "


def test_plain_text_ignores_extra_arguments():
    assert oversprintf("hello bro", 5) == "hello bro"


def test_regular_flags():
    fmt = "Regular flags %d %s %.15f\n"
    assert oversprintf(fmt, 15, "hello", 1.23) == fmt % (15, "hello", 1.23)


def test_custom_flags_in_text():
    assert oversprintf("155 in Roman: %Ro!", 155) == "155 in Roman: " + to_roman(155) + "!"
    assert oversprintf("%CV", 124, 2) == format(124, "b")
    assert oversprintf("%Cv|%CV", 124, 12, 124, 12) == to_base(124, 12, False) + "|" + to_base(124, 12, True)
    assert oversprintf("%to=%TO", "a228", 16, "A228", 16) == f"{0xA228}={0xA228}"


def test_memory_flags():
    assert oversprintf("%mi", 1) == memory_dump(struct.pack("<i", 1))
    assert oversprintf("%mu", 2**31 + 1) == memory_dump(struct.pack("<I", 2**31 + 1))
    assert oversprintf("%md", 1.1) == memory_dump(struct.pack("<d", 1.1))
    assert oversprintf("%mf", 1.1) == memory_dump(struct.pack("<f", 1.1))


def test_percent_star_and_unsigned():
    assert oversprintf("100%%") == "100%"
    assert oversprintf("%*d", 5, 42) == "%*d" % (5, 42)
    assert oversprintf("%x", -1) == "%x" % (2**32 - 1)


def test_errors():
    with pytest.raises(TypeError):
        oversprintf("%d %d", 1)
    with pytest.raises(ValueError):
        oversprintf("50%")
    with pytest.raises(ValueError):
        oversprintf("%to", "A228", 16)


def test_overfprintf_writes_to_stream():
    buffer = io.StringIO()
    written = overfprintf(buffer, "%Zr;", 100)
    assert buffer.getvalue() == to_zeckendorf(100) + ";"
    assert written == len(buffer.getvalue())


def test_main_prints_and_writes_file(tmp_path, capsys):
    target = tmp_path / "result.txt"
    assert main([str(target)]) == 0
    printed = capsys.readouterr().out
    assert to_roman(155) in printed
    assert to_zeckendorf(100) in printed
    assert printed == "Overfprintf:\n" + target.read_text(encoding="utf-8")