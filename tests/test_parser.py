import pytest

from subleqvm.interpreter import SubleqInterpreterNonInteractive
from subleqvm.parser import AssemblyError, AssemblyParser, resolve_operand

SUBTRACTION = """\
subleq X @IN     ; X = -a
subleq Y @IN     ; Y = -b
subleq X Y       ; X = b - a
subleq @OUT X    ; print a - b
subleq Z Z -1    ; halt
X: .data 0
Y: .data 0
Z: .data 0
"""

ADDITION = """\
subleq X @IN
subleq Y @IN
subleq T Y
subleq X T
subleq @OUT X
subleq Z Z -1
X: .data 0
Y: .data 0
T: .data 0
Z: .data 0
"""

CAT = """\
loop: subleq X @IN
      subleq @OUT X
      subleq X X loop
X:    .data 0
"""

SEQUENCE_REVERSER = """\
iloop: subleq TMP @IN
       subleq Z2 TMP oloop
st:    subleq STACK Z2
       subleq st NEG1
       subleq oloop+1 NEG1
       subleq N NEG1
       subleq TMP TMP
       subleq Z2 Z2 iloop
oloop: subleq @OUT STACK-1
       subleq oloop+1 ONE
       subleq N ONE fin
       subleq Z Z oloop
fin:   subleq @OUT Z
       subleq Z Z -1
NEG1:  .data -1
ONE:   .data 1
N:     .data 0
TMP:   .data 0
Z2:    .data 0
Z:     .data 0
STACK: .data 0
"""


def _run_file(tmp_path, name, source, size, inputs, max_steps):
    path = tmp_path / name
    path.write_text(source)
    program = AssemblyParser().parse(str(path))
    vm = SubleqInterpreterNonInteractive(size, inputs)
    vm.load_program(program)
    vm.run(max_steps)
    return vm.output_vector


def test_subtraction_file(tmp_path):
    assert _run_file(tmp_path, "subtraction.asm", SUBTRACTION, 30, [8, 3], 100) == [5]


def test_addition_file(tmp_path):
    assert _run_file(tmp_path, "addition.asm", ADDITION, 30, [5, 3], 100) == [8]


def test_cat_file(tmp_path):
    inputs = [10, 20, 30, 0, -5]
    assert _run_file(tmp_path, "cat.asm", CAT, 20, inputs, 100) == inputs


def test_sequence_reverser_file(tmp_path):
    result = _run_file(
        tmp_path, "sequence_reverser.asm", SEQUENCE_REVERSER, 100, [10, 20, 30, 0], 1000
    )
    assert result == [30, 20, 10, 0]


def test_subtraction_machine_code():
    assert AssemblyParser().parse_lines(SUBTRACTION) == [
        15, -1, 3,
        16, -1, 6,
        15, 16, 9,
        -2, 15, 12,
        17, 17, -1,
        0, 0, 0,
    ]


def test_labels_comments_and_blank_lines():
    lines = [
        "; header comment",
        "",
        "start:",
        "  subleq a b start ; loop forever",
        "a: .data 7",
        "b: .data -2",
    ]
    parser = AssemblyParser()
    assert parser.parse_lines(lines) == [3, 4, 0, 7, -2]
    assert parser.symbol_table == {"start": 0, "a": 3, "b": 4}


def test_third_operand_with_expression():
    assert AssemblyParser().parse_lines(["x: subleq x x x+6"]) == [0, 0, 6]


def test_data_with_label_expression():
    assert AssemblyParser().parse_lines(["x: .data x+2"]) == [2]


def test_parse_lines_accepts_newline_terminated_lines():
    assert AssemblyParser().parse_lines(["subleq 1 2\n", ".data 5\n"]) == [1, 2, 3, 5]


def test_reusing_parser_gives_same_code():
    parser = AssemblyParser()
    first = parser.parse_lines(CAT)
    assert parser.parse_lines(CAT) == first


def test_undefined_symbol_raises():
    with pytest.raises(AssemblyError, match="Undefined symbol: nowhere"):
        AssemblyParser().parse_lines(["subleq nowhere 0"])


def test_missing_file_raises(tmp_path):
    missing = tmp_path / "missing.asm"
    with pytest.raises(AssemblyError, match="Could not open file"):
        AssemblyParser().parse(str(missing))


@pytest.mark.parametrize(
    "operand, expected",
    [
        ("@IN", -1),
        ("@OUT", -2),
        ("42", 42),
        ("-7", -7),
        ("loop", 3),
        ("loop,", 3),
        ("loop+2", 5),
        ("loop-1", 2),
    ],
)
def test_resolve_operand(operand, expected):
    assert resolve_operand(operand, {"loop": 3}) == expected


def test_resolve_undefined_label():
    with pytest.raises(AssemblyError, match="Undefined symbol: missing"):
        resolve_operand("missing", {})


def test_resolve_undefined_label_in_expression():
    with pytest.raises(AssemblyError, match="Undefined symbol in expression: missing"):
        resolve_operand("missing+1", {})


def test_resolve_number_out_of_range():
    with pytest.raises(AssemblyError, match="Number out of range"):
        resolve_operand("99999999999", {})