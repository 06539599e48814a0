# subleqvm

A small SUBLEQ machine. SUBLEQ ("subtract and branch if less than or equal to
zero") is a one-instruction computer. The package has two parts:

- an assembler, which turns a plain-text assembly file into machine code
- an interpreter, which runs that machine code

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

```
subleqvm program.asm
```

The command takes exactly one argument, the assembly file, and does three things:

1. It assembles the file.
2. It loads the result into a 1024-cell memory and prints a dump of the cells from 0 to the program length.
3. It runs the program.

Input values are read from standard input as whitespace-separated integers. Each output value is printed on its own line.

The machine halts in any of these cases:

- the program counter leaves memory
- an address is out of range
- input runs out
- the next input word is not an integer

If the file cannot be read or assembled, the command prints an error to standard error and exits with status 1. It does the same when the program does not fit in memory or when it is given the wrong number of arguments.

## Assembly language

Write one statement per line. Blank lines and lines starting with `;` are ignored. On an instruction line, text after `;` is a comment.

```
; read a number and echo it back
start:  subleq t @IN          ; t -= input
        subleq @OUT t         ; output -t, branch if <= 0
        subleq z z -1         ; halt
t:      .data 0
z:      .data 0
```

- `label:` gives the current address a name.
- `subleq A B [C]` subtracts `mem[B]` from `mem[A]`. If the result is `<= 0`, execution jumps to `C`. Otherwise it continues with the next instruction. When `C` is omitted, it defaults to the next instruction.
- `.data N` places one word.
- Lines with any other mnemonic are ignored.
- An operand may be any of the following:
  - an integer, which must fit in 32 bits
  - a label
  - `label+N` or `label-N`
  - `@IN` or `@OUT`

  Trailing non-alphanumeric characters are dropped from an operand, so `t,` means `t`.
- `subleq A @IN` subtracts one input value from `mem[A]` and goes on to the next instruction.
- `subleq @OUT B` outputs `-mem[B]` and branches on the value it outputs. Use `@IN` as `B` to output the negated input directly.

## Library use

```python
from subleqvm.parser import AssemblyParser
from subleqvm.interpreter import SubleqInterpreterNonInteractive

program = AssemblyParser().parse("program.asm")
vm = SubleqInterpreterNonInteractive(64, [8, 3])
vm.load_program(program)
vm.run(100)           # at most 100 instructions
print(vm.output_vector)
```

### `subleqvm.parser`

- `AssemblyParser.parse_lines` assembles source that is already in memory, either a string or a list of lines. After a parse, the parser's `symbol_table` holds the label addresses.
- `resolve_operand(operand, symbols)` evaluates one operand against a symbol table.
- Unreadable files, undefined symbols and out-of-range numbers raise `AssemblyError`.

### `subleqvm.interpreter`

- `SubleqInterpreter(size)` reads input from standard input and writes output to standard output.
  - `step()` executes one instruction and returns `False` when the machine halts.
  - `run()` steps until the machine halts.
  - `dump_memory(start, end)` prints the cells from `start` to `end`, inclusive.
- Subclass `SubleqInterpreter` and override `get_input` (return an `int`, or `None` to halt) and `put_output` to connect it elsewhere.
- `SubleqInterpreterNonInteractive` reads from a fixed list of inputs and collects its outputs in `output_vector`.
- A non-positive memory size raises `ValueError`, and so does loading a program larger than memory.