"""Command line entry point: assemble a file and run it interactively."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from subleqvm.interpreter import SubleqInterpreter
from subleqvm.parser import AssemblyError, AssemblyParser

MEMORY_SIZE = 1024


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Assemble the given file, dump the loaded memory and run the program."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: subleqvm <assembly_file>", file=sys.stderr)
        return 1

    try:
        program = AssemblyParser().parse(args[0])
    except AssemblyError as exc:
        print(f"Error parsing assembly file: {exc}", file=sys.stderr)
        return 1

    interpreter = SubleqInterpreter(MEMORY_SIZE)
    try:
        interpreter.load_program(program)
    except ValueError as exc:
        print(f"Error loading program: {exc}", file=sys.stderr)
        return 1
    interpreter.dump_memory(0, len(program))
    interpreter.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())