"""A SUBLEQ virtual machine with memory-mapped input and output markers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import Optional, TextIO

INPUT_ADDR_MARKER = -1
OUTPUT_ADDR_MARKER = -2

_RULE = "-" * 26


def _words(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class SubleqInterpreter:
    """Executes SUBLEQ programs, reading from stdin and writing to stdout.

    An instruction ``A B C`` computes ``memory[A] -= memory[B]`` and jumps to
    ``C`` when the result is not positive.  ``B == @IN`` subtracts a value read
    from input instead; ``A == @OUT`` writes ``-memory[B]`` (or ``-input``).
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("Memory size must be positive.")
        self.memory_size = size
        self.memory = [0] * size
        self.program_counter = 0
        self._stdin_words: Optional[Iterator[str]] = None

    def load_program(self, program: Iterable[int]) -> None:
        """Copy a program to the start of memory and reset the program counter."""
        code = list(program)
        if len(code) > self.memory_size:
            raise ValueError("Program too large for memory.")
        self.memory[: len(code)] = code
        self.program_counter = 0

    def _in_memory(self, address: int) -> bool:
        return 0 <= address < self.memory_size

    def _branch(self, value: int, target: int) -> None:
        if value <= 0:
            self.program_counter = target
        else:
            self.program_counter += 3

    def step(self) -> bool:
        """Execute one instruction; return False when the machine halts."""
        pc = self.program_counter
        if pc < 0 or pc + 2 >= self.memory_size:
            return False

        a_addr, b_addr, c_addr = self.memory[pc : pc + 3]

        if a_addr == OUTPUT_ADDR_MARKER:
            if b_addr == INPUT_ADDR_MARKER:
                received = self.get_input()
                if received is None:
                    return False
                value = -received
            else:
                if not self._in_memory(b_addr):
                    return False
                value = -self.memory[b_addr]
            self.put_output(value)
            self._branch(value, c_addr)
            return True

        if b_addr == INPUT_ADDR_MARKER:
            if not self._in_memory(a_addr):
                return False
            received = self.get_input()
            if received is None:
                return False
            self.memory[a_addr] -= received
            self.program_counter += 3
            return True

        if not (self._in_memory(a_addr) and self._in_memory(b_addr)):
            return False

        self.memory[a_addr] -= self.memory[b_addr]
        self._branch(self.memory[a_addr], c_addr)
        return True

    def run(self) -> None:
        """Step until the machine halts."""
        while self.step():
            pass

    def dump_memory(self, start: int, end: int) -> None:
        """Print memory cells from start to end inclusive."""
        stop = min(end, self.memory_size - 1)
        cells = self.memory[max(start, 0) : stop + 1]
        print(f"--- Memory Dump ({start} to {end}) ---")
        print("".join(f"{cell} " for cell in cells))
        print(_RULE)

    def get_input(self) -> Optional[int]:
        """Read the next integer from stdin, or None if none can be read."""
        if self._stdin_words is None:
            self._stdin_words = _words(sys.stdin)
        word = next(self._stdin_words, None)
        if word is None:
            return None
        try:
            return int(word)
        except ValueError:
            return None

    def put_output(self, value: int) -> None:
        """Write one output value on its own line."""
        print(value)


class SubleqInterpreterNonInteractive(SubleqInterpreter):
    """A machine fed from a fixed list of inputs that collects its outputs."""

    def __init__(self, size: int, inputs: Iterable[int]) -> None:
        super().__init__(size)
        self.input_vector = list(inputs)
        self.output_vector: list[int] = []
        self.input_ptr = 0

    def run(self, max_steps: int) -> None:  # type: ignore[override]
        """Step until the machine halts or max_steps instructions have run."""
        for _ in range(max_steps):
            if not self.step():
                break

    def get_input(self) -> Optional[int]:
        if self.input_ptr >= len(self.input_vector):
            return None
        value = self.input_vector[self.input_ptr]
        self.input_ptr += 1
        return value

    def put_output(self, value: int) -> None:
        self.output_vector.append(value)