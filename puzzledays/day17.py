"""Day 17: a three-bit computer, and the register value that makes it print itself."""

from __future__ import annotations

from dataclasses import dataclass, field

from .day import Day, Part
from .inputs import parse_numbers


@dataclass
class Computer:
    """Three registers, a program, an instruction pointer and what was printed."""

    a: int = 0
    b: int = 0
    c: int = 0
    instructions: list[int] = field(default_factory=list)
    pointer: int = 0
    output: list[int] = field(default_factory=list)

    def combo(self, operand: int) -> int:
        """The value of a combo operand."""
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"Invalid operand: {operand}")

    def step(self, opcode: int, operand: int) -> None:
        """Carry out one instruction."""
        if opcode == 0:
            self.a = self.a >> self.combo(operand)
        elif opcode == 1:
            self.b ^= operand
        elif opcode == 2:
            self.b = self.combo(operand) % 8
        elif opcode == 3:
            if self.a != 0:
                self.pointer = operand
        elif opcode == 4:
            self.b ^= self.c
        elif opcode == 5:
            self.output.append(self.combo(operand) % 8)
        elif opcode == 6:
            self.b = self.a >> self.combo(operand)
        elif opcode == 7:
            self.c = self.a >> self.combo(operand)
        else:
            raise ValueError(f"Invalid opcode: {opcode}")

    def _execute(self, halt_on_divide: bool = False) -> None:
        while self.pointer < len(self.instructions):
            if self.pointer + 1 >= len(self.instructions):
                raise ValueError("program ends in the middle of an instruction")
            opcode = self.instructions[self.pointer]
            operand = self.instructions[self.pointer + 1]
            self.pointer += 2
            if halt_on_divide and opcode == 0:
                break
            self.step(opcode, operand)


class Day17(Day):
    number = 17

    def initialize(self, text: str) -> None:
        numbers = parse_numbers(text)
        if len(numbers) < 3:
            raise ValueError("expected three registers")
        a, b, c, *program = numbers
        self._registers = (a, b, c)
        self._program = program

    def _computer(self, a: int | None = None) -> Computer:
        start_a, b, c = self._registers
        return Computer(start_a if a is None else a, b, c, list(self._program))

    def solve(self, part: Part) -> str:
        if part is Part.ONE:
            computer = self._computer()
            computer._execute()
            return "".join(f"{value}," for value in computer.output)

        # Build register A three bits at a time, from the last printed value back.
        candidates = {0}
        for instruction in reversed(self._program):
            found: set[int] = set()
            for value in candidates:
                for low_bits in range(8):
                    computer = self._computer(value * 8 + low_bits)
                    computer._execute(halt_on_divide=True)
                    if computer.b % 8 == instruction:
                        found.add(computer.a)
            candidates = found
        if not candidates:
            raise ValueError("no register value reproduces the program")
        return str(min(candidates))