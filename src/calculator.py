'''
This module defines a Calculator with one "add" per operand type.

Python picks methods by name, not by argument types, so each overload gets its
own name and the caller chooses it; nothing inspects types at runtime.
'''


class Calculator:
    def add_int(self, a: int, b: int) -> int:
        return a + b

    def add_float(self, a: float, b: float) -> float:
        return a + b

    def add_str(self, a: str, b: str) -> str:
        # Concatenation, never numeric addition
        return a + b
