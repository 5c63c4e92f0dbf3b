"""Data types and opcodes of a stack-based data-formatter bytecode."""

from __future__ import annotations

from enum import Enum, IntEnum


class DataType(Enum):
    """Types of the objects that may live on the data stack."""

    STRING = "String"  # UTF-8
    INT = "Int"  # signed 64 bit
    UINT = "UInt"  # unsigned 64 bit
    OBJECT = "Object"  # opaque value, usable only as a call argument
    TYPE = "Type"  # opaque type, usable only as a call argument
    SELECTOR = "Selector"  # one of the predefined functions


class Instruction(IntEnum):
    """Bytecode opcodes, with their stack effects."""

    # Stack operations
    DUP = 0x00  # (x -> x x)
    DROP = 0x01  # (x y -> x)
    PICK = 0x02  # (x ... UInt -> x ... x)
    OVER = 0x03  # (x y -> x y x)
    SWAP = 0x04  # (x y -> y x)
    ROT = 0x05  # (x y z -> z x y)

    # Control flow
    BEGIN = 0x10  # push a code block address onto the control stack
    IF = 0x11  # (UInt -> ) run the popped block if the top of the data stack is nonzero
    IFELSE = 0x12  # (UInt -> ) run the first or second popped block
    RETURN = 0x13  # pop the entire control stack and return

    # Literals
    UINT = 0x20  # ( -> UInt)
    INT = 0x21  # ( -> Int)
    STRING = 0x22  # ( -> String)
    SELECTOR = 0x23  # ( -> Selector)

    # Arithmetic, logic and comparison
    ADD = 0x30
    SUB = 0x31
    MUL = 0x32
    DIV = 0x33
    SHL = 0x34
    SHR = 0x35
    NOT = 0x36
    OR = 0x37
    XOR = 0x38
    EQ = 0x39
    EQ2 = 0x3A
    LT = 0x3B
    GT = 0x3C
    LE = 0x3D
    GE = 0x3E

    # Function calls
    CALL = 0x60  # (Object argN ... arg0 Selector -> retval)