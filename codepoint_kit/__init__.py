"""UTF-8 code point decoding, JSON lexing, ANSI escapes, formatter bytecode opcodes and a terminal chess board."""

__version__ = "0.1.0"