[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codepoint-kit"
version = "0.1.0"
description = "Strict UTF-8 code point decoding, an event-driven JSON lexer, ANSI escape helpers and a terminal chess board"
requires-python = ">=3.10"
dependencies = []
keywords = ["utf-8", "unicode", "json", "lexer", "ansi", "terminal", "chess", "bitboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codepoint-chess = "codepoint_kit.chess_app:main"

[tool.hatch.build.targets.wheel]
packages = ["codepoint_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
