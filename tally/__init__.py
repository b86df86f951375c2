"""
Tally: a translator for a tiny declarative language.

A Tally program is a list of declarations and log statements::

    hello : constant, string = wow, this works?;
    log hello;

which translates to line-oriented pseudo-assembly::

    MOV hello, wow, this works?
    PRINT hello

The code is organised into several modules:

* ``lang`` – the lexer (``lang.parser.grammar.lexer``) and the statement
  parser (``lang.parser``).
* ``ast`` – frozen dataclasses for the parsed program.
* ``codegen`` – turns a program into instruction lines.
* ``compiler`` – runs the three stages in order.
* ``cli`` – the ``tally`` command.
"""

from .codegen import generate, render
from .compiler import SAMPLE_PROGRAM, Compilation, compile_source, compile_unit
from .errors import TallyError, TallySyntaxError
from .lang.parser import parse_program, tokenize

__version__ = "0.1.0"

__all__ = [
    "Compilation",
    "SAMPLE_PROGRAM",
    "TallyError",
    "TallySyntaxError",
    "compile_source",
    "compile_unit",
    "generate",
    "parse_program",
    "render",
    "tokenize",
    "__version__",
]
