"""
Utility functions shared across Emoji Lang tests.
"""
from pathlib import Path
import sys

from emojilang.lexer import tokenize
from emojilang.parser import Parser
from emojilang.interpreter import Interpreter

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

# Keyword symbols, spelled out so test sources stay readable.
ASSIGN = "\U0001F4E6"
PRINT = "\U0001F4E2"
PRINTER = "\U0001F5A8"
PLUS = "\u2795"
MINUS = "\u2796"
STAR = "\u2716"
SLASH = "\u2797"
IF = "\u2753"
WHILE = "\U0001F501"
VS16 = "\ufe0f"


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    return Parser(tokenize(source), "<test>").parse()


def run_source(source: str) -> Interpreter:
    """
    Parse and execute source code, returning the interpreter after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.execute(parse_source(source))
    return interpreter


def output_lines(capsys) -> list[str]:
    """
    Return the captured standard output as a list of lines.
    """
    return capsys.readouterr().out.strip().splitlines()
