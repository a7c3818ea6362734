"""
Emoji Lang Interpreter

This is the main entry point for the Emoji Lang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Set the EMJDEBUG environment variable to print the tokens and AST before execution.
"""
import os
import sys

from emojilang.exceptions import ParseError
from emojilang.interpreter import Interpreter
from emojilang.lexer import TokenType, tokenize
from emojilang.nodes import format_stmt
from emojilang.parser import Parser


def print_usage():
    """
    Print usage.
    """
    print()
    print("Emoji Lang Interpreter")
    print()
    print("Usage:")
    print("    emj <script.emj>")
    print()
    print("Arguments:")
    print("    <script.emj>")
    print("        Path to an Emoji Lang source file to execute.")
    print()
    print("Example:")
    print("    emj examples/example.emj")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    EMJDEBUG")
    print("        When set, print the tokens and AST before running.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(" ".join(str(tok) for tok in tokens))
    print("\nAST:\n")
    for stmt in ast:
        print(format_stmt(stmt))
    print(" ")


def run_source(source: str, interpreter: Interpreter) -> None:
    """
    Tokenize, parse and execute ``source`` with ``interpreter``.

    Errors propagate to the caller.
    """
    tokens = tokenize(source)
    parser = Parser(tokens, interpreter.file)
    ast = parser.parse()

    if os.environ.get('EMJDEBUG'):
        debug_print_tokens_ast(tokens, ast)

    interpreter.execute(ast)


def run_script(script_name: str) -> int:
    """
    Run an Emoji Lang script. Returns the process exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
        run_source(code, Interpreter(script_name))
    except (OSError, SyntaxError, RuntimeError) as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("Emoji Lang Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                run_source(source, interpreter)
                buffer.clear()
            except ParseError as e:
                # Running out of input means the statement is not finished yet.
                if e.token.type == TokenType.END_OF_INPUT:
                    continue
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
            except RuntimeError as e:
                print(f"{type(e).__name__}: {e}")
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
