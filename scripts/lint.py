"""
Lint script runner.

Settings live in .flake8 and the [tool.pylint] tables of pyproject.toml.
"""
import subprocess


def main():
    """
    Lint the Emoji Lang project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run(["flake8", "./emojilang", "./emj.py"], check=True)

    print("Running pylint...")
    subprocess.run(["pylint", "./emojilang", "./emj.py"], check=True)


if __name__ == "__main__":
    main()
