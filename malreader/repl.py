"""
Line-oriented front end for the reader.

Reads one line at a time, reads a form from it and prints the form back.
Reader errors are reported and the line is discarded; the loop goes on.
"""

import sys
from pathlib import Path
from typing import Callable, Optional

from .environment import ReaderEnvironment
from .errors import ReaderError
from .parser import read_str
from .printer import render

try:
    import readline
except ImportError:  # pragma: no cover - not available on every platform
    readline = None


class Repl:
    """Read-print loop."""

    def __init__(self, prompt: str = "user> ", history_file: Optional[str] = None,
                 verbose: bool = False, echo: bool = False,
                 env: Optional[ReaderEnvironment] = None):
        self.prompt = prompt
        self.history_file = Path(history_file) if history_file else None
        self.verbose = verbose
        self.echo = echo  # Print lines back without reading them
        self.env = env or ReaderEnvironment()

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[malreader] {message}", file=sys.stderr)

    def rep(self, line: str) -> str:
        """Read one form from line and render it."""
        if self.echo:
            return line
        value = read_str(line, self.env, log=self.log if self.verbose else None)
        return render(value)

    def load_history(self, output=None):
        if self.history_file is None or readline is None:
            return
        try:
            readline.read_history_file(str(self.history_file))
            self.log(f"Loaded history from {self.history_file}")
        except OSError:
            print("No previous history.", file=output or sys.stdout)

    def save_history(self):
        if self.history_file is None or readline is None:
            return
        try:
            readline.write_history_file(str(self.history_file))
            self.log(f"Saved history to {self.history_file}")
        except OSError as e:
            print(f"Could not save history: {e}", file=sys.stderr)

    def add_history(self, line: str):
        if self.history_file is not None and readline is not None:
            readline.add_history(line)

    def run(self, input_func: Optional[Callable[[str], str]] = None, output=None) -> int:
        """Loop until end of input or interrupt. Returns the exit status."""
        if input_func is None:
            input_func = input
        if output is None:
            output = sys.stdout
        self.load_history(output)
        try:
            while True:
                try:
                    line = input_func(self.prompt)
                except EOFError:
                    print("CTRL-D", file=output)
                    break
                except KeyboardInterrupt:
                    print("CTRL-C", file=output)
                    break

                if not line.strip():
                    continue
                self.add_history(line)

                try:
                    print(self.rep(line), file=output)
                except ReaderError as e:
                    print(f"Error: {e}", file=sys.stderr)
        finally:
            self.save_history()
        return 0


def main(argv=None):
    """Command-line interface for the reader."""
    import argparse

    parser = argparse.ArgumentParser(
        description='malreader - Read forms and print them back'
    )
    parser.add_argument('--prompt', default='user> ',
                        help='Prompt string (default: "user> ")')
    parser.add_argument('--history', metavar='FILE',
                        help='Load and save line history in FILE')
    parser.add_argument('--echo', action='store_true',
                        help='Print each line back without reading it')
    parser.add_argument('--verbose', action='store_true',
                        help='Verbose output')

    args = parser.parse_args(argv)

    repl = Repl(prompt=args.prompt, history_file=args.history,
                verbose=args.verbose, echo=args.echo)
    sys.exit(repl.run())


if __name__ == '__main__':
    main()
