"""Console-script shim: explain how to get the CLI when click is missing."""

import sys


def main():
    try:
        from .cli import main as cli_main
    except ModuleNotFoundError as exc:
        if exc.name != "click":
            raise
        sys.stderr.write(
            "Error: the treemirror command needs click (the 'cli' extra).\n"
            "Install it with:  pip install 'treemirror[cli]'\n"
        )
        raise SystemExit(1)
    cli_main()
