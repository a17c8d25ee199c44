"""Unified CLI for skelgen.

    skelgen generate test ...    # Test case skeleton for a class
    skelgen generate class ...   # Class skeleton for a test case
"""

import typer

from skelgen.cli import generate

app = typer.Typer(
    name="skelgen",
    help="skelgen: regenerate skeletons without losing custom code",
    no_args_is_help=True,
)

app.add_typer(generate.app)


def main() -> None:
    """Main entry point for the skelgen CLI."""
    app()


if __name__ == "__main__":
    main()
