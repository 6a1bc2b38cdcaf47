"""Entry point for the CLI application."""

from .cli.app import app


def main() -> None:
    """Run the CLI application."""
    app(prog_name="block-dedup")


if __name__ == "__main__":
    main()
