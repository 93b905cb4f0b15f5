"""Console-script entry point."""

from minigrep.cli.main import app


def main():
    app()


if __name__ == "__main__":
    main()
