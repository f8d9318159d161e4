"""Main entry point for the cipherlab package."""
from cipherlab.cli import cli


def main():
    """Main entry point function."""
    cli()


if __name__ == "__main__":
    main()
