"""
Entry point for running tailwindkit CLI as a module.

Usage: python -m tailwindkit [command] [options]
"""

from tailwindkit.cli.parser import main

if __name__ == "__main__":
    main()
