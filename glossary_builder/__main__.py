"""
Main entry point for running as module: python -m glossary_builder
"""
from glossary_builder.cli.cli_interface import cli

if __name__ == '__main__':
    cli()
