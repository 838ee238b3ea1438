"""An interpreter for the dae scripting language: lexer, parser, tree-walking interpreter and command line tool."""

__version__ = "0.1.0"