"""
cscanner Command-Line Interface
===============================

- **cscan**: scan a C source file and write its token listing

The tool is a Click application with built-in help and consistent
exit codes (see cscanner.cli.errors).
"""

__all__ = ["cscan"]
