# topmark:header:start
#
#   project      : RstExtract
#   file         : __main__.py
#   file_relpath : src/rstextract/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running RstExtract via ``python -m rstextract``.

It delegates directly to :func:`rstextract.cli.main.cli`, so the module form
and the ``rstextract`` console script behave the same.

Examples:
    Extract the documentation of the Go package in ``./pkg``::

        python -m rstextract ./pkg ./docs/api
"""

from __future__ import annotations

from rstextract.cli.main import cli

if __name__ == "__main__":
    cli()
