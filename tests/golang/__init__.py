# topmark:header:start
#
#   project      : RstExtract
#   file         : __init__.py
#   file_relpath : tests/golang/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
