# ABOUTME: Shoka - barcode-driven book cataloging from the command line.
# ABOUTME: Exposes the package version used by the CLI and HTTP User-Agent.

__version__ = "0.1.0"
