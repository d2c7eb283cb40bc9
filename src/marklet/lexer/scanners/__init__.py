"""Scanners for the marklet lexer.

BlockScannerMixin dispatches over the block classifiers at each line start;
LineScannerMixin splits a single line into inline tokens.
"""

from __future__ import annotations

from marklet.lexer.scanners.block import BlockScannerMixin
from marklet.lexer.scanners.line import LineScannerMixin

__all__ = [
    "BlockScannerMixin",
    "LineScannerMixin",
]
