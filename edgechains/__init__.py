"""Edge chain cleaning, point reordering, polygonal sampling, line fitting and metachain search."""

__version__ = "0.1.0"

__all__ = ["buffering", "chain", "lsq", "metachains", "options", "reorg", "sampling"]