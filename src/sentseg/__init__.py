"""
sentseg - Rule-based multilingual sentence boundary segmentation.

Non-boundary punctuation (abbreviations, initials, decimals, ellipses,
quoted asides) is shielded behind reversible sentinels before the text is
split on each language's terminal marks.
"""

__version__ = "0.1.0"

from .runtime.segmenter import Segmenter, segment, shared_segmenter

__all__ = ['Segmenter', 'segment', 'shared_segmenter', '__version__']
