"""
Porter stemming for English words.

    >>> from porterstem import stem
    >>> stem("caresses")
    'caress'
"""

from porterstem.api import StemmerI
from porterstem.porter import (
    PorterStemmer,
    stem,
    stem_string,
    stem_without_lowercasing,
)

__version__ = "1.0.0"
