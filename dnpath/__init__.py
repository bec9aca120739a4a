"""Imports and defines the core of the public API"""

from .base import Converter
from .batch import (
    ConversionResult,
    convert_each,
    path_to_dn_each,
    dn_to_path_each,
    reverse_words_each,
    iter_values,
)
from .convert import dc, domain, path_to_dn, dn_to_path, reverse_words
from .exceptions import DNPathError, FormatError, DNPathWarning, FormatWarning

__all__ = [
    'Converter',
    'ConversionResult',
    'convert_each',
    'path_to_dn_each',
    'dn_to_path_each',
    'reverse_words_each',
    'iter_values',
    'dc',
    'domain',
    'path_to_dn',
    'dn_to_path',
    'reverse_words',
    'DNPathError',
    'FormatError',
    'DNPathWarning',
    'FormatWarning',
]
