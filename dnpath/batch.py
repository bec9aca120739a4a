"""Apply single-value conversions across a sequence of inputs

Every input produces exactly one :class:`ConversionResult`, in input order, and
a malformed input never stops the rest of the batch from being processed.
"""

from . import convert
from .exceptions import FormatError, FormatWarning

import logging
from warnings import warn_explicit

logger = logging.getLogger('dnpath')


class ConversionResult(object):
    """The outcome of converting a single input

    :ivar input: The input string
    :ivar value: The converted string, or None on failure
    :ivar error: The :class:`.FormatError`, or None on success
    :ivar index: Position of the input in its batch, or None outside a batch
    """
    def __init__(self, input, value=None, error=None, index=None):
        self.input = input
        self.index = index
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """Return the converted value or raise the stored error

        :rtype: str
        :raises FormatError: if the conversion failed
        """
        if self.error is not None:
            raise self.error
        return self.value

    def __eq__(self, other):
        if not isinstance(other, ConversionResult):
            return NotImplemented
        return ((self.input, self.value, self.error, self.index) ==
                (other.input, other.value, other.error, other.index))

    def __repr__(self):
        if self.ok:
            return 'ConversionResult({0!r}, value={1!r})'.format(self.input, self.value)
        else:
            return 'ConversionResult({0!r}, error={1!r})'.format(self.input, self.error)


def _as_iterable(values):
    # a lone string is one input, not a sequence of characters
    if isinstance(values, str):
        return (values,)
    return values


def convert_each(func, values, **kwds):
    """Lazily apply a single-value conversion to each input

    Only :class:`.FormatError` is captured into the result; anything else propagates.

    :param callable func: One of the conversions in :mod:`dnpath.convert`
    :param values: An iterable of input strings, or a single string
    :param kwds: Passed through to ``func`` for every input
    :return: An iterator of :class:`ConversionResult`, one per input, in order, indexed from 0
    """
    n = 0
    failed = 0
    for index, value in enumerate(_as_iterable(values)):
        n += 1
        try:
            converted = func(value, **kwds)
        except FormatError as e:
            failed += 1
            logger.debug('{0} failed on input #{1}: {2}'.format(func.__name__, index, e))
            yield ConversionResult(value, error=e, index=index)
        else:
            yield ConversionResult(value, value=converted, index=index)
    logger.info('{0} processed {1} inputs ({2} failed)'.format(func.__name__, n, failed))


def path_to_dn_each(paths, cn_leaf=False):
    """Batch form of :func:`.path_to_dn`"""
    return convert_each(convert.path_to_dn, paths, cn_leaf=cn_leaf)


def dn_to_path_each(dns):
    """Batch form of :func:`.dn_to_path`"""
    return convert_each(convert.dn_to_path, dns)


def reverse_words_each(names):
    """Batch form of :func:`.reverse_words`"""
    return convert_each(convert.reverse_words, names)


def iter_values(results, report=True):
    """Yield the value of each successful result, skipping failures

    With ``report`` set, each failure is issued as a :class:`.FormatWarning` before
    moving on to the next result. Every failure is issued, repeats of the same input
    included. Use :meth:`.Converter.log_warnings` to send these to the log instead of
    stderr.

    :param results: An iterable of :class:`ConversionResult`
    :param bool report: Warn about failed results
    :return: An iterator of converted strings
    """
    for result in results:
        if result.ok:
            yield result.value
        elif report:
            if result.index is None:
                message = str(result.error)
            else:
                message = 'input #{0}: {1}'.format(result.index, result.error)
            # no registry, so the default filter action cannot suppress repeats
            warn_explicit(message, FormatWarning, __file__, 0, module=__name__, registry=None)
