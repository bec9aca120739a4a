"""The Converter class, global defaults, and logging and warning controls"""

from . import batch
from . import convert
from .exceptions import DNPathWarning

import logging
import warnings

logger = logging.getLogger('dnpath')
logger.addHandler(logging.NullHandler())
logger.setLevel(logging.DEBUG)  # set to DEBUG to allow handler levels full discretion


_showwarning_default = warnings.showwarning


def _showwarning_disabled(message, category, filename, lineno, file=None, line=None):
    if not issubclass(category, DNPathWarning):
        _showwarning_default(message, category, filename, lineno, file, line)


def _showwarning_log(message, category, filename, lineno, file=None, line=None):
    if issubclass(category, DNPathWarning):
        logger.warning('{0}: {1}'.format(category.__name__, message))
    else:
        _showwarning_default(message, category, filename, lineno, file, line)


class Converter(object):
    """Converts paths, distinguished names, and names with a fixed set of options

    The module-level functions in :mod:`dnpath.convert` and :mod:`dnpath.batch` can
    be used directly; this class binds their options once, either explicitly or from
    the ``DEFAULT_`` class attributes (see :mod:`dnpath.config`).
    """

    # global defaults
    DEFAULT_CN_LEAF = False
    DEFAULT_REPORT_ERRORS = True

    # logging config
    LOG_FORMAT = '[%(asctime)s] %(name)s %(levelname)s : %(message)s'

    ## logging and warning controls

    @staticmethod
    def enable_logging(level=logging.DEBUG):
        """Enable logging output to stderr"""
        stderr_handler = logging.StreamHandler()
        stderr_handler.setFormatter(logging.Formatter(Converter.LOG_FORMAT))
        stderr_handler.setLevel(level)
        logger.addHandler(stderr_handler)
        return stderr_handler

    @staticmethod
    def disable_warnings():
        """Prevent all dnpath warnings from being shown - default action for others"""
        warnings.showwarning = _showwarning_disabled

    @staticmethod
    def log_warnings():
        """Log all dnpath warnings rather than showing them - default action for others"""
        warnings.showwarning = _showwarning_log

    @staticmethod
    def default_warnings():
        """Always take the default action for warnings"""
        warnings.showwarning = _showwarning_default

    ## basic methods

    def __init__(self, cn_leaf=None, report_errors=None):
        """Create a converter

        :param bool cn_leaf: Emit the deepest path segment as ``CN=`` rather than ``OU=``. Default
                             :attr:`DEFAULT_CN_LEAF`.
        :param bool report_errors: Issue a :class:`.FormatWarning` for each input skipped by the ``*_values``
                                   methods. Default :attr:`DEFAULT_REPORT_ERRORS`.
        """
        if cn_leaf is None:
            cn_leaf = Converter.DEFAULT_CN_LEAF
        if report_errors is None:
            report_errors = Converter.DEFAULT_REPORT_ERRORS

        self.cn_leaf = cn_leaf
        self.report_errors = report_errors

    def __repr__(self):
        return 'Converter(cn_leaf={0!r}, report_errors={1!r})'.format(self.cn_leaf, self.report_errors)

    ## single values

    def path_to_dn(self, path):
        """Convert a canonical path to a distinguished name. See :func:`dnpath.convert.path_to_dn`."""
        return convert.path_to_dn(path, cn_leaf=self.cn_leaf)

    def dn_to_path(self, dn):
        """Convert a distinguished name to a canonical path. See :func:`dnpath.convert.dn_to_path`."""
        return convert.dn_to_path(dn)

    def reverse_words(self, name):
        """Reverse the word order of a name. See :func:`dnpath.convert.reverse_words`."""
        return convert.reverse_words(name)

    ## batches

    def path_to_dn_each(self, paths):
        """Yield a :class:`.ConversionResult` for each path"""
        return batch.path_to_dn_each(paths, cn_leaf=self.cn_leaf)

    def dn_to_path_each(self, dns):
        """Yield a :class:`.ConversionResult` for each distinguished name"""
        return batch.dn_to_path_each(dns)

    def reverse_words_each(self, names):
        """Yield a :class:`.ConversionResult` for each name"""
        return batch.reverse_words_each(names)

    def path_to_dn_values(self, paths):
        """Yield the distinguished name for each valid path, reporting the rest per ``report_errors``"""
        return batch.iter_values(self.path_to_dn_each(paths), report=self.report_errors)

    def dn_to_path_values(self, dns):
        """Yield the path for each valid distinguished name, reporting the rest per ``report_errors``"""
        return batch.iter_values(self.dn_to_path_each(dns), report=self.report_errors)

    def reverse_words_values(self, names):
        """Yield each valid name reversed, reporting the rest per ``report_errors``"""
        return batch.iter_values(self.reverse_words_each(names), report=self.report_errors)
