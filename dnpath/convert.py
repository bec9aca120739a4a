"""Conversions between canonical paths, distinguished names, and names

All functions here are pure: they take one string, return one string, and raise
:class:`.FormatError` when the input does not have the required shape.
"""

from . import grammar
from .exceptions import FormatError
from .utils import compile_anchored

import logging
import re

logger = logging.getLogger('dnpath')

_path_re = compile_anchored(grammar.canonicalPath)
_dn_re = compile_anchored(grammar.distinguishedName, re.IGNORECASE)
_dc_re = compile_anchored(grammar.domainComponents, re.IGNORECASE)
_name_re = re.compile(grammar.name)

_dc_split_re = re.compile(grammar.dcSeparator, re.IGNORECASE)
_ou_split_re = re.compile(grammar.ouSeparator, re.IGNORECASE)
_cn_prefix_re = re.compile(r'^' + grammar.cnPrefix, re.IGNORECASE)
_name_split_re = re.compile(grammar.nameSeparator)

PATH_EXPECTED = 'is not a recognizable path, expected domain.tld/ou/.../leaf'
DN_EXPECTED = ('is not a recognizable distinguished name, expected [CN=leaf,][OU=ou,...]DC=domain,DC=tld '
               'with values limited to: {0}'.format(grammar.ALLOWED_CHARS_DESC))
DC_EXPECTED = ('is not a list of domain components, expected DC=domain,DC=tld with values limited to: '
               '{0}'.format(grammar.ALLOWED_CHARS_DESC))
NAME_EXPECTED = 'does not look like a name, expected at least two space-separated words'


def dc(domain):
    """Convert a DNS dotted domain name to a DN made of domain components

    :param str domain: A dotted domain, e.g. ``example.com``
    :return: e.g. ``DC=example,DC=com``
    :rtype: str
    """
    return ','.join(['DC={0}'.format(label) for label in domain.split('.')])


def domain(dc):
    """Convert a DN made only of domain components to a DNS dotted domain name

    :param str dc: e.g. ``DC=example,DC=com``
    :return: e.g. ``example.com``
    :rtype: str
    :raises FormatError: if anything other than domain components is present
    """
    if not _dc_re.match(dc):
        raise FormatError(dc, DC_EXPECTED)
    return '.'.join(_dc_split_re.split(dc)[1:])


def path_to_dn(path, cn_leaf=False):
    """Convert a canonical path to a distinguished name

    The domain labels keep their order, the segments after it are reversed so
    that the most specific component comes first::

        >>> path_to_dn('blackmesa.net/Science/Physics/Einstein Albert', cn_leaf=True)
        'CN=Einstein Albert,OU=Physics,OU=Science,DC=blackmesa,DC=net'

    :param str path: A canonical path, ``domain.tld[/ou[/...]]``
    :param bool cn_leaf: Emit the deepest segment as ``CN=`` rather than ``OU=``
    :return: The distinguished name
    :rtype: str
    :raises FormatError: if the path does not start with a dotted domain
    """
    if not _path_re.match(path):
        raise FormatError(path, PATH_EXPECTED)
    parts = path.split('/')
    if len(parts) > 1:
        suffix = ',' + dc(parts[0])
        if cn_leaf:
            prefix = 'CN='
        else:
            prefix = 'OU='
        ret = prefix + ',OU='.join(reversed(parts[1:])) + suffix
    else:
        ret = dc(parts[0])
    logger.debug('path_to_dn: {0} => {1}'.format(path, ret))
    return ret


def dn_to_path(dn):
    """Convert a distinguished name to a canonical path

    Both ``CN=`` and ``OU=`` components become plain path segments, so the
    conversion is lossy for the leaf type::

        >>> dn_to_path('CN=Einstein Albert,OU=Physics,OU=Science,DC=blackmesa,DC=net')
        'blackmesa.net/Science/Physics/Einstein Albert'

    :param str dn: ``[CN=leaf,][OU=ou,...]DC=domain,DC=tld``
    :return: The canonical path
    :rtype: str
    :raises FormatError: if the DN is malformed or has values outside the allowed characters
    """
    if not _dn_re.match(dn):
        raise FormatError(dn, DN_EXPECTED)
    parts = _dc_split_re.split(dn)
    ret = '.'.join(parts[1:])
    prefix = _cn_prefix_re.sub('', parts[0], count=1)
    segments = [seg for seg in _ou_split_re.split(prefix) if seg]
    if segments:
        ret += '/' + '/'.join(reversed(segments))
    logger.debug('dn_to_path: {0} => {1}'.format(dn, ret))
    return ret


def reverse_words(name):
    """Reverse the order of space-separated words, e.g. swap first and last name

    Runs of spaces are collapsed and leading or trailing spaces dropped.

    :param str name: At least two words
    :return: The words in reverse order
    :rtype: str
    :raises FormatError: if fewer than two words are present
    """
    if not _name_re.search(name):
        raise FormatError(name, NAME_EXPECTED)
    ret = ' '.join(reversed(_name_split_re.split(name))).strip()
    logger.debug('reverse_words: {0} => {1}'.format(name, ret))
    return ret
