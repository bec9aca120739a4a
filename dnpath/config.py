"""Provides support for setting global defaults and creating a Converter via config files and dicts"""

from .base import Converter
import json
import yaml


def _default_mapper(val):
    return val


def _bool_mapper(val):
    if isinstance(val, bool):
        return val
    raise TypeError('expected a boolean, got {0!r}'.format(val))


_converter_mappers = {
    'cn_leaf': _bool_mapper,
    'report_errors': _bool_mapper,
}

_global_mappers = {
    'DEFAULT_CN_LEAF': _bool_mapper,
    'DEFAULT_REPORT_ERRORS': _bool_mapper,
}


def normalize_global_config_param(key):
    """Normalize a global config key. Does not check validity of the key.

    :param str key: User-supplied global config key
    :return: The normalized key formatted as an attribute of :class:`.Converter`
    :rtype: str
    """
    key = key.upper()
    if not key.startswith('DEFAULT_'):
        key = 'DEFAULT_'+key
    return key


def set_global_config(global_config_dict):
    """Set the global defaults. The dict must be formatted as follows::

        {'global': {
            <config param>: <config value>,
         }
        }

    ``<config param>`` must match one of the ``DEFAULT_`` attributes on :class:`.Converter`. The ``DEFAULT_`` prefix
    is optional and dict keys are case-insensitive. Any parameters not specified will keep the hard-coded default.

    :param dict global_config_dict: See above.
    :rtype: None
    :raises KeyError: if the dict is incorrectly formatted or contains unknown config parameters
    :raises TypeError: if a value has the wrong type
    """
    bad = []
    for key, val in global_config_dict['global'].items():
        orig_key = key
        key = normalize_global_config_param(key)
        if hasattr(Converter, key):
            val = _global_mappers.get(key, _default_mapper)(val)
            setattr(Converter, key, val)
        else:
            bad.append(orig_key)
    if bad:
        raise KeyError('Unknown global config keys: {0}'.format(', '.join(bad)))


def create_converter(config_dict):
    """Create a new converter from a config dict formatted as follows::

        {'converter': {
            <constructor param>: <constructor value>,
         }
        }

    ``<constructor param>`` must be one of the :class:`.Converter` constructor keyword arguments. Parameters not
    given fall back to the global defaults.

    :param dict config_dict: See above.
    :return: The new Converter
    :rtype: Converter
    :raises KeyError: if the ``converter`` section is missing
    :raises TypeError: if an unknown constructor parameter is given or a value has the wrong type
    """
    conv_config_dict = dict(config_dict['converter'] or {})
    for key in _converter_mappers:
        if key in conv_config_dict:
            conv_config_dict[key] = _converter_mappers[key](conv_config_dict[key])
    return Converter(**conv_config_dict)


def load_file(path, file_decoder=None):
    """Load a config file. Must decode to dict with all components described on other methods as optional sections.
    A YAML example::

        global:
          CN_LEAF: true
          report_errors: false
        converter:
          cn_leaf: false

    :param path: A path to a config file. Provides support for YAML and JSON format, or you can specify your own decoder
                 that returns a dict.
    :param file_decoder: A callable returning a dict when passed a file-like object
    :return: The Converter if one was defined, None otherwise
    :rtype: Converter or None
    :raises RuntimeError: if an unsupported file extension was given without the ``file_decoder`` argument.
    """
    if file_decoder is None:
        if path.endswith('.yml') or path.endswith('.yaml'):
            file_decoder = yaml.safe_load
        elif path.endswith('.json'):
            file_decoder = json.load
        else:
            raise RuntimeError('Unsupported file type, must be YAML or JSON, or specify file_decoder argument')
    with open(path) as f:
        config_dict = file_decoder(f)
    return load_config_dict(config_dict)


def load_config_dict(config_dict):
    """Load config parameters from a dictionary. Must be formatted in the same was as ``load_file``

    :param dict config_dict: The config dictionary. See format in ``load_file``.
    :return: The Converter if one was defined, None otherwise
    :rtype: Converter or None
    """
    if 'global' in config_dict:
        set_global_config(config_dict)
    if 'converter' in config_dict:
        return create_converter(config_dict)
