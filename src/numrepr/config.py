# -*- coding: utf-8 -*-
"""
Options controlling how numbers are formatted, and how to read them from a
YAML file.

A configuration file looks like::

    precision: 4
    show_sign: true
    lim_inf: -5
    lim_sup: 5
    representation: latex

All the keys are optional.
"""
import logging

import yaml
from attr import attributes, attr, fields, asdict

from numrepr.baseexceptions import ErrorWithAlternatives
from numrepr.floatformatting import (RepresentationType, MAX_PRECISION,
                                     format_float)

log = logging.getLogger(__name__)


class ConfigError(ErrorWithAlternatives):
    pass


def to_representation(value):
    """Convert ``'plain'`` or ``'latex'`` (in any case) to a
    `RepresentationType`."""
    if isinstance(value, RepresentationType):
        return value
    if isinstance(value, str):
        try:
            return RepresentationType[value.upper()]
        except KeyError:
            pass
    raise ConfigError("Bad representation: %r" % (value,), value,
                      [rt.value for rt in RepresentationType])

def _check_type(name, value, tp):
    #bool is a subclass of int, but precision: true is certainly a mistake.
    if not isinstance(value, tp) or (tp is int and isinstance(value, bool)):
        raise ConfigError("Bad input type for parameter '%s': Value '%s' is "
                          "not of type %s, but of type '%s'." %
                          (name, value, tp.__name__, type(value).__name__))


@attributes(frozen=True)
class FormatOptions:
    """Arguments of `format_float`, validated."""
    precision = attr(default=3)
    show_sign = attr(default=False)
    lim_inf = attr(default=-3)
    lim_sup = attr(default=3)
    representation = attr(default=RepresentationType.PLAIN,
                          converter=to_representation)

    @precision.validator
    def _check_precision(self, attribute, value):
        _check_type(attribute.name, value, int)
        if not 0 <= value <= MAX_PRECISION:
            raise ConfigError("'precision' must be between 0 and %d, "
                              "but it is %d." % (MAX_PRECISION, value))

    @show_sign.validator
    def _check_show_sign(self, attribute, value):
        _check_type(attribute.name, value, bool)

    @lim_inf.validator
    @lim_sup.validator
    def _check_limit(self, attribute, value):
        _check_type(attribute.name, value, int)

    def __attrs_post_init__(self):
        if self.lim_inf > self.lim_sup:
            raise ConfigError("'lim_inf' (%d) cannot be larger than "
                              "'lim_sup' (%d)." % (self.lim_inf, self.lim_sup))

    @classmethod
    def keys(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, mapping):
        if mapping is None:
            mapping = {}
        if not isinstance(mapping, dict):
            raise ConfigError("The configuration must be a mapping, not %s."
                              % type(mapping).__name__)
        for key in mapping:
            if key not in cls.keys():
                raise ConfigError("Unknown configuration key '%s'." % key,
                                  key, cls.keys())
        return cls(**mapping)

    @classmethod
    def from_yaml(cls, o):
        """Build the options from a YAML string or stream."""
        try:
            mapping = yaml.safe_load(o)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse yaml file: {e}") from e
        log.debug("Loaded format options: %s", mapping)
        return cls.from_mapping(mapping)

    def replace(self, **kwargs):
        """Return new options with the keys that are not None in kwargs
        replaced."""
        d = asdict(self, recurse=False)
        d.update({k: v for k, v in kwargs.items() if v is not None})
        return type(self)(**d)

    @property
    def kwargs(self):
        """Keyword arguments for `format_float`."""
        return dict(rt=self.representation, precision=self.precision,
                    show_sign=self.show_sign, lim_inf=self.lim_inf,
                    lim_sup=self.lim_sup)

    def format(self, x):
        return format_float(x, **self.kwargs)
