# -*- coding: utf-8 -*-
"""Remote normalizer errors."""


class NormalizerError(Exception):
    """The remote normalizer is unavailable or returned an unusable answer."""
