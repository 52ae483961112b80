"""
calkit.config
~~~~~~~~~~~~~

Environment-driven settings shared by the schedule generator and the
calendar queries.

=====================  ===============  ==========================
Variable               Field            Default
=====================  ===============  ==========================
CALKIT_NAIVE_TZ        naive_tz         ``"UTC"``
CALKIT_MAX_SPAN_DAYS   max_span_days    ``3_660_000``
=====================  ===============  ==========================
"""

from calkit.config.config import CalkitConfig, load_config

__all__ = ["CalkitConfig", "load_config"]
