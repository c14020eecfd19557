"""chartpanel: responsive, unit-grouped time series charts for Qt hosts."""

__version__ = "0.1.0"
