import logging

import config

logger = logging.getLogger('statchart.config_validator')

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _validate_year_range(config_module):
    """Validate the year detection range."""
    year_min = getattr(config_module, 'year_min', None)
    year_max = getattr(config_module, 'year_max', None)

    if not isinstance(year_min, int) or not isinstance(year_max, int):
        logger.error("year_min/year_max must be integers (got %r, %r)", year_min, year_max)
        return False
    if year_min > year_max:
        logger.error("year_min (%s) is greater than year_max (%s)", year_min, year_max)
        return False
    if year_min < 1000 or year_max > 9999:
        logger.error("Year range %s-%s must stay within 4-digit years", year_min, year_max)
        return False
    return True


def _validate_axis_padding(config_module):
    """Validate the axis padding ratio."""
    ratio = getattr(config_module, 'axis_padding_ratio', None)
    try:
        ratio = float(ratio)
    except (TypeError, ValueError):
        logger.error("Invalid axis_padding_ratio in config: %r", ratio)
        return False
    if ratio < 0:
        logger.error("axis_padding_ratio (%s) must not be negative", ratio)
        return False
    if ratio > 1:
        logger.warning("axis_padding_ratio (%s) is larger than the value range itself", ratio)
    return True


def _validate_chart_height(config_module):
    """Validate that the default chart height is one of the selectable heights."""
    height = getattr(config_module, 'default_chart_height', None)
    options = getattr(config_module, 'CHART_HEIGHT_OPTIONS', ())
    if height not in options:
        logger.warning("default_chart_height %r is not one of %s", height, options)
    return isinstance(height, int) and height > 0


def _validate_log_level(config_module):
    """Validate the configured log level."""
    level = str(getattr(config_module, 'log_level', '')).upper()
    if level not in VALID_LOG_LEVELS:
        logger.warning("Unknown log_level %r, logging will fall back to INFO", level)
    return True


def validate_config(config_module=None):
    """
    Validate the statchart configuration.

    Args:
        config_module: Module or object holding the settings (defaults to ``config``)

    Returns:
        bool: True if every setting is usable, False otherwise
    """
    config_module = config_module or config
    checks = [
        _validate_year_range(config_module),
        _validate_axis_padding(config_module),
        _validate_chart_height(config_module),
        _validate_log_level(config_module),
    ]
    if all(checks):
        logger.info("Configuration validated successfully")
        return True
    logger.error("Configuration validation failed")
    return False
