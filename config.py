"""
statchart configuration using environment variables and .env file support.

This module loads configuration from environment variables with .env file taking precedence.
The .env file values override system environment variables to ensure consistent configuration.
Every setting is optional; the defaults reproduce the dashboard's behaviour.
"""

import logging
import os
from dotenv import load_dotenv

logger = logging.getLogger('statchart.config')

# Load environment variables from .env file if it exists
# Use override=True to prioritize .env file over system environment variables
load_dotenv(override=True)


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_number(name, default, cast=int):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return cast(value.strip())
    except ValueError:
        logger.warning("Invalid %s value %r, using default %r", name, value, default)
        return default


# Logging Configuration (optional)
# Environment variables: STATCHART_LOG_LEVEL, STATCHART_LOG_DIRECTORY, STATCHART_LOG_TO_FILE
# File logging is off by default so importing the engine never touches the disk
log_level = os.getenv('STATCHART_LOG_LEVEL', 'INFO').upper()
log_directory = os.getenv('STATCHART_LOG_DIRECTORY', 'logs')
log_to_file = _env_bool('STATCHART_LOG_TO_FILE', False)

# Year Detection (optional)
# Environment variables: STATCHART_YEAR_MIN, STATCHART_YEAR_MAX
# A 4-digit cell only counts as a year label inside this range
year_min = _env_number('STATCHART_YEAR_MIN', 1900)
year_max = _env_number('STATCHART_YEAR_MAX', 2099)

# Axis Padding (optional)
# Environment variable: STATCHART_AXIS_PADDING_RATIO
# Fraction of the value range added beyond the extremes of bar/line charts
axis_padding_ratio = _env_number('STATCHART_AXIS_PADDING_RATIO', 0.15, float)

# Proportion Series Label (optional)
# Environment variable: STATCHART_PROPORTION_LABEL_PREFIX
# Pie/doughnut series are labelled "<prefix> <year>", e.g. "Data Tahun 2023"
proportion_label_prefix = os.getenv('STATCHART_PROPORTION_LABEL_PREFIX', 'Data Tahun')

# Chart Presentation (optional)
# Environment variables: STATCHART_DEFAULT_CHART_HEIGHT, STATCHART_RENDER_DPI
default_chart_height = _env_number('STATCHART_DEFAULT_CHART_HEIGHT', 400)
render_dpi = _env_number('STATCHART_RENDER_DPI', 150)

# Selectable chart heights in pixels
CHART_HEIGHT_OPTIONS = (300, 400, 500, 600)

# Messages shown by consumers when the engine returns an empty result
EMPTY_STATE_MESSAGES = {
    'no_data': "Tidak ada data untuk ditampilkan",
    'year_not_found': "Tahun {year} tidak tersedia dalam data ini.",
    'no_year_selected': "Tidak ada tahun yang dipilih untuk pie chart.",
    'no_positive_values': "Data untuk tahun {year} tidak memiliki nilai positif untuk ditampilkan.",
}
