"""
Module for loading the simulation parameters from a parameter file.

Two file formats are accepted:
- Plain: whitespace-separated values in the order
  c tau x1 x2 runtime dx outtime outfilename.
- INI: a [WaveParameters] section with one key per parameter.

Each value is converted separately and all problems are reported together
in a single ParameterError.
"""

import configparser
import logging
import os
from typing import Dict, Mapping, Optional, Tuple

import simulation_constants as constants
from wave_parameters import ParameterError, WaveParameters

logger = logging.getLogger(__name__)


class ParameterFileError(ParameterError):
    """The parameter file exists but cannot be read or has the wrong layout."""


def _read_plain_parameters(text: str, filepath: str) -> Dict[str, Optional[str]]:
    """Assign whitespace-separated tokens to the parameters in file order."""
    tokens = text.split()
    raw_values: Dict[str, Optional[str]] = {}
    for position, key in enumerate(constants.PARAMETER_ORDER):
        raw_values[key] = tokens[position] if position < len(tokens) else None
    if len(tokens) > len(constants.PARAMETER_ORDER):
        logger.warning("Ignoring %d extra value(s) at the end of '%s'.",
                       len(tokens) - len(constants.PARAMETER_ORDER), filepath)
    return raw_values

def _read_ini_parameters(config: configparser.ConfigParser, filepath: str) -> Dict[str, Optional[str]]:
    """Read the [WaveParameters] section of an already parsed INI file."""
    section = constants.INI_SECTION
    if section not in config:
        raise ParameterFileError([f"section [{section}] not found"], filepath)

    raw_values: Dict[str, Optional[str]] = {}
    for key in constants.PARAMETER_ORDER:
        if config.has_option(section, key):
            raw_values[key] = config.get(section, key).strip()
        else:
            raw_values[key] = None
    return raw_values

def read_parameter_file(filepath: str) -> Dict[str, Optional[str]]:
    """
    Read the raw (unconverted) parameter values from a parameter file.

    The format is detected from the content: a file with a section header is
    read as INI, anything else as a plain list of values.

    Parameters
    ----------
    filepath : str
        The path to the parameter file.

    Returns
    -------
    Dict[str, Optional[str]]
        The value string of every parameter, or None where a value is absent.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ParameterFileError
        If the file cannot be read or is not a valid INI file.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Parameter file '{filepath}' not found.")

    try:
        with open(filepath, 'r') as infile:
            text = infile.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ParameterFileError([f"cannot read file: {e}"], filepath) from e

    config = configparser.ConfigParser(inline_comment_prefixes=('#', ';'))
    try:
        config.read_string(text, source=filepath)
    except configparser.MissingSectionHeaderError:
        logger.debug("No section header in '%s'; reading it as a plain parameter list.", filepath)
        return _read_plain_parameters(text, filepath)
    except configparser.Error as e:
        raise ParameterFileError([f"cannot parse file: {e}"], filepath) from e

    logger.debug("Reading '%s' as an INI parameter file.", filepath)
    return _read_ini_parameters(config, filepath)

def _convert_float(key: str, value_str: Optional[str]) -> Tuple[Optional[float], Optional[str]]:
    """Convert one value, returning (value, None) on success or (None, message)."""
    if value_str is None or value_str == '':
        return None, f"missing value for '{key}'"
    try:
        return float(value_str), None
    except ValueError:
        return None, f"'{key}' must be a number, got '{value_str}'"

def parse_parameters(raw_values: Mapping[str, Optional[str]], source: Optional[str] = None) -> WaveParameters:
    """
    Convert raw parameter strings to a validated WaveParameters record.

    Parameters
    ----------
    raw_values : Mapping[str, Optional[str]]
        The value string of each parameter, as returned by read_parameter_file.
    source : Optional[str]
        Name of the file the values came from, used in error messages.

    Returns
    -------
    WaveParameters
        The converted and validated parameters.

    Raises
    ------
    ParameterError
        Listing every missing value, every value that is not a number and,
        if all values could be converted, every violated constraint.
    """
    errors = []
    values: Dict[str, object] = {}
    for key in constants.PARAMETER_ORDER:
        if key == 'outfilename':
            continue
        values[key], error = _convert_float(key, raw_values.get(key))
        if error:
            errors.append(error)

    outfilename = raw_values.get('outfilename')
    values['outfilename'] = outfilename.strip() if outfilename else ''
    if errors:
        if not values['outfilename']:
            errors.append("no output filename given")
        raise ParameterError(errors, source)

    return WaveParameters(**values).validate(source)
