'''
This module contains functions to transform the provider formatted strings to numbers.
'''
import logging
import math

from productinfo.models.productinfo_schemas import AttrValue

logger = logging.getLogger(__name__)


def parse_number(value: str) -> float:
    '''
    Parse a finite decimal number. Digit separators, nan and inf are rejected.
    '''
    if "_" in value:
        raise ValueError(f"could not convert string to float: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def first_number(value: str) -> float:
    '''
    Parse the leading whitespace separated token, dropping unit suffixes such as "GiB".
    '''
    tokens = value.split()
    if not tokens:
        raise ValueError(f"no numeric value in {value!r}")
    return parse_number(tokens[0])


def parse_attribute_value(value: str) -> float:
    '''
    Parse an attribute value, decimal commas are read as points: "3,5 GHz" -> 3.5.
    '''
    return first_number(value.replace(",", "."))


def parse_memory(value: str) -> float:
    '''
    Parse a memory size, commas are thousands separators: "1,952 GiB" -> 1952.0.
    '''
    return first_number(value.replace(",", ""))


def to_attr_value(attribute: str, raw: str) -> AttrValue:
    '''
    Build an AttrValue, falling back to 0 when the value is not numeric.
    '''
    try:
        value = parse_attribute_value(raw)
    except ValueError as e:
        logger.warning(f"Couldn't parse attribute value: [{attribute}={raw}]: {e}")
        value = 0.0
    return AttrValue(value=value, str_value=raw)
