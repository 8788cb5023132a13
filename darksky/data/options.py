"""
Request options for forecast queries.

This module defines the enumerations accepted by the Dark Sky forecast
endpoint and a small chainable builder that turns them into query
parameters.

Usage:
    from darksky.data.options import Block, Language, Options, Unit

    options = (
        Options()
        .exclude([Block.MINUTELY, Block.FLAGS])
        .extend_hourly()
        .language(Language.ES)
        .unit(Unit.SI)
    )
    options.to_params()
    # {'exclude': 'minutely,flags', 'extend': 'hourly', 'lang': 'es', 'units': 'si'}
"""

from enum import Enum
from typing import Dict, Iterable, Union


class Block(str, Enum):
    """Name of a data block that can be excluded from a response."""

    CURRENTLY = "currently"
    DAILY = "daily"
    FLAGS = "flags"
    HOURLY = "hourly"
    MINUTELY = "minutely"


class Language(str, Enum):
    """Language of the ``summary`` text fields. English is the API default."""

    AR = "ar"
    AZ = "az"
    BE = "be"
    BS = "bs"
    CS = "cs"
    DE = "de"
    EL = "el"
    EN = "en"
    ES = "es"
    FR = "fr"
    HR = "hr"
    HU = "hu"
    ID = "id"
    IT = "it"
    IS = "is"
    KW = "kw"
    NB = "nb"
    NL = "nl"
    PL = "pl"
    PT = "pt"
    RU = "ru"
    SK = "sk"
    SR = "sr"
    SV = "sv"
    TET = "tet"
    TR = "tr"
    UK = "uk"
    X_PIG_LATIN = "x-pig-latin"
    ZH = "zh"
    ZH_TW = "zh-tw"


class Unit(str, Enum):
    """
    Unit system of the returned values.

    - ``auto``: selected from the geographic location
    - ``ca``: same as ``si`` but wind speed in km/h
    - ``si``: SI units
    - ``uk2``: same as ``si`` but distances in miles and wind speed in mph
    - ``us``: imperial units (the API default)
    """

    AUTO = "auto"
    CA = "ca"
    SI = "si"
    UK2 = "uk2"
    US = "us"


class Options:
    """
    Chainable builder for forecast query parameters.

    Every setter stores one query parameter and returns the builder, so
    calls can be chained. Setting the same option twice keeps the last value.
    """

    def __init__(self, params: Union[Dict[str, str], None] = None):
        self._params: Dict[str, str] = dict(params or {})

    def exclude(self, blocks: Iterable[Union[Block, str]]) -> "Options":
        """Exclude the given data blocks from the response."""
        names = [Block(block).value for block in blocks]
        self._params["exclude"] = ",".join(names)
        return self

    def extend_hourly(self) -> "Options":
        """Extend the hourly block to seven days ahead instead of two."""
        self._params["extend"] = "hourly"
        return self

    def language(self, language: Union[Language, str]) -> "Options":
        """Set the language of summary texts."""
        self._params["lang"] = Language(language).value
        return self

    def unit(self, unit: Union[Unit, str]) -> "Options":
        """Set the unit system of returned values."""
        self._params["units"] = Unit(unit).value
        return self

    @property
    def params(self) -> Dict[str, str]:
        """The underlying parameter mapping (mutable)."""
        return self._params

    def to_params(self) -> Dict[str, str]:
        """Return a copy of the query parameters."""
        return dict(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        return f"Options({self._params!r})"
