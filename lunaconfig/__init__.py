"""lunaconfig's public API. Import from here.

Things may move around in modules deeper than this one.

"""
from lunaconfig.exceptions import (LunaError, SourceUnavailable, ParseError,
                                   MalformedArray, MalformedObject,
                                   MalformedString, MalformedBoolean,
                                   MalformedNumber, NestingTooDeep)
from lunaconfig.parser import Parser, load, loads
from lunaconfig.values import (Value, Null, Bool, Int, Float, String, Array,
                               Object, wrap)
