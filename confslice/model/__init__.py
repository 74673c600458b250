"""Configuration tree model."""

from confslice.model.data import Data, DataKind
from confslice.model.keys import AnyKey, Array, Key, KeyKind, List, Pairs, Value
from confslice.model.scope import Configuration, Entity

__all__ = [
    "AnyKey",
    "Array",
    "Configuration",
    "Data",
    "DataKind",
    "Entity",
    "Key",
    "KeyKind",
    "List",
    "Pairs",
    "Value",
]
