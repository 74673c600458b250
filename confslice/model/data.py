"""Scalar values stored in the configuration tree."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from enum import StrEnum
from typing import TypeVar, cast

from confslice.errors import DataConversionError

T = TypeVar("T", int, float, str, Decimal)


class DataKind(StrEnum):
    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    NONE = "none"


@dataclass(slots=True)
class Data:
    """Scalar kept as its source text plus a kind tag.

    Typed reads reparse `text` on every call. String data keeps its
    surrounding quotes in `text`; escapes are never interpreted.
    """

    text: str = ""
    kind: DataKind = DataKind.NONE

    @classmethod
    def with_kind(cls, kind: DataKind) -> "Data":
        return cls(text="", kind=kind)

    def set(self, text: str, kind: DataKind) -> None:
        self.text = text
        self.kind = kind

    @property
    def value(self) -> int | float | str | None:
        """Natural Python value for the kind; `None` for `DataKind.NONE`."""
        match self.kind:
            case DataKind.INTEGER:
                return self.as_type(int)
            case DataKind.DOUBLE:
                return self.as_type(float)
            case DataKind.STRING:
                return self.as_type(str)
            case _:
                return None

    def as_type(self, target: type[T]) -> T:
        """Parse the stored text as `target` (`int`, `float`, `str` or `Decimal`).

        Reads as `Decimal` use a context precision equal to the length of the
        stored text, so the digits survive exactly as typed. Doubles
        read as `int` truncate toward zero.
        """
        if target is str:
            return cast(T, self._unquoted() if self.kind == DataKind.STRING else self.text)
        if target is Decimal:
            return cast(T, self._decimal())
        if target is int:
            if self.kind == DataKind.DOUBLE:
                return cast(T, int(self._decimal()))
            try:
                return cast(T, int(self.text))
            except ValueError:
                raise DataConversionError(self.text, "int") from None
        if target is float:
            try:
                return cast(T, float(self.text))
            except ValueError:
                raise DataConversionError(self.text, "float") from None
        raise TypeError(f"Unsupported conversion target: {target!r}")

    def _decimal(self) -> Decimal:
        try:
            with localcontext() as ctx:
                ctx.prec = max(len(self.text), 1)
                return +Decimal(self.text)
        except InvalidOperation:
            raise DataConversionError(self.text, "Decimal") from None

    def _unquoted(self) -> str:
        text = self.text
        if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
            return text[1:-1]
        return text


__all__ = ["Data", "DataKind"]
