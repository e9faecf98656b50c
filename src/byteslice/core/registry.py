from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Type

from .encoder_base import Encoder
from .model import UnknownFormatError
from ..encoders import ALL_ENCODERS

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "raw"


class EncoderRegistry:
    def __init__(self, encoders: Iterable[Type[Encoder]]) -> None:
        table: dict[str, Type[Encoder]] = {}
        for enc in encoders:
            if enc.name in table:
                raise ValueError(f"Duplicate encoder name {enc.name!r}")
            table[enc.name] = enc
        self._by_name: Mapping[str, Type[Encoder]] = MappingProxyType(table)

    def resolve(self, name: str) -> Type[Encoder]:
        try:
            encoder = self._by_name[name]
        except KeyError:
            raise UnknownFormatError(
                f'unsupported format "{name}", available: {", ".join(self.names())}'
            ) from None
        logger.debug("resolved format %r to %s", name, encoder.__name__)
        return encoder

    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def items(self):
        return self._by_name.items()

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


# singleton used project-wide, fixed at import time
_REGISTRY = EncoderRegistry(ALL_ENCODERS)


def resolve(name: str) -> Type[Encoder]:
    return _REGISTRY.resolve(name)
