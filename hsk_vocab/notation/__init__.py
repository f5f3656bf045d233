"""Tone notation codecs."""

from types import MappingProxyType

from ..types import NotationKey
from .base import NotationCodec
from .bopomofo import BopomofoCodec
from .numeric import NumericCodec
from .passthrough import PassthroughCodec
from .pinyin import PinyinCodec
from .wadegiles import WadeGilesCodec

# One shared, stateless instance per transcription key
CODECS: MappingProxyType[str, NotationCodec] = MappingProxyType({
    codec.key: codec
    for codec in (
        PinyinCodec(),
        NumericCodec(),
        WadeGilesCodec(),
        BopomofoCodec(),
        PassthroughCodec(),
    )
})


def get_codec(key: NotationKey) -> NotationCodec:
    """Return the codec registered for a transcription key.

    Raises:
        KeyError: If no codec handles the key.
    """
    return CODECS[key]


__all__ = [
    "CODECS",
    "get_codec",
    "NotationCodec",
    "BopomofoCodec",
    "NumericCodec",
    "PassthroughCodec",
    "PinyinCodec",
    "WadeGilesCodec",
]
