"""Structured payloads that plug into the record codec."""

from ndef_codec.payload.base import Payload
from ndef_codec.payload.external import ANDROID_APP_TYPE, ExternalPayload
from ndef_codec.payload.smart_poster import RTD_SMART_POSTER, SmartPosterPayload
from ndef_codec.payload.text import RTD_TEXT, TextPayload
from ndef_codec.payload.uri import (
    HTTP,
    HTTP_WWW,
    HTTPS,
    HTTPS_WWW,
    NONE_ABBRE,
    RTD_URI,
    URI_PREFIXES,
    UriPayload,
)

__all__ = [
    "Payload",
    # URI
    "RTD_URI",
    "URI_PREFIXES",
    "NONE_ABBRE",
    "HTTP_WWW",
    "HTTPS_WWW",
    "HTTP",
    "HTTPS",
    "UriPayload",
    # External
    "ANDROID_APP_TYPE",
    "ExternalPayload",
    # Text
    "RTD_TEXT",
    "TextPayload",
    # Smart poster
    "RTD_SMART_POSTER",
    "SmartPosterPayload",
]
