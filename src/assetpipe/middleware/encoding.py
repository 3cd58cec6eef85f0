"""Content encoding negotiation for asset responses.

Picks the best of the encodings assetpipe can produce (``gzip``,
``deflate``) from the request's ``Accept-Encoding`` and compresses the
body. Anything else passes the bytes through untouched.
"""

import gzip
import zlib

from assetpipe.config import AssetOptions
from assetpipe.http.request import Request
from assetpipe.http.response import Response

# Server preference when the client weighs encodings equally.
SUPPORTED_ENCODINGS: tuple[str, ...] = ("gzip", "deflate")


def parse_accept_encoding(value: str | None) -> dict[str, float]:
    """Parse an ``Accept-Encoding`` value into ``{coding: qvalue}``.

    Malformed q-values count as 0 (not acceptable).

    >>> parse_accept_encoding("gzip;q=0.8, br")
    {'gzip': 0.8, 'br': 1.0}
    """
    if not value:
        return {}
    weights: dict[str, float] = {}
    for item in value.split(","):
        coding, _, params = item.strip().partition(";")
        coding = coding.strip().lower()
        if not coding:
            continue
        q = 1.0
        for param in params.split(";"):
            name, _, raw = param.strip().partition("=")
            if name.strip().lower() == "q":
                try:
                    q = float(raw.strip())
                except ValueError:
                    q = 0.0
        weights[coding] = max(0.0, min(q, 1.0))
    return weights


def choose_encoding(
    accept_encoding: str | None,
    available: tuple[str, ...] = SUPPORTED_ENCODINGS,
) -> str | None:
    """Return the best acceptable encoding in *available*, or ``None``."""
    weights = parse_accept_encoding(accept_encoding)
    if not weights:
        return None
    wildcard = weights.get("*")
    best: str | None = None
    best_q = 0.0
    for coding in available:
        q = weights.get(coding, wildcard if wildcard is not None else 0.0)
        if q > best_q:
            best, best_q = coding, q
    return best


def compress(body: bytes, encoding: str, level: int = 6) -> bytes:
    """Compress *body* with *encoding* (``gzip`` or ``deflate``)."""
    if encoding == "gzip":
        # mtime=0 keeps the output stable for identical input
        return gzip.compress(body, compresslevel=level, mtime=0)
    if encoding == "deflate":
        return zlib.compress(body, level)
    msg = f"Unsupported content encoding: {encoding!r}"
    raise ValueError(msg)


def is_compressible(content_type: str, options: AssetOptions) -> bool:
    """Whether *content_type* starts with one of the compressible prefixes."""
    mime = content_type.split(";", 1)[0].strip().lower()
    return any(mime.startswith(prefix) for prefix in options.compressible_types)


def encoded_etag(key: str, encoding: str | None) -> str:
    """Strong ``ETag`` value for *key* served with *encoding*.

    Each content coding is a different byte sequence, so each gets its
    own tag: ``"<key>"`` for identity, ``"<key>-gzip"`` for gzip.
    """
    if encoding is None:
        return f'"{key}"'
    return f'"{key}-{encoding}"'


def encode_response(response: Response, request: Request, options: AssetOptions) -> Response:
    """Apply negotiated compression to an asset response.

    Non-compressible types are left alone. Compressible responses always
    get ``Vary: Accept-Encoding`` so shared caches key on it, 304s
    included, but a 304 body is never compressed.
    """
    if not options.enable_compression:
        return response
    if not is_compressible(response.content_type, options):
        return response

    response = response.with_header("Vary", "Accept-Encoding")
    if response.status == 304 or len(response.body) < options.compression_min_size:
        return response

    encoding = choose_encoding(request.accept_encoding)
    if encoding is None:
        return response

    compressed = compress(response.body, encoding, options.compression_level)
    if len(compressed) >= len(response.body):
        return response
    return response.with_body(compressed).with_header("Content-Encoding", encoding)
