"""HTTP value types: Request, Response, Headers, QueryParams."""

from assetpipe.http.headers import Headers
from assetpipe.http.query import QueryParams
from assetpipe.http.request import Request
from assetpipe.http.response import Response

__all__ = ["Headers", "QueryParams", "Request", "Response"]
