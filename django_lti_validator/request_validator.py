import base64
import hashlib
import hmac
from collections.abc import Mapping

from oauthlib.common import safe_string_equals
from oauthlib.oauth1.rfc5849.signature import (
    signature_base_string as _signature_base_string,
)

from .encoding import encode

SIGNATURE_PARAMETER = "oauth_signature"


class LaunchRequest(object):
    """ Transport-independent view of an LTI launch request """

    def __init__(
        self, method=None, url=None, body=None, protocol=None, host=None, path=""
    ):
        self.method = method
        self.url = url
        self.body = body if body is not None else {}
        self.protocol = protocol
        self.host = host
        self.path = path

    def full_url(self):
        """
        The request URL as signed by the consumer. Falls back to protocol://host + path when no URL was
        supplied; returns None when neither is available.
        """
        if self.url:
            return str(self.url)
        if self.protocol and self.host:
            return "{}://{}{}".format(self.protocol, self.host, self.path or "")
        return None


def normalize_parameters(params):
    """ Joins key=encoded-value pairs with &, sorted on the whole pair string rather than by key then value """
    pairs = [
        "{}={}".format(key, encode(value)) for key, value in params.items()
    ]
    return "&".join(sorted(pairs))


def signature_base_string(request, params=None):
    """
    Builds the OAuth 1.0a signature base string for request.

    params defaults to the request body without oauth_signature. Returns None if the request has no
    method or no resolvable URL.
    """
    if params is None:
        params = {
            key: value
            for key, value in request.body.items()
            if key != SIGNATURE_PARAMETER
        }

    url = request.full_url()
    if not request.method or url is None:
        return None

    return _signature_base_string(
        str(request.method), url, normalize_parameters(params)
    )


def sign(secret, base_string):
    digest = hmac.new(
        str(secret).encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def validate(secret, request):
    """
    Checks the oauth_signature carried in the request body against the signature computed with secret.

    Never raises: a missing signature, secret, method or URL is reported as an invalid request.
    """
    if secret is None:
        return False

    body = request.body or {}
    if not isinstance(body, Mapping):
        return False

    params = dict(body)
    supplied = params.pop(SIGNATURE_PARAMETER, None)
    if not supplied:
        return False

    try:
        base_string = signature_base_string(request, params)
        if base_string is None:
            return False
        expected = sign(secret, base_string)
    except UnicodeError:
        # lone surrogates have no UTF-8 form
        return False

    return safe_string_equals(expected, str(supplied))
