from oauthlib.oauth1.rfc5849.utils import escape


def encode(value):
    """
    Percent-encodes value using RFC 3986 unreserved characters (space becomes %20).

    Raises UnicodeEncodeError if value holds a lone surrogate, which has no UTF-8 encoding.
    """
    if not isinstance(value, str):
        value = str(value)
    return escape(value)
