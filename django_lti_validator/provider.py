import logging

from django.conf import settings
from django.core.exceptions import DisallowedHost, ImproperlyConfigured

from .request_validator import LaunchRequest, validate

_logger = logging.getLogger(__name__)


def get_client_secret():
    secret = getattr(settings, "LTI_CLIENT_SECRET", None)
    if not secret:
        raise ImproperlyConfigured("LTI_CLIENT_SECRET is not set")
    return str(secret)


def launch_request_from_django(request):
    """
    Builds a LaunchRequest from a Django HttpRequest.

    Launch parameters are read from POST data for POST requests and from the query string otherwise. The
    URL excludes the query string, as OAuth signs it without one. If the Host header is not allowed, host
    and URL are left unset and the request will not validate.
    """
    params = request.POST if request.method == "POST" else request.GET
    body = {key: str(value) for key, value in params.dict().items()}

    try:
        host = request.get_host()
        url = request.build_absolute_uri(request.path)
    except DisallowedHost:
        _logger.warning("LTI launch received for a disallowed host")
        host = url = None

    return LaunchRequest(
        method=request.method,
        url=url,
        body=body,
        protocol=request.scheme,
        host=host,
        path=request.path,
    )


def is_valid_request(request, secret=None):
    """ Validates the OAuth signature of an LTI launch, using LTI_CLIENT_SECRET if secret is not given """
    if secret is None:
        secret = get_client_secret()

    launch_request = launch_request_from_django(request)
    valid = validate(secret, launch_request)
    if not valid:
        _logger.debug(
            "Invalid LTI signature for consumer key %s at %s",
            launch_request.body.get("oauth_consumer_key"),
            launch_request.full_url(),
        )
    return valid
