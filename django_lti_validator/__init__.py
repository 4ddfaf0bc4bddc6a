from .encoding import encode
from .request_validator import (
    LaunchRequest,
    normalize_parameters,
    sign,
    signature_base_string,
    validate,
)
