"""Request URL construction."""

import re
from collections.abc import Iterable
from decimal import Decimal
from urllib.parse import urlencode, urljoin, urlsplit

from .exceptions import InvalidUrlError
from .models import QueryParameter

ParameterValue = str | int | float

SECRET_PARAMETERS = ("app_key",)


def _format_value(value: ParameterValue) -> str:
    # Plain decimal notation, 5e-05 is sent as 0.00005
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    return str(value)


def _as_pair(parameter: QueryParameter | tuple[str, ParameterValue]) -> tuple[str, str]:
    if isinstance(parameter, QueryParameter):
        name, value = parameter.name, parameter.value
    else:
        name, value = parameter
    return name, _format_value(value)


def build_url(
    base_origin: str,
    endpoint_path: str,
    parameters: Iterable[QueryParameter | tuple[str, ParameterValue]] = (),
) -> str:
    """Build an absolute request URL.

    The endpoint is resolved against the root of ``base_origin``; any path
    already present on the origin is ignored. Parameters are appended in
    the order given and duplicate names are kept.

    Args:
        base_origin: Absolute origin such as ``https://api.tfl.gov.uk``
        endpoint_path: Endpoint relative to the origin root
        parameters: Ordered query parameters

    Returns:
        The composed URL

    Raises:
        InvalidUrlError: If ``base_origin`` is not an absolute URL
    """
    try:
        parts = urlsplit(base_origin)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise InvalidUrlError(f"Invalid base origin {base_origin!r}: {e}") from e

    if not parts.scheme or not parts.hostname:
        raise InvalidUrlError(f"Base origin must be an absolute URL: {base_origin!r}")
    if re.search(r"\s", parts.hostname):
        raise InvalidUrlError(f"Invalid host in base origin: {base_origin!r}")

    url = urljoin(f"{parts.scheme}://{parts.netloc}/", endpoint_path)

    query = urlencode([_as_pair(p) for p in parameters])
    if query:
        url += ("&" if "?" in url else "?") + query
    return url


def redact_url(url: str, names: Iterable[str] = SECRET_PARAMETERS) -> str:
    """Replace the values of secret query parameters with ``***``."""
    for name in names:
        url = re.sub(rf"([?&]{re.escape(name)}=)[^&#]*", r"\1***", url)
    return url
