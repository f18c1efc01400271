"""Steering CLI Module"""

# standard library
from urllib.parse import quote


def proxies(
    proxy_host: str | None,
    proxy_port: int | None,
    proxy_user: str | None,
    proxy_pass: str | None,
) -> dict[str, str]:
    """Return a requests proxies dict for the provided settings.

    Returns an empty dict when host or port is missing.
    """
    if not proxy_host or not proxy_port:
        return {}

    auth = ''
    if proxy_user and proxy_pass:
        auth = f'{quote(proxy_user, safe="")}:{quote(proxy_pass, safe="")}@'

    proxy_url = f'{auth}{proxy_host}:{proxy_port}'
    return {
        'http': f'http://{proxy_url}',
        'https': f'http://{proxy_url}',
    }
