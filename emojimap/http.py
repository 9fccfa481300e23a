from urllib.parse import urlparse

from aiohttp import ClientError, ClientSession

from emojimap.environment import GITHUB_TOKEN
from emojimap.errors import FetchError


USER_AGENT = "emojimap"
GITHUB_API_HOST = "api.github.com"


def get_headers(url: str) -> dict[str, str]:
    """Return the request headers to send to a given url."""

    headers = {"User-Agent": USER_AGENT}
    if GITHUB_TOKEN and urlparse(url).hostname == GITHUB_API_HOST:
        headers["Authorization"] = f"token {GITHUB_TOKEN}"

    return headers


async def get_url(url: str, text: bool = True) -> str | bytes:
    """
    Fetch a given url and return the complete response body.

    :param url: the url to fetch
    :param text: whether to decode the body as utf-8 text instead of returning the raw bytes
    :return: the response body
    """

    try:
        async with ClientSession(raise_for_status=True) as session:
            async with session.get(url, headers=get_headers(url)) as response:
                if text:
                    return await response.text(encoding="utf-8")
                return await response.read()
    except ClientError as e:
        raise FetchError(url, e) from e
