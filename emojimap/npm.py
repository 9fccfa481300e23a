import io
import json
import tarfile
from typing import Any, cast

from emojimap.async_thread import run_in_thread
from emojimap.errors import MemberNotFoundError
from emojimap.http import get_url
from emojimap.logger import get_logger


logger = get_logger(__name__)

REGISTRY_URL = "https://registry.npmjs.org/"


async def get_package_info(package_name: str) -> dict[str, Any]:
    """Fetch the registry metadata of a given npm package."""

    return cast(dict[str, Any], json.loads(await get_url(REGISTRY_URL + package_name)))


def get_latest_tarball_url(package_info: dict[str, Any]) -> str:
    """Return the tarball url of the latest version of a package."""

    latest = package_info["dist-tags"]["latest"]
    return cast(str, package_info["versions"][latest]["dist"]["tarball"])


@run_in_thread
def extract_tar_member(archive: bytes, member: str) -> bytes:
    """
    Extract a single member from a (gzip compressed) tar archive.

    :param archive: the raw archive data
    :param member: the path of the member inside the archive
    :return: the raw content of the member
    """

    with tarfile.open(fileobj=io.BytesIO(archive), mode="r:*") as tar:
        for info in tar:
            if info.name != member or not info.isfile():
                continue

            file = tar.extractfile(info)
            if file is None:
                break
            with file:
                return file.read()

    raise MemberNotFoundError(member)


async def get_package_file(package_name: str, member: str) -> bytes:
    """Download the latest version of an npm package and return the content of one of its files."""

    package_info = await get_package_info(package_name)
    tarball_url = get_latest_tarball_url(package_info)
    logger.info("Downloading %s@%s", package_name, package_info["dist-tags"]["latest"])

    archive = cast(bytes, await get_url(tarball_url, text=False))
    return await extract_tar_member(archive, member)
