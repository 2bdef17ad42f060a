"""Remote package source - downloads the component package from an npm registry.

The tarball lands in the scratch directory under the name ``npm pack``
would give it (``scirexs-svseeds-ui-1.2.0.tgz``) and is unpacked next to
it, so the component files end up in ``<scratch>/package/_svseeds``.
"""

import logging
import tarfile
from pathlib import Path
from typing import Protocol
from urllib.parse import quote

import httpx

from .errors import FetchError
from .errors import PackageNotFoundError
from .layout import COMPONENT_DIR
from .layout import DEFAULT_REGISTRY
from .layout import PACKAGE_NAME

logger = logging.getLogger(__name__)


class PackageSource(Protocol):
    """Anything that can put the component files on disk."""

    def fetch(self, scratch_dir: Path) -> Path: ...


def tarball_prefix(package: str) -> str:
    """Return the file name prefix ``npm pack`` uses (``@scope/name`` -> ``scope-name``)."""
    return package.removeprefix("@").replace("/", "-")


class NpmPackageSource:
    """Fetch the latest published version of a package from an npm registry."""

    def __init__(
        self,
        package: str = PACKAGE_NAME,
        registry_url: str = DEFAULT_REGISTRY,
        client: httpx.Client | None = None,
        timeout: float = 60.0,
    ):
        """Initialize the source.

        Args:
            package: npm package name, scoped names included
            registry_url: Registry base URL
            client: Optional preconfigured client (used by tests)
            timeout: Per-request timeout in seconds
        """
        self.package = package
        self.registry_url = registry_url.rstrip("/")
        self._client = client
        self.timeout = timeout

    def fetch(self, scratch_dir: Path) -> Path:
        """Download and unpack the package into ``scratch_dir``.

        Args:
            scratch_dir: Empty directory owned by the current run

        Returns:
            Path to the extracted component directory

        Raises:
            PackageNotFoundError: The package, its archive, or its component directory is missing
            FetchError: Network, registry or archive failure
        """
        client = self._client or httpx.Client(timeout=self.timeout, follow_redirects=True)
        try:
            self._download(client, scratch_dir)
        except (httpx.HTTPError, ValueError) as e:
            raise FetchError(f"failed to download {self.package}: {e}") from e
        finally:
            if self._client is None:
                client.close()

        archive = self._find_archive(scratch_dir)
        logger.debug(f"Extracting {archive}")
        try:
            with tarfile.open(archive) as tar:
                tar.extractall(scratch_dir, filter="data")
        except tarfile.TarError as e:
            raise FetchError(f"failed to extract {archive.name}: {e}") from e

        components = (scratch_dir / "package" / COMPONENT_DIR).resolve()
        if not components.is_dir():
            raise PackageNotFoundError(f"package {self.package} has no {COMPONENT_DIR} directory")
        return components

    def _download(self, client: httpx.Client, scratch_dir: Path) -> Path:
        """Resolve the latest version and save its tarball into ``scratch_dir``."""
        manifest_url = f"{self.registry_url}/{quote(self.package, safe='@')}/latest"
        logger.info(f"Fetching package manifest from {manifest_url}")
        response = client.get(manifest_url)
        if response.status_code == 404:
            raise PackageNotFoundError(f"package {self.package} not found")
        response.raise_for_status()

        manifest = response.json()
        version = manifest.get("version")
        tarball_url = manifest.get("dist", {}).get("tarball")
        if not version or not tarball_url:
            raise FetchError(f"registry returned an incomplete manifest for {self.package}")

        target = scratch_dir / f"{tarball_prefix(self.package)}-{version}.tgz"
        logger.info(f"Downloading {self.package}@{version}")
        with client.stream("GET", tarball_url) as stream:
            stream.raise_for_status()
            with target.open("wb") as f:
                for chunk in stream.iter_bytes():
                    f.write(chunk)
        return target

    def _find_archive(self, scratch_dir: Path) -> Path:
        """Locate the downloaded archive the same way ``npm pack`` output is found."""
        prefix = tarball_prefix(self.package)
        for entry in sorted(scratch_dir.iterdir()):
            if entry.name.startswith(prefix) and entry.name.endswith("gz"):
                return entry
        raise PackageNotFoundError(f"package {self.package} not found")

    def __repr__(self) -> str:
        return f"NpmPackageSource({self.package} @ {self.registry_url})"
