"""Translation resource providers.

A provider supplies the raw text of every translation resource, keyed by
locale. The locale key is the resource's file name, so a directory laid out
as::

    localization/
    ├── ar_QA
    ├── en_US
    └── tr_TR

provides the locales ``ar_QA``, ``en_US`` and ``tr_TR``.

Providers are read once, when a catalog is built.
"""

from __future__ import annotations

import logging
from importlib import resources as importlib_resources
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Mapping, Protocol, runtime_checkable

from simple_localization.errors import ResourceError

if TYPE_CHECKING:
    from simple_localization.config import LocalizationConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class ResourceProvider(Protocol):
    """Protocol for translation resource sources."""

    def load(self) -> dict[str, str]:
        """Load all resources.

        Returns:
            Dictionary of locale key to raw resource text.

        Raises:
            ResourceError: If the resources cannot be read.
        """
        ...


def _is_resource_name(name: str) -> bool:
    return bool(name) and not name.startswith((".", "_"))


def _decode(data: bytes, source: Path | str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ResourceError(f"Resource is not valid UTF-8: {e}", source) from e


class DirectoryResourceProvider:
    """Provider reading every file directly inside a directory.

    Hidden files (``.``) and private files (``_``) as well as
    subdirectories are skipped.

    Example:
        provider = DirectoryResourceProvider(Path("localization/"))
        provider.load()  # {"tr_TR": '"Hello" => "Merhaba"\\n', ...}
    """

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def _iter_files(self) -> Iterable[Path]:
        try:
            return sorted(
                path
                for path in self.directory.iterdir()
                if path.is_file() and _is_resource_name(path.name)
            )
        except OSError as e:
            raise ResourceError(f"Failed to list directory: {e}", self.directory) from e

    def load(self) -> dict[str, str]:
        if not self.directory.is_dir():
            raise ResourceError("Localization directory not found", self.directory)

        resources: dict[str, str] = {}
        for path in self._iter_files():
            try:
                data = path.read_bytes()
            except OSError as e:
                raise ResourceError(f"Failed to read resource: {e}", path) from e
            resources[path.name] = _decode(data, path)

        logger.debug(f"Loaded {len(resources)} resources from {self.directory}")
        return resources

    def __repr__(self) -> str:
        return f"DirectoryResourceProvider({str(self.directory)!r})"


class PackageResourceProvider:
    """Provider reading resources shipped inside an installed package.

    This is how translations are bundled with an application: the locale
    files live in a package directory and are installed as package data.

    Example:
        # myapp/locales/tr_TR, myapp/locales/en_US
        provider = PackageResourceProvider("myapp", "locales")
    """

    def __init__(self, package: str, subdirectory: str = "locales") -> None:
        self.package = package
        self.subdirectory = subdirectory

    def load(self) -> dict[str, str]:
        source = f"{self.package}/{self.subdirectory}"
        try:
            root = importlib_resources.files(self.package)
        except ModuleNotFoundError as e:
            raise ResourceError(f"Package not found: {self.package}", source) from e
        except Exception as e:
            # Importing the package runs its code; relative names raise TypeError.
            raise ResourceError(f"Failed to import package {self.package}: {e}", source) from e

        directory = root.joinpath(self.subdirectory) if self.subdirectory else root
        if not directory.is_dir():
            raise ResourceError("Localization directory not found", source)

        try:
            items = sorted(directory.iterdir(), key=lambda t: t.name)
        except OSError as e:
            raise ResourceError(f"Failed to list directory: {e}", source) from e

        resources: dict[str, str] = {}
        for item in items:
            if not item.is_file() or not _is_resource_name(item.name):
                continue
            item_source = f"{source}/{item.name}"
            try:
                data = item.read_bytes()
            except OSError as e:
                raise ResourceError(f"Failed to read resource: {e}", item_source) from e
            resources[item.name] = _decode(data, item_source)

        logger.debug(f"Loaded {len(resources)} resources from package {source}")
        return resources

    def __repr__(self) -> str:
        return f"PackageResourceProvider({self.package!r}, {self.subdirectory!r})"


class MappingResourceProvider:
    """Provider serving resources held in memory."""

    def __init__(self, resources: Mapping[str, str]) -> None:
        self._resources = dict(resources)

    def load(self) -> dict[str, str]:
        return dict(self._resources)

    def __repr__(self) -> str:
        return f"MappingResourceProvider(locales={sorted(self._resources)!r})"


def provider_from_config(config: "LocalizationConfig") -> ResourceProvider:
    """Select the resource provider described by a configuration.

    A localization directory takes precedence over a resource package.

    Raises:
        ResourceError: If the configuration names no resource source.
    """
    if config.localization_dir is not None:
        return DirectoryResourceProvider(config.localization_dir)
    if config.resource_package:
        return PackageResourceProvider(
            config.resource_package,
            config.resource_subdirectory,
        )
    raise ResourceError(
        "No translation resources configured; set LOCALIZATION_DIR "
        "or SIMPLE_LOCALIZATION_RESOURCE_PACKAGE"
    )
