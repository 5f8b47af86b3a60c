"""Locating the Maven project and reading its descriptor."""

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from jirac.errors import MetadataMissingError, ProjectNotFoundError
from jirac.logging import get_logger
from jirac.models import ProjectMetadata

logger = get_logger("project")

POM_FILE = "pom.xml"

_SSH_URL = re.compile(r"^(?:ssh://)?[\w.-]+@([\w.-]+)[:/](.+)$")


class ProjectLocator:
    """Finds the repository root and checks it holds a Maven project."""

    def __init__(self, start: Path):
        self.start = Path(start).resolve()

    def find_root(self) -> Path:
        for parent in [self.start] + list(self.start.parents):
            if (parent / ".git").exists():
                return parent
        raise ProjectNotFoundError(f"Not in a git repository: {self.start}")

    def locate(self) -> Path:
        """Return the path of the project descriptor at the repository root."""
        root = self.find_root()
        pom = root / POM_FILE
        if not pom.is_file():
            raise ProjectNotFoundError(f"No {POM_FILE} found in {root}")
        logger.debug("Project descriptor: %s", pom)
        return pom


class MetadataReader:
    """Reads name, version and source control URL from a ``pom.xml``."""

    def __init__(self, pom_path: Path):
        self.pom_path = Path(pom_path)

    def read(self) -> ProjectMetadata:
        root = self._parse()
        namespace = _detect_xml_namespace(root)

        version = _child_text(root, namespace, "version")
        if not version:
            raise MetadataMissingError(
                f"Cannot read the project version from {self.pom_path}", field="version"
            )
        name = _child_text(root, namespace, "name")
        if not name:
            raise MetadataMissingError(
                f"Cannot read the project name from {self.pom_path}", field="name"
            )

        scm = root.find(_tag(namespace, "scm"))
        connection = _child_text(scm, namespace, "connection") if scm is not None else None
        scm_url = normalize_scm_url(connection) if connection else None
        if not scm_url:
            logger.warning("No scm connection in %s, commit links are disabled", self.pom_path)

        metadata = ProjectMetadata(name=name, version=version, scm_url=scm_url)
        logger.info("Project %s %s", metadata.name, metadata.version)
        return metadata

    def _parse(self) -> ET.Element:
        try:
            return ET.fromstring(self.pom_path.read_text(encoding="utf-8"))
        except ET.ParseError as e:
            raise MetadataMissingError(f"Cannot parse {self.pom_path}: {e}") from e
        except OSError as e:
            raise MetadataMissingError(f"Cannot read {self.pom_path}: {e}") from e


def normalize_scm_url(connection: str) -> Optional[str]:
    """Turn a Maven scm connection into a browsable base URL.

    ``scm:git:https://host/org/repo.git`` becomes ``https://host/org/repo``
    and ``scm:git:git@host:org/repo.git`` becomes ``https://host/org/repo``.
    """
    url = connection.strip()
    if url.startswith("scm:"):
        parts = url.split(":", 2)
        url = parts[2] if len(parts) == 3 else ""
    url = url.strip()
    if url.endswith(".git"):
        url = url[: -len(".git")]
    match = _SSH_URL.match(url)
    if match:
        url = f"https://{match.group(1)}/{match.group(2)}"
    return url.rstrip("/") or None


def _detect_xml_namespace(element: ET.Element) -> Optional[str]:
    match = re.match(r"\{(.+)}", element.tag)
    return match.group(1) if match else None


def _tag(namespace: Optional[str], name: str) -> str:
    return f"{{{namespace}}}{name}" if namespace else name


def _child_text(element: ET.Element, namespace: Optional[str], name: str) -> Optional[str]:
    text = element.findtext(_tag(namespace, name))
    if text is None:
        return None
    return text.strip() or None
