"""Bundled license templates and identifier lookup."""
from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from importlib import resources
from typing import Dict, List, Optional, Sequence

from .errors import UnknownLicense

logger = logging.getLogger(__name__)

PACKAGE_NAME = __package__ or "lic_cli"
LICENSES_ROOT = resources.files(PACKAGE_NAME) / "data" / "licenses"

COPYRIGHT_PREAMBLE = "Copyright (c) {{year}} {{author}}"


def normalize_license_key(name: str) -> str:
    """Normalize a license selector to simplify alias matching."""
    return "".join(ch for ch in name.lower() if ch.isalnum())


@dataclass(frozen=True)
class LicenseSpec:
    key: str
    name: str
    spdx_id: str
    filename: str
    aliases: Sequence[str] = ()
    preamble: Optional[str] = None

    def template_resource(self) -> resources.abc.Traversable:
        return LICENSES_ROOT / self.filename


@dataclass(frozen=True)
class LicenseTemplate:
    spec: LicenseSpec
    body: str

    @property
    def key(self) -> str:
        return self.spec.key

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def spdx_id(self) -> str:
        return self.spec.spdx_id

    @property
    def preamble(self) -> Optional[str]:
        return self.spec.preamble


LICENSE_SPECS: Sequence[LicenseSpec] = (
    LicenseSpec("mit", "MIT License", "MIT", "MIT.txt", aliases=("mitlicense", "expat")),
    LicenseSpec(
        "apache-2.0",
        "Apache License 2.0",
        "Apache-2.0",
        "Apache-2.0.txt",
        aliases=("apache", "apache2", "apache-2"),
    ),
    LicenseSpec(
        "gpl-3.0",
        "GNU General Public License v3.0",
        "GPL-3.0",
        "GPL-3.0.txt",
        aliases=("gpl3", "gplv3", "gpl-3"),
    ),
    LicenseSpec(
        "gpl-2.0",
        "GNU General Public License v2.0",
        "GPL-2.0",
        "GPL-2.0.txt",
        aliases=("gpl2", "gplv2", "gpl-2"),
    ),
    LicenseSpec(
        "agpl-3.0",
        "GNU Affero General Public License v3.0",
        "AGPL-3.0",
        "AGPL-3.0.txt",
        aliases=("agpl", "agpl3", "agplv3", "agpl-3"),
    ),
    LicenseSpec(
        "lgpl-3.0",
        "GNU Lesser General Public License v3.0",
        "LGPL-3.0",
        "LGPL-3.0.txt",
        aliases=("lgpl3", "lgplv3", "lgpl-3"),
    ),
    LicenseSpec(
        "lgpl-2.1",
        "GNU Lesser General Public License v2.1",
        "LGPL-2.1",
        "LGPL-2.1.txt",
        aliases=("lgpl21", "lgplv2.1"),
    ),
    LicenseSpec(
        "mpl-2.0",
        "Mozilla Public License 2.0",
        "MPL-2.0",
        "MPL-2.0.txt",
        aliases=("mpl", "mpl2"),
        preamble=COPYRIGHT_PREAMBLE,
    ),
    LicenseSpec(
        "epl-2.0",
        "Eclipse Public License 2.0",
        "EPL-2.0",
        "EPL-2.0.txt",
        aliases=("epl", "epl2"),
        preamble=COPYRIGHT_PREAMBLE,
    ),
    LicenseSpec(
        "bsd-3-clause",
        "BSD 3-Clause \"New\" or \"Revised\" License",
        "BSD-3-Clause",
        "BSD-3-Clause.txt",
        aliases=("bsd3", "bsd-3", "newbsd"),
    ),
    LicenseSpec(
        "bsd-2-clause",
        "BSD 2-Clause \"Simplified\" License",
        "BSD-2-Clause",
        "BSD-2-Clause.txt",
        aliases=("bsd2", "bsd-2", "simplifiedbsd"),
    ),
    LicenseSpec("isc", "ISC License", "ISC", "ISC.txt"),
    LicenseSpec(
        "bsl-1.0",
        "Boost Software License 1.0",
        "BSL-1.0",
        "BSL-1.0.txt",
        aliases=("bsl", "boost"),
        preamble=COPYRIGHT_PREAMBLE,
    ),
    LicenseSpec(
        "cc0-1.0",
        "Creative Commons Zero v1.0 Universal",
        "CC0-1.0",
        "CC0-1.0.txt",
        aliases=("cc0", "creative-commons-zero"),
    ),
    LicenseSpec("unlicense", "The Unlicense", "Unlicense", "Unlicense.txt", aliases=("public-domain",)),
)


def load_license_text(spec: LicenseSpec) -> str:
    resource = spec.template_resource()
    if not resource.is_file():
        raise FileNotFoundError(f"Template file not found: {spec.filename}")
    return resource.read_text(encoding="utf-8")


@functools.lru_cache(maxsize=None)
def load_catalog() -> Dict[str, LicenseTemplate]:
    """Read every bundled template once and index it by normalized selector."""
    catalog: Dict[str, LicenseTemplate] = {}
    for spec in LICENSE_SPECS:
        template = LicenseTemplate(spec=spec, body=load_license_text(spec))
        for selector in (spec.key, spec.spdx_id, *spec.aliases):
            catalog[normalize_license_key(selector)] = template
    logger.debug("Loaded %d license templates", len(LICENSE_SPECS))
    return catalog


def available() -> List[LicenseTemplate]:
    catalog = load_catalog()
    return [catalog[normalize_license_key(spec.key)] for spec in LICENSE_SPECS]


def identifiers() -> List[str]:
    return [spec.key for spec in LICENSE_SPECS]


def lookup(identifier: str) -> LicenseTemplate:
    template = load_catalog().get(normalize_license_key(identifier))
    if template is None:
        raise UnknownLicense(identifier, sorted(identifiers()))
    return template
