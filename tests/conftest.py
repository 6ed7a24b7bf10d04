from __future__ import annotations

import pytest

from sbom_compliance_engine.sbom import (
    CdxDocument,
    Checksum,
    Component,
    ExternalRef,
    License,
    Relation,
    Spec,
    SpdxDocument,
    Tool,
)


def make_core_js() -> Component:
    return Component(
        name="core-js",
        version="v0.7.1",
        id="Package-go-module-github.com-CycloneDX-cyclonedx-go-21b8492723f5584d",
        spdx_id="SPDXRef-npm-core-js-3.6.5",
        copyright="Copyright 2001-2011 The Apache Software Foundation",
        file_analyzed=True,
        license_concluded="(LGPL-2.0-only OR LicenseRef-3)",
        license_declared="(LGPL-2.0-only AND LicenseRef-3)",
        download_location="https://registry.npmjs.org/core-js/-/core-js-3.6.5.tgz",
        supplier="Organization: core-js maintainers",
        checksums=[Checksum(algorithm="SHA256", value="ab" * 32)],
        external_refs=[
            ExternalRef(
                category="PACKAGE-MANAGER",
                ref_type="purl",
                locator="pkg:npm/core-js@3.6.5",
            )
        ],
        purls=["pkg:npm/core-js@3.6.5"],
        licenses=[License(short_id="LGPL-2.0-only")],
    )


def make_spdx_document() -> SpdxDocument:
    spec = Spec(
        spec_type="spdx",
        format="json",
        version="SPDX-2.3",
        name="nano",
        namespace="https://anchore.com/syft/dir/sbomqs-6ec18b03-96cb-4951-b299-929890c1cfc8",
        organization="interlynk",
        creation_timestamp="2023-05-04T09:33:40Z",
        comment="this is a general sbom created using syft tool",
        spdx_id="DOCUMENT",
        licenses=[License(short_id="cc0-1.0")],
    )
    comp = make_core_js()
    return SpdxDocument(
        spec=spec,
        components=[comp],
        tools=[Tool(name="syft", version="0.80.0")],
        relations=[Relation(source="DOCUMENT", target=comp.id)],
        primary_component=True,
    )


@pytest.fixture
def spdx_doc() -> SpdxDocument:
    return make_spdx_document()


@pytest.fixture
def empty_cdx_doc() -> CdxDocument:
    """Every string field empty, cyclonedx in xml."""
    return CdxDocument(spec=Spec(spec_type="cyclonedx", format="xml"))
