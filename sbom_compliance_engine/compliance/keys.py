"""
Check keys and category labels shared by every compliance standard.
"""

from __future__ import annotations

from enum import IntEnum


class CheckKey(IntEnum):
    """One constant per compliance rule."""

    # Document level
    SBOM_SPEC = 0
    SBOM_SPEC_VERSION = 1
    SBOM_SPDXID = 2
    SBOM_NAME = 3
    SBOM_NAMESPACE = 4
    SBOM_LICENSE = 5
    SBOM_COMMENT = 6
    SBOM_ORG = 7
    SBOM_TOOL = 8
    SBOM_TIMESTAMP = 9
    SBOM_MACHINE_FORMAT = 10
    SBOM_HUMAN_FORMAT = 11
    SBOM_CREATOR = 12
    SBOM_DEPENDENCY = 13

    # Package level (OpenChain Telco)
    PACK_NAME = 20
    PACK_VERSION = 21
    PACK_SPDXID = 22
    PACK_SUPPLIER = 23
    PACK_DOWNLOAD_URL = 24
    PACK_FILE_ANALYZED = 25
    PACK_HASH = 26
    PACK_LICENSE_CON = 27
    PACK_LICENSE_DEC = 28
    PACK_COPYRIGHT = 29
    PACK_EXT_REF = 30

    # Component level (NTIA)
    COMP_CREATOR = 40
    COMP_NAME = 41
    COMP_VERSION = 42
    COMP_OTHER_UNIQ_IDS = 43
    COMP_DEPTH = 44

    # OWASP SCVS V2 (2.1 - 2.18)
    SCVS_MACHINE_READABLE = 60
    SCVS_AUTOMATED_CREATION = 61
    SCVS_UNIQUE_ID = 62
    SCVS_SIGNED = 63
    SCVS_SIGNATURE_CORRECT = 64
    SCVS_SIGNATURE_VERIFIED = 65
    SCVS_TIMESTAMPED = 66
    SCVS_RISK_ANALYZED = 67
    SCVS_DEPENDENCY_INVENTORY = 68
    SCVS_TEST_COMPONENTS = 69
    SCVS_PRIMARY_COMPONENT = 70
    SCVS_COMP_IDENTITY = 71
    SCVS_COMP_ORIGIN = 72
    SCVS_COMP_LICENSES = 73
    SCVS_COMP_VERIFIED_LICENSE = 74
    SCVS_COMP_COPYRIGHT = 75
    SCVS_COMP_MODIFICATIONS = 76
    SCVS_COMP_HASH = 77


# ---------------------------------------------------------------------------
# Category labels (Record.id for document-level checks)
# ---------------------------------------------------------------------------
CAT_SBOM_FORMAT = "SBOM Format"
CAT_SPDX_ELEMENTS = "SPDX Elements"
CAT_BUILD_INFO = "SBOM Build Information"
CAT_MACHINE_FORMAT = "Machine Readable Data Format"
CAT_HUMAN_FORMAT = "Human Readable Data Format"

CAT_AUTOMATION = "Automation Support"
CAT_DATA_FIELDS = "SBOM Data Fields"

CAT_SCVS_FORMAT = "SBOM Format"
CAT_SCVS_IDENTITY = "SBOM Identity"
CAT_SCVS_SIGNATURE = "SBOM Signature"
CAT_SCVS_ANALYSIS = "SBOM Analysis"
CAT_SCVS_INVENTORY = "SBOM Inventory"
CAT_SCVS_COMP_IDENTITY = "Component Identity"
CAT_SCVS_COMP_LICENSING = "Component Licensing"
CAT_SCVS_COMP_INTEGRITY = "Component Integrity"
