"""Enumerations for legal document assembly."""

from enum import Enum


class SectionKind(str, Enum):
    """How a section body is laid out."""

    PROSE = "prose"  # Normalized and wrapped
    PREFORMATTED = "preformatted"  # Line structure kept verbatim (signature blocks)


class OutputFormat(str, Enum):
    """Supported output encodings."""

    PDF = "pdf"
    DOCX = "docx"

    @property
    def extension(self) -> str:
        return f".{self.value}"


class FontVariant(str, Enum):
    """Font weight used for a positioned run."""

    REGULAR = "regular"
    BOLD = "bold"


class Alignment(str, Enum):
    """Paragraph alignment in flow output."""

    LEFT = "left"
    CENTER = "center"


class NormalizationPolicy(str, Enum):
    """How deeply section text is normalized before layout."""

    FULL = "full"  # Markup, control chars, non-ASCII, whitespace
    MARKUP_ONLY = "markup_only"  # Emphasis markers only; newlines survive


class DocumentCategory(str, Enum):
    """Practice area a document type belongs to."""

    BUSINESS_COMMERCIAL = "BUSINESS_COMMERCIAL"
    EMPLOYMENT_HR = "EMPLOYMENT_HR"
    PROPERTY_REAL_ESTATE = "PROPERTY_REAL_ESTATE"
    FAMILY_LAW = "FAMILY_LAW"
    INTELLECTUAL_PROPERTY = "INTELLECTUAL_PROPERTY"
    CORPORATE_GOVERNANCE = "CORPORATE_GOVERNANCE"
    LITIGATION_DISPUTE = "LITIGATION_DISPUTE"
    REGULATORY_COMPLIANCE = "REGULATORY_COMPLIANCE"


class DocumentType(str, Enum):
    """Every document type known to the catalog.

    Only types with a registered generator can actually be produced.
    """

    EMPLOYMENT_CONTRACT = "EMPLOYMENT_CONTRACT"
    SERVICE_AGREEMENT = "SERVICE_AGREEMENT"
    LEASE_AGREEMENT = "LEASE_AGREEMENT"

    SALES_PURCHASE_AGREEMENT = "SALES_PURCHASE_AGREEMENT"
    DISTRIBUTION_AGREEMENT = "DISTRIBUTION_AGREEMENT"
    PARTNERSHIP_AGREEMENT = "PARTNERSHIP_AGREEMENT"

    ENHANCED_EMPLOYMENT_CONTRACT = "ENHANCED_EMPLOYMENT_CONTRACT"
    INDEPENDENT_CONTRACTOR_AGREEMENT = "INDEPENDENT_CONTRACTOR_AGREEMENT"
    NON_COMPETE_AGREEMENT = "NON_COMPETE_AGREEMENT"

    ENHANCED_LEASE_AGREEMENT = "ENHANCED_LEASE_AGREEMENT"
    SALE_OF_LAND_AGREEMENT = "SALE_OF_LAND_AGREEMENT"
    PROPERTY_MANAGEMENT_AGREEMENT = "PROPERTY_MANAGEMENT_AGREEMENT"

    PRENUPTIAL_AGREEMENT = "PRENUPTIAL_AGREEMENT"
    POSTNUPTIAL_AGREEMENT = "POSTNUPTIAL_AGREEMENT"
    CHILD_CUSTODY_SUPPORT_AGREEMENT = "CHILD_CUSTODY_SUPPORT_AGREEMENT"

    COPYRIGHT_ASSIGNMENT_AGREEMENT = "COPYRIGHT_ASSIGNMENT_AGREEMENT"
    TRADEMARK_LICENSE_AGREEMENT = "TRADEMARK_LICENSE_AGREEMENT"
    PATENT_LICENSING_AGREEMENT = "PATENT_LICENSING_AGREEMENT"

    ARTICLES_OF_ASSOCIATION = "ARTICLES_OF_ASSOCIATION"
    SHAREHOLDER_AGREEMENT = "SHAREHOLDER_AGREEMENT"
    BOARD_RESOLUTION = "BOARD_RESOLUTION"

    SETTLEMENT_AGREEMENT = "SETTLEMENT_AGREEMENT"
    ARBITRATION_AGREEMENT = "ARBITRATION_AGREEMENT"
    MEDIATION_AGREEMENT = "MEDIATION_AGREEMENT"

    DATA_PROTECTION_COMPLIANCE_AGREEMENT = "DATA_PROTECTION_COMPLIANCE_AGREEMENT"
    ANTI_MONEY_LAUNDERING_COMPLIANCE = "ANTI_MONEY_LAUNDERING_COMPLIANCE"
    ENVIRONMENTAL_COMPLIANCE_AGREEMENT = "ENVIRONMENTAL_COMPLIANCE_AGREEMENT"


_C = DocumentCategory
_T = DocumentType

DOCUMENT_CATEGORIES: dict[DocumentType, DocumentCategory] = {
    _T.EMPLOYMENT_CONTRACT: _C.EMPLOYMENT_HR,
    _T.SERVICE_AGREEMENT: _C.BUSINESS_COMMERCIAL,
    _T.LEASE_AGREEMENT: _C.PROPERTY_REAL_ESTATE,
    _T.SALES_PURCHASE_AGREEMENT: _C.BUSINESS_COMMERCIAL,
    _T.DISTRIBUTION_AGREEMENT: _C.BUSINESS_COMMERCIAL,
    _T.PARTNERSHIP_AGREEMENT: _C.BUSINESS_COMMERCIAL,
    _T.ENHANCED_EMPLOYMENT_CONTRACT: _C.EMPLOYMENT_HR,
    _T.INDEPENDENT_CONTRACTOR_AGREEMENT: _C.EMPLOYMENT_HR,
    _T.NON_COMPETE_AGREEMENT: _C.EMPLOYMENT_HR,
    _T.ENHANCED_LEASE_AGREEMENT: _C.PROPERTY_REAL_ESTATE,
    _T.SALE_OF_LAND_AGREEMENT: _C.PROPERTY_REAL_ESTATE,
    _T.PROPERTY_MANAGEMENT_AGREEMENT: _C.PROPERTY_REAL_ESTATE,
    _T.PRENUPTIAL_AGREEMENT: _C.FAMILY_LAW,
    _T.POSTNUPTIAL_AGREEMENT: _C.FAMILY_LAW,
    _T.CHILD_CUSTODY_SUPPORT_AGREEMENT: _C.FAMILY_LAW,
    _T.COPYRIGHT_ASSIGNMENT_AGREEMENT: _C.INTELLECTUAL_PROPERTY,
    _T.TRADEMARK_LICENSE_AGREEMENT: _C.INTELLECTUAL_PROPERTY,
    _T.PATENT_LICENSING_AGREEMENT: _C.INTELLECTUAL_PROPERTY,
    _T.ARTICLES_OF_ASSOCIATION: _C.CORPORATE_GOVERNANCE,
    _T.SHAREHOLDER_AGREEMENT: _C.CORPORATE_GOVERNANCE,
    _T.BOARD_RESOLUTION: _C.CORPORATE_GOVERNANCE,
    _T.SETTLEMENT_AGREEMENT: _C.LITIGATION_DISPUTE,
    _T.ARBITRATION_AGREEMENT: _C.LITIGATION_DISPUTE,
    _T.MEDIATION_AGREEMENT: _C.LITIGATION_DISPUTE,
    _T.DATA_PROTECTION_COMPLIANCE_AGREEMENT: _C.REGULATORY_COMPLIANCE,
    _T.ANTI_MONEY_LAUNDERING_COMPLIANCE: _C.REGULATORY_COMPLIANCE,
    _T.ENVIRONMENTAL_COMPLIANCE_AGREEMENT: _C.REGULATORY_COMPLIANCE,
}
