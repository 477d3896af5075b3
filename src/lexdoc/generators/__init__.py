"""Per-document-type generators.

``DEFAULT_FACTORIES`` maps each implemented document type to a zero-argument
factory; the generator registry constructs instances from it on demand.
"""

from typing import Callable

from lexdoc.domain.models.enums import DocumentType
from lexdoc.generators.base import DocumentGenerator, GeneratorInput
from lexdoc.generators.non_compete import NonCompeteGenerator, NonCompeteInput
from lexdoc.generators.settlement import SettlementAgreementGenerator, SettlementInput

DEFAULT_FACTORIES: dict[DocumentType, Callable[[], DocumentGenerator]] = {
    DocumentType.NON_COMPETE_AGREEMENT: NonCompeteGenerator,
    DocumentType.SETTLEMENT_AGREEMENT: SettlementAgreementGenerator,
}

__all__ = [
    "DEFAULT_FACTORIES",
    "DocumentGenerator",
    "GeneratorInput",
    "NonCompeteGenerator",
    "NonCompeteInput",
    "SettlementAgreementGenerator",
    "SettlementInput",
]
