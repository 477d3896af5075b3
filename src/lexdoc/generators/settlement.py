"""Settlement agreement generator."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from lexdoc.domain.models.document import Section
from lexdoc.domain.models.enums import DocumentType
from lexdoc.generators.base import DocumentGenerator, GeneratorInput


class SettlementInput(GeneratorInput):
    """User input for a settlement agreement."""

    dispute_party1_name: str = "Party 1"
    dispute_party1_address: str = "Address not provided"
    dispute_party2_name: str = "Party 2"
    dispute_party2_address: str = "Address not provided"
    dispute_description: str = ""
    settlement_amount: Optional[str] = None
    payment_terms: Optional[str] = None
    additional_parties: Optional[str] = None


class SettlementAgreementGenerator(DocumentGenerator):
    document_type = DocumentType.SETTLEMENT_AGREEMENT
    input_model = SettlementInput

    def document_title(self, user_input: SettlementInput) -> str:
        return "SETTLEMENT AGREEMENT"

    def base_filename(self, user_input: SettlementInput) -> str:
        return (
            f"Settlement_Agreement_{user_input.dispute_party1_name}"
            f"_{user_input.dispute_party2_name}"
        )

    def party_lines(self, user_input: SettlementInput) -> list[str]:
        lines = [
            "Disputing Party 1 Information:",
            f"Name: {user_input.dispute_party1_name}",
            f"Address: {user_input.dispute_party1_address}",
            "",
            "Disputing Party 2 Information:",
            f"Name: {user_input.dispute_party2_name}",
            f"Address: {user_input.dispute_party2_address}",
        ]
        if user_input.additional_parties:
            lines += ["", "Additional Parties:", user_input.additional_parties]
        return lines

    def sections(self, user_input: SettlementInput, generated: Mapping[str, Any]) -> list[Section]:
        i = user_input
        pick = self._pick
        return [
            Section(
                title="DISPUTE DESCRIPTION",
                content=pick(
                    generated,
                    "disputeDescription",
                    lambda: i.dispute_description
                    or "The Parties are engaged in a dispute they now wish to resolve.",
                ),
            ),
            Section(
                title="PAYMENT PROVISIONS",
                content=pick(generated, "paymentProvisions", lambda: self._payment(i)),
            ),
            Section(
                title="RELEASE OF CLAIMS",
                content=pick(
                    generated,
                    "releaseOfClaims",
                    lambda: (
                        "Upon performance of this Agreement, each Party releases the other "
                        "from all claims arising out of the dispute described above."
                    ),
                ),
            ),
            self._signature_section(pick(generated, "signatures", lambda: self._signatures(i))),
        ]

    # -- Fallback text -------------------------------------------------------

    @staticmethod
    def _payment(i: SettlementInput) -> str:
        if not i.settlement_amount:
            return "No monetary payment is required under this Agreement."
        text = f"Settlement Amount: {i.settlement_amount}"
        if i.payment_terms:
            text += f"\n\nPayment Terms: {i.payment_terms}"
        return text

    @staticmethod
    def _signatures(i: SettlementInput) -> str:
        text = (
            "IN WITNESS WHEREOF, the Parties have executed this Settlement Agreement on "
            f"{i.effective_date or '_____________'}.\n\n"
            f"FIRST PARTY:\n\n_______________________\n{i.dispute_party1_name}\n"
            f"Address: {i.dispute_party1_address}\nDate: _______________\n\n"
            f"SECOND PARTY:\n\n_______________________\n{i.dispute_party2_name}\n"
            f"Address: {i.dispute_party2_address}\nDate: _______________"
        )
        if i.additional_parties:
            text += (
                f"\n\nADDITIONAL PARTIES:\n\n{i.additional_parties}\n\n"
                "_______________________\nSignature\nDate: _______________"
            )
        return text
