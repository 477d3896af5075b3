"""Non-compete agreement generator."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from lexdoc.domain.models.document import Section
from lexdoc.domain.models.enums import DocumentType
from lexdoc.generators.base import DocumentGenerator, GeneratorInput


class NonCompeteInput(GeneratorInput):
    """User input for a non-compete agreement."""

    employer_name: str
    employer_address: str = ""
    employer_email: str = ""
    employee_name: str
    employee_address: str = ""
    employee_email: str = ""
    employee_position: str = ""
    employee_id: Optional[str] = None
    restriction_duration: str = "twelve (12) months"
    geographic_scope: str = "the territory in which the Employer conducts business"
    restricted_activities: str = "any business that competes with the Employer"
    consideration: str = "continued employment"


class NonCompeteGenerator(DocumentGenerator):
    document_type = DocumentType.NON_COMPETE_AGREEMENT
    input_model = NonCompeteInput

    def document_title(self, user_input: NonCompeteInput) -> str:
        return "NON-COMPETE AGREEMENT"

    def base_filename(self, user_input: NonCompeteInput) -> str:
        return f"Non_Compete_Agreement_{user_input.employer_name}_{user_input.employee_name}"

    def party_lines(self, user_input: NonCompeteInput) -> list[str]:
        lines = [
            "Employer Information:",
            f"Name: {user_input.employer_name}",
            f"Address: {user_input.employer_address}",
            f"Email: {user_input.employer_email}",
            "",
            "Employee Information:",
            f"Name: {user_input.employee_name}",
            f"Address: {user_input.employee_address}",
            f"Email: {user_input.employee_email}",
            f"Position: {user_input.employee_position}",
        ]
        if user_input.employee_id:
            lines.append(f"Employee ID: {user_input.employee_id}")
        return lines

    def sections(self, user_input: NonCompeteInput, generated: Mapping[str, Any]) -> list[Section]:
        i = user_input
        pick = self._pick
        return [
            Section(
                title="NON-COMPETITION RESTRICTIONS",
                content=pick(
                    generated, "nonCompetitionRestrictions", lambda: self._restrictions(i)
                ),
            ),
            Section(
                title="GEOGRAPHIC AND TEMPORAL SCOPE",
                content=pick(generated, "geographicAndTemporalScope", lambda: self._scope(i)),
            ),
            Section(
                title="CONSIDERATION",
                content=pick(
                    generated,
                    "consideration",
                    lambda: (
                        f"In exchange for the covenants in this Agreement, {i.employee_name} "
                        f"receives {i.consideration}, which both parties acknowledge as "
                        "adequate consideration."
                    ),
                ),
            ),
            Section(
                title="REMEDIES AND ENFORCEMENT",
                content=pick(
                    generated,
                    "remedies",
                    lambda: (
                        f"Any breach of this Agreement would cause {i.employer_name} "
                        "irreparable harm. The Employer may seek injunctive relief in "
                        "addition to any other remedy available at law or in equity."
                    ),
                ),
            ),
            Section(
                title="GENERAL PROVISIONS",
                content=pick(generated, "generalProvisions", lambda: self._general(i)),
            ),
            self._signature_section(pick(generated, "signatures", lambda: self._signatures(i))),
        ]

    # -- Fallback text -------------------------------------------------------

    @staticmethod
    def _restrictions(i: NonCompeteInput) -> str:
        return (
            f"During the term of employment with {i.employer_name} and for a period of "
            f"{i.restriction_duration} following termination of employment (the "
            f'"Restriction Period"), {i.employee_name} agrees not to engage in the '
            "following competitive activities:\n\n"
            f"Restricted Activities: {i.restricted_activities}"
        )

    @staticmethod
    def _scope(i: NonCompeteInput) -> str:
        return (
            "Geographic Scope: The restrictions set forth in this Agreement shall apply "
            f"within {i.geographic_scope}.\n\n"
            f"Duration: The restriction period shall continue for {i.restriction_duration}."
        )

    @staticmethod
    def _general(i: NonCompeteInput) -> str:
        text = "This Agreement constitutes the entire agreement between the parties."
        if i.governing_state:
            text += f" It is governed by the laws of {i.governing_state}."
        if i.additional_terms:
            text += f"\n\nAdditional Terms: {i.additional_terms}"
        return text

    @staticmethod
    def _signatures(i: NonCompeteInput) -> str:
        return (
            f"EMPLOYER:\n\n_______________________\n{i.employer_name}\n"
            "By: ___________________\nTitle: ________________\nDate: _______________\n\n\n"
            f"EMPLOYEE:\n\n_______________________\n{i.employee_name}\nDate: _______________"
        )
