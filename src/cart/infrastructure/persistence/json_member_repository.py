"""JSON-document-backed implementation of MemberRepository."""

from __future__ import annotations

from cart.domain.model.member import Member
from cart.domain.repository.member_repository import MemberRepository


class JsonMemberRepository(MemberRepository):

    def __init__(self, document: dict[str, list[dict]]) -> None:
        self._document = document

    # --- MemberRepository interface -------------------------------------------

    def get_by_id(self, member_id: int) -> Member | None:
        for raw in self._load_raw():
            if raw["id"] == member_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> Member | None:
        for raw in self._load_raw():
            if raw["email"] == email:
                return self._to_domain(raw)
        return None

    def save(self, member: Member) -> None:
        records = self._load_raw()
        if member.id is None:
            member.id = max((r["id"] for r in records), default=0) + 1

        for i, raw in enumerate(records):
            if raw["id"] == member.id:
                records[i] = self._to_raw(member)
                break
        else:
            records.append(self._to_raw(member))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(member: Member) -> dict:
        return {
            "id": member.id,
            "email": member.email,
            "password": member.password,
            "point": member.point,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Member:
        return Member(
            id=raw["id"],
            email=raw["email"],
            password=raw["password"],
            point=raw.get("point", 0),
        )

    def _load_raw(self) -> list[dict]:
        return self._document["members"]
