"""Django ORM implementation of the UserStore."""

from typing import Any

from accounts.domain import (
    BusinessData,
    ContactChannel,
    OrganizerData,
    Role,
    StudentData,
    User,
    UserId,
)
from accounts.domain.models import RoleData
from accounts.models import CampusUser
from accounts.stores.interfaces import UserStore


def _data_from_row(role: Role, payload: dict[str, Any]) -> RoleData:
    match role:
        case Role.STUDENT:
            return StudentData(interests=payload.get("interests", {}))
        case Role.ORGANIZER:
            return OrganizerData(organization=payload.get("organization", ""))
        case Role.BUSINESS:
            return BusinessData(company=payload.get("company", ""))


def _data_to_row(data: RoleData) -> dict[str, Any]:
    match data:
        case StudentData(interests=interests):
            return {"interests": dict(interests)}
        case OrganizerData(organization=organization):
            return {"organization": organization}
        case BusinessData(company=company):
            return {"company": company}


class DjangoUserStore(UserStore):
    """Database-backed user store using Django ORM."""

    def get_user(self, user_id: UserId) -> User | None:
        row = CampusUser.objects.filter(user_id=user_id.value).first()
        if row is None:
            return None
        role = Role(row.role)
        return User(
            id=UserId(row.user_id),
            role=role,
            data=_data_from_row(role, row.role_data),
            email=row.email,
            push_token=row.push_token,
            preferred_channel=ContactChannel(row.preferred_channel),
        )

    def save_user(self, user: User) -> None:
        CampusUser.objects.update_or_create(
            user_id=user.id.value,
            defaults={
                "role": user.role.value,
                "email": user.email,
                "push_token": user.push_token,
                "preferred_channel": user.preferred_channel.value,
                "role_data": _data_to_row(user.data),
            },
        )
