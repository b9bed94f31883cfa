"""Webinar entity."""

from datetime import datetime

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.webinar.domain.entity.user_entity import UserEntity


MAX_SEATS = 1000


def validate_not_blank(instance, attribute, value):
    if not value or not value.strip():
        raise DomainError(f'Webinar {attribute.name} is required')


def validate_non_negative(instance, attribute, value):
    if value < 0:
        raise DomainError('Webinar seats cannot be negative')


def validate_max_seats(instance, attribute, value):
    if value > MAX_SEATS:
        raise DomainError(f'Webinar must have at most {MAX_SEATS} seats')


@attrs.define
class Webinar:
    id: str = attrs.field(
        validator=[attrs.validators.instance_of(str), validate_not_blank],
        on_setattr=attrs.setters.frozen,
    )
    organizer_id: str = attrs.field(
        validator=[attrs.validators.instance_of(str), validate_not_blank],
        on_setattr=attrs.setters.frozen,
    )
    title: str = attrs.field(validator=attrs.validators.instance_of(str))
    start_date: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    end_date: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    seats: int = attrs.field(
        validator=[attrs.validators.instance_of(int), validate_non_negative, validate_max_seats]
    )

    def is_organizer(self, user: UserEntity) -> bool:
        return user.id == self.organizer_id

    def change_seats(self, *, seats: int) -> None:
        # Both rules are checked before any mutation
        if seats <= self.seats:
            raise DomainError('You cannot reduce the number of seats')
        if seats > MAX_SEATS:
            raise DomainError(f'Webinar must have at most {MAX_SEATS} seats')
        self.seats = seats
