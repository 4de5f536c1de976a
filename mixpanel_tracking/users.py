from collections import namedtuple
from collections.abc import Mapping

TrackedUser = namedtuple('TrackedUser', ['id', 'name', 'email'])

USER_FIELDS = TrackedUser._fields


def _get_field(user, field):
    if isinstance(user, Mapping):
        return user.get(field)
    return getattr(user, field, None)


def validate_user(user):
    """
    Turn a "current user" value into a TrackedUser.

    :param user: A mapping or object exposing id, name and email.
    :return: TrackedUser, or None when the value is absent or any field is missing.
    """
    if user is None:
        return None

    values = [_get_field(user, field) for field in USER_FIELDS]
    if any(value is None for value in values):
        return None

    return TrackedUser(*values)
