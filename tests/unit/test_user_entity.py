"""Unit tests for the User entity: construction, validation and serialization."""

import pytest

from boruta_admin.domain.entities import Scope, ScopeWrapper, User, USER_DEFAULTS
from boruta_admin.domain.exceptions import UnknownFieldError, ValidationError


# ── Helpers ──


def _scope(scope_id=None, persisted=None, **extra) -> dict:
    raw = {"id": scope_id, **extra}
    if persisted is not None:
        raw["persisted"] = persisted
    return raw


# ── Construction ──


def test_empty_user_has_defaults():
    user = User()

    assert user.id is None
    assert user.email is None
    assert user.errors is None
    assert user.authorize_scopes is False
    assert user.authorized_scopes == []


def test_default_scope_list_is_not_shared():
    first = User()
    second = User()

    first.authorized_scopes.append(ScopeWrapper(model=Scope(id=1, persisted=True)))

    assert second.authorized_scopes == []
    assert USER_DEFAULTS["authorized_scopes"] == []


def test_partial_payload_keeps_other_defaults():
    user = User({"email": "a@b.com"})

    assert user.email == "a@b.com"
    assert user.id is None
    assert user.authorized_scopes == []


def test_authorized_scopes_are_wrapped():
    user = User({
        "id": 1,
        "authorized_scopes": [
            _scope(5, name="users:manage", label="Manage users"),
            _scope(None, name="draft"),
        ],
    })

    assert len(user.authorized_scopes) == 2
    first, second = (w.model for w in user.authorized_scopes)
    assert isinstance(first, Scope)
    assert first.id == 5
    assert first.name == "users:manage"
    assert first.persisted is True
    assert second.persisted is False


def test_explicit_persisted_flag_wins_over_id():
    user = User({"authorized_scopes": [_scope(5, persisted=False)]})

    assert user.authorized_scopes[0].model.persisted is False


def test_scopes_are_not_aliased_between_users():
    payload = {"authorized_scopes": [_scope(5)]}

    first = User(payload)
    second = User(payload)

    assert first.authorized_scopes[0].model is not second.authorized_scopes[0].model
    first.authorized_scopes[0].model.name = "changed"
    assert second.authorized_scopes[0].model.name == ""


def test_unknown_field_aborts_construction():
    with pytest.raises(UnknownFieldError) as exc_info:
        User({"id": 1, "role": "admin"})

    assert exc_info.value.field == "role"
    assert exc_info.value.entity_type == "User"


def test_unknown_field_leaves_existing_user_untouched():
    user = User({"id": 1, "email": "a@b.com"})

    with pytest.raises(UnknownFieldError):
        user.assign({"email": "other@b.com", "nickname": "x"})

    assert user.email == "a@b.com"


def test_assign_overwrites_only_named_fields():
    user = User({"id": 1, "email": "a@b.com", "authorized_scopes": [_scope(5)]})

    user.assign({"email": "new@b.com"})

    assert user.id == 1
    assert user.email == "new@b.com"
    assert [w.model.id for w in user.authorized_scopes] == [5]


# ── Serialization ──


def test_serialized_leaves_out_email_and_display_flag():
    user = User({
        "id": 1,
        "email": "a@b.com",
        "authorized_scopes": [_scope(5, persisted=True)],
    })
    user.authorize_scopes = True

    assert user.serialized == {
        "id": 1,
        "authorized_scopes": [
            {"id": 5, "name": "", "label": "", "public": False},
        ],
    }


def test_serialized_keeps_scope_order():
    user = User({"authorized_scopes": [_scope(3), _scope(1), _scope(2)]})

    ids = [s["id"] for s in user.serialized["authorized_scopes"]]
    assert ids == [3, 1, 2]


# ── Validation ──


def test_validate_empty_scope_list_succeeds():
    user = User({"id": 1})

    user.validate()

    assert user.errors is None


def test_validate_distinct_persisted_scopes_succeeds():
    user = User({"authorized_scopes": [_scope(1), _scope(2), _scope(3)]})

    user.validate()

    assert user.errors is None


def test_validate_unpersisted_scope_cannot_be_empty():
    user = User({"authorized_scopes": [_scope(None), _scope(None)]})

    with pytest.raises(ValidationError) as exc_info:
        user.validate()

    expected = {"authorized_scopes": ["cannot be empty"]}
    assert exc_info.value.errors == expected
    assert user.errors == expected


def test_validate_duplicate_scope_must_be_unique():
    user = User({"authorized_scopes": [_scope(1), _scope(2), _scope(1)]})

    with pytest.raises(ValidationError) as exc_info:
        user.validate()

    expected = {"authorized_scopes": ["must be unique"]}
    assert exc_info.value.errors == expected
    assert user.errors == expected


def test_validate_reports_first_offender_only():
    """A duplicate found first hides a later unpersisted scope, and vice versa."""
    duplicate_first = User({
        "authorized_scopes": [_scope(1), _scope(1), _scope(None)],
    })
    empty_first = User({
        "authorized_scopes": [_scope(None), _scope(2), _scope(2)],
    })

    with pytest.raises(ValidationError) as dup_info:
        duplicate_first.validate()
    with pytest.raises(ValidationError) as empty_info:
        empty_first.validate()

    assert dup_info.value.errors == {"authorized_scopes": ["must be unique"]}
    assert empty_info.value.errors == {"authorized_scopes": ["cannot be empty"]}


def test_validate_success_clears_errors_from_earlier_failure():
    user = User({"authorized_scopes": [_scope(None)]})
    with pytest.raises(ValidationError):
        user.validate()

    user.assign({"authorized_scopes": [_scope(1)]})
    user.validate()

    assert user.errors is None


def test_failing_scope_transform_leaves_user_untouched():
    user = User({"id": 1, "email": "a@b.com", "authorized_scopes": [_scope(5)]})

    with pytest.raises(AttributeError):
        user.assign({"email": "new@b.com", "authorized_scopes": [1]})

    assert user.email == "a@b.com"
    assert [w.model.id for w in user.authorized_scopes] == [5]
    user.validate()
