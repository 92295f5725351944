"""
Unit tests for sensitivity resolution and field description.

Purpose:
- Every marking form is recognized (Annotated extra, field helpers, registration).
- Markings are inherited through re-declarations and never stack.
- Write-access problems surface at describe/declaration time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import pytest
from pydantic import BaseModel, ConfigDict, Field

from graph_redactor import (
    SENSITIVE,
    RedactionConfigError,
    RedactionErrorCode,
    TypeKind,
    describe_fields,
    is_sensitive,
    redactable,
    register_sensitive,
    sensitive_field,
)
from graph_redactor.resolver import resolve_sensitivity
from sample_models import (
    Account,
    AdminUser,
    BaseContact,
    BaseUser,
    Contact,
    Credentials,
    Opaque,
    Root,
    Session,
)


def _by_name(cls):
    return {d.name: d for d in describe_fields(cls)}


def test_pydantic_annotated_and_schema_extra_markings():
    fields = _by_name(Account)
    assert fields["password"].sensitive
    assert fields["api_key"].sensitive
    assert fields["profile"].sensitive
    assert not fields["login"].sensitive
    assert not fields["address"].sensitive


def test_dataclass_metadata_and_annotated_markings():
    fields = _by_name(Credentials)
    assert fields["password"].sensitive
    assert fields["otp"].sensitive
    assert not fields["user"].sensitive
    # Annotated extras are stripped from the declared type.
    assert fields["otp"].annotation is int


def test_descriptor_kinds():
    fields = _by_name(Root)
    assert fields["not_sensitive"].kind is TypeKind.LEAF
    assert fields["child"].kind is TypeKind.COMPOSITE


def test_is_sensitive_matches_descriptor_flag():
    for d in describe_fields(Account):
        assert is_sensitive(d) is d.sensitive


@pytest.mark.parametrize(
    ("owner", "name"),
    [
        (BaseContact, "phone"),
        (Contact, "phone"),
        (BaseUser, "email"),
        (AdminUser, "email"),
    ],
)
def test_marking_is_inherited_by_redeclarations(owner, name):
    assert resolve_sensitivity(owner, name) is True


def test_unmarked_subclass_fields_stay_plain():
    assert resolve_sensitivity(Contact, "nickname") is False
    assert resolve_sensitivity(AdminUser, "role") is False


def test_plain_classes_have_no_fields():
    assert describe_fields(Opaque) == ()
    assert describe_fields(dict) == ()


def test_registration_marks_existing_field():
    assert not _by_name(Session)["id"].sensitive

    register_sensitive(Session, "id")

    assert _by_name(Session)["id"].sensitive


def test_registration_is_inherited():
    @dataclass
    class Base:
        token: str = ""

    @dataclass
    class Derived(Base):
        extra: str = ""

    register_sensitive(Base, "token")

    assert resolve_sensitivity(Derived, "token") is True
    assert resolve_sensitivity(Derived, "extra") is False


def test_registration_on_marked_base_stacks_for_subclasses():
    register_sensitive(BaseUser, "email")
    # BaseUser now carries two markings on one declaration.
    with pytest.raises(RedactionConfigError) as ei:
        describe_fields(AdminUser)
    assert ei.value.error_code is RedactionErrorCode.STACKED_MARKING


def test_registration_of_unknown_field_is_rejected():
    with pytest.raises(RedactionConfigError) as ei:
        register_sensitive(Session, "nope")
    assert ei.value.error_code is RedactionErrorCode.UNKNOWN_FIELD
    assert ei.value.field_name == "nope"


def test_registration_on_annotated_field_stacks():
    register_sensitive(Credentials, "otp")
    with pytest.raises(RedactionConfigError) as ei:
        describe_fields(Credentials)
    assert ei.value.error_code is RedactionErrorCode.STACKED_MARKING


def test_double_annotated_marking_is_rejected():
    @dataclass
    class Twice:
        pw: Annotated[str, SENSITIVE, SENSITIVE] = ""

    with pytest.raises(RedactionConfigError) as ei:
        redactable(Twice)
    assert ei.value.error_code is RedactionErrorCode.STACKED_MARKING
    assert ei.value.owner is Twice
    assert ei.value.field_name == "pw"


def test_annotated_plus_metadata_marking_is_rejected():
    @dataclass
    class Mixed:
        pw: Annotated[str, SENSITIVE] = sensitive_field(default="")

    with pytest.raises(RedactionConfigError) as ei:
        describe_fields(Mixed)
    assert ei.value.error_code is RedactionErrorCode.STACKED_MARKING


def test_frozen_dataclass_with_sensitive_field_fails_at_declaration():
    with pytest.raises(RedactionConfigError) as ei:

        @redactable
        @dataclass(frozen=True)
        class Token:
            value: Annotated[str, SENSITIVE] = ""

    assert ei.value.error_code is RedactionErrorCode.READ_ONLY_FIELD
    assert "frozen" in str(ei.value)


def test_frozen_model_with_sensitive_field_fails_at_declaration():
    with pytest.raises(RedactionConfigError) as ei:

        @redactable
        class Token(BaseModel):
            model_config = ConfigDict(frozen=True)
            value: Annotated[str, SENSITIVE] = ""

    assert ei.value.error_code is RedactionErrorCode.READ_ONLY_FIELD


def test_frozen_pydantic_field_fails_at_declaration():
    class Token(BaseModel):
        value: Annotated[str, SENSITIVE] = Field(default="", frozen=True)

    with pytest.raises(RedactionConfigError) as ei:
        describe_fields(Token)
    assert ei.value.error_code is RedactionErrorCode.READ_ONLY_FIELD


def test_frozen_type_without_sensitive_fields_is_fine():
    @redactable
    @dataclass(frozen=True)
    class Point:
        x: int = 0
        y: int = 0

    assert [d.name for d in describe_fields(Point)] == ["x", "y"]


def test_unresolvable_dataclass_annotation_is_a_config_error():
    class Local:
        pass

    @dataclass
    class Holder:
        item: Local | None = None

    with pytest.raises(RedactionConfigError) as ei:
        describe_fields(Holder)
    assert ei.value.error_code is RedactionErrorCode.UNRESOLVED_ANNOTATION


def test_redactable_returns_the_class_unchanged():
    assert redactable(Account) is Account
