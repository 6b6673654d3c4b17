"""Error values and the ErrorKind taxonomy."""

from __future__ import annotations

import dataclasses

import pytest

from outcomes import Error, ErrorKind

pytestmark = pytest.mark.unit

FACTORIES = [
    (Error.failure, ErrorKind.FAILURE),
    (Error.not_found, ErrorKind.NOT_FOUND),
    (Error.validation, ErrorKind.VALIDATION),
    (Error.conflict, ErrorKind.CONFLICT),
    (Error.unauthorized, ErrorKind.UNAUTHORIZED),
    (Error.forbidden, ErrorKind.FORBIDDEN),
]


@pytest.mark.parametrize(("factory", "kind"), FACTORIES)
def test_factory_fixes_kind_and_keeps_inputs(factory, kind: ErrorKind) -> None:
    """Each factory tags its kind and stores code/description verbatim."""
    err = factory("Cfg.Code", "something happened")

    assert err.kind is kind
    assert err.code == "Cfg.Code"
    assert err.description == "something happened"


def test_every_kind_has_a_factory() -> None:
    assert {kind for _, kind in FACTORIES} == set(ErrorKind)


def test_taxonomy_is_closed() -> None:
    assert [k.name for k in ErrorKind] == [
        "FAILURE",
        "NOT_FOUND",
        "VALIDATION",
        "CONFLICT",
        "UNAUTHORIZED",
        "FORBIDDEN",
    ]


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_and_whitespace_strings_are_accepted(text: str) -> None:
    """No content validation happens at this layer."""
    err = Error.validation(text, text)

    assert err.code == text
    assert err.description == text


def test_error_is_immutable() -> None:
    err = Error.conflict("C", "taken")

    with pytest.raises(dataclasses.FrozenInstanceError):
        err.code = "other"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        err.kind = ErrorKind.FAILURE  # type: ignore[misc]


def test_kind_cannot_be_omitted() -> None:
    with pytest.raises(TypeError):
        Error("C", "no kind")  # type: ignore[call-arg]


def test_kind_must_be_an_error_kind() -> None:
    with pytest.raises(TypeError, match="kind"):
        Error("C", "stringly kind", "not_found")  # type: ignore[arg-type]


def test_errors_compare_by_fields() -> None:
    assert Error.not_found("N", "missing") == Error.not_found("N", "missing")
    assert Error.not_found("N", "missing") != Error.conflict("N", "missing")
    assert len({Error.failure("F", "x"), Error.failure("F", "x")}) == 1


def test_str_shows_code_and_description() -> None:
    assert str(Error.forbidden("Auth.Forbidden", "nope")) == "Auth.Forbidden: nope"
