import pytest

from labelsheet.exceptions import (
    EmptyInputError,
    EncodingError,
    LabelSheetError,
    MalformedBulkInputError,
    TemplateError,
)
from labelsheet.model.enums import Symbology


@pytest.mark.parametrize(
    "exc_type", [EncodingError, EmptyInputError, MalformedBulkInputError, TemplateError]
)
def test_hierarchy(exc_type: type) -> None:
    assert issubclass(exc_type, LabelSheetError)
    assert issubclass(exc_type, Exception)


def test_message_and_cause() -> None:
    root = ValueError("root")
    err = LabelSheetError("wrapped", cause=root)
    assert str(err) == "wrapped"
    assert err.__cause__ is root


def test_encoding_error_context() -> None:
    err = EncodingError("bad", symbology=Symbology.EAN8, index=3)
    assert err.symbology is Symbology.EAN8
    assert err.index == 3
    assert err.__cause__ is None


def test_encoding_error_defaults() -> None:
    err = EncodingError("bad")
    assert err.symbology is None
    assert err.index is None


def test_distinct_kinds_are_distinguishable() -> None:
    with pytest.raises(EmptyInputError):
        try:
            raise EmptyInputError("blank")
        except MalformedBulkInputError:
            pytest.fail("EmptyInputError caught as MalformedBulkInputError")
