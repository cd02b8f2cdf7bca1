"""Error classes: construction, formatting and hierarchy."""

import pytest

from tessera.errors import InvalidInputError, TesseraError, UnterminatedCodeError
from tessera.location import SourceLocation
from tessera.scanner import ScanState


class TestInvalidInputError:
    def test_message_names_type(self) -> None:
        err = InvalidInputError(["a", "b"])
        assert "list" in str(err)
        assert err.value_type == "list"

    def test_none(self) -> None:
        assert "NoneType" in str(InvalidInputError(None))

    def test_hierarchy(self) -> None:
        err = InvalidInputError(1)
        assert isinstance(err, TesseraError)
        assert isinstance(err, TypeError)


class TestUnterminatedCodeError:
    def test_without_location(self) -> None:
        err = UnterminatedCodeError(ScanState.CODE)
        assert str(err).startswith("template did not end in markup state")
        assert "CODE" in str(err)
        assert err.lineno is None
        assert err.offset is None

    def test_with_location(self) -> None:
        err = UnterminatedCodeError(ScanState.COMMENT, SourceLocation(3, 7, 40))
        assert str(err).startswith("3:7 ")
        assert "COMMENT" in str(err)
        assert err.lineno == 3
        assert err.col_offset == 7
        assert err.offset == 40

    def test_with_source_file(self) -> None:
        loc = SourceLocation(1, 1, 0, "index.html")
        err = UnterminatedCodeError(ScanState.STRING_SINGLE, loc)
        assert str(err).startswith("index.html:1:1 ")
        assert err.source_file == "index.html"

    def test_message_format(self) -> None:
        err = UnterminatedCodeError(ScanState.CODE, SourceLocation(2, 4, 9, "a.html"))
        assert str(err) == (
            'a.html:2:4 template did not end in markup state '
            '(missing closing "}}"; scanner stopped in CODE)'
        )

    def test_is_tessera_error(self) -> None:
        with pytest.raises(TesseraError):
            raise UnterminatedCodeError(ScanState.CODE)


class TestSourceLocation:
    def test_str(self) -> None:
        assert str(SourceLocation(10, 5)) == "10:5"
        assert str(SourceLocation(10, 5, 0, "a.html")) == "a.html:10:5"

    def test_from_offset_first_line(self) -> None:
        loc = SourceLocation.from_offset(b"abc{{", 3)
        assert (loc.lineno, loc.col_offset, loc.offset) == (1, 4, 3)

    def test_from_offset_after_newlines(self) -> None:
        loc = SourceLocation.from_offset(b"a\nb\ncd{{", 6)
        assert (loc.lineno, loc.col_offset) == (3, 3)

    def test_from_offset_multibyte(self) -> None:
        data = "ü{{".encode()
        loc = SourceLocation.from_offset(data, 2)
        assert loc.col_offset == 2

    def test_frozen(self) -> None:
        loc = SourceLocation(1, 1)
        with pytest.raises(AttributeError):
            loc.lineno = 2  # type: ignore[misc]
