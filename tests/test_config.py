"""Tests for ContextVar-based scan configuration.

Validates thread isolation, context manager behavior, and per-call overrides.
"""

import logging
from threading import Thread

import pytest

from tessera import (
    ScanConfig,
    get_scan_config,
    is_scannable_encoding,
    reset_scan_config,
    scan,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.encoding == "utf-8"
        assert config.trace is False

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.trace = True  # type: ignore[misc]

    def test_unknown_encoding(self) -> None:
        with pytest.raises(LookupError):
            ScanConfig(encoding="no-such-codec")

    @pytest.mark.parametrize(
        "encoding",
        ["shift_jis", "cp932", "gbk", "big5", "johab", "iso2022_jp", "utf-16", "cp037"],
    )
    def test_unscannable_encoding_rejected(self, encoding: str) -> None:
        """Codecs whose multi-byte characters can hold ASCII bytes are refused."""
        with pytest.raises(ValueError, match="cannot be scanned byte by byte"):
            ScanConfig(encoding=encoding)
        assert is_scannable_encoding(encoding) is False

    @pytest.mark.parametrize("encoding", ["utf-8", "UTF8", "latin-1", "cp1252", "ascii"])
    def test_scannable_encoding_accepted(self, encoding: str) -> None:
        assert ScanConfig(encoding=encoding).encoding == encoding
        assert is_scannable_encoding(encoding) is True

    def test_single_byte_codec_scans_high_bytes(self) -> None:
        config = ScanConfig(encoding="cp1252")
        assert scan("\u20ac{{ '\u2019' }}\u2019", config=config) == (
            "\u20ac",
            " '\u2019' ",
            "\u2019",
        )

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"encoding": "latin-1", "no_such_option": True})
        assert config.encoding == "latin-1"
        assert config.trace is False


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_scan_config()

    def test_default(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_reset(self) -> None:
        set_scan_config(ScanConfig(trace=True))
        assert get_scan_config().trace is True
        reset_scan_config()
        assert get_scan_config().trace is False

    def test_context_manager_restores(self) -> None:
        with scan_config_context(ScanConfig(encoding="latin-1")):
            assert get_scan_config().encoding == "latin-1"
        assert get_scan_config().encoding == "utf-8"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(trace=True)):
                raise RuntimeError("boom")
        assert get_scan_config().trace is False

    def test_context_config_used_by_scan(self) -> None:
        with scan_config_context(ScanConfig(encoding="latin-1")):
            assert scan(b"\xe9{{x}}") == ("\xe9", "x", "")

    def test_explicit_config_overrides_context(self) -> None:
        with scan_config_context(ScanConfig(encoding="latin-1")):
            assert scan("é{{x}}".encode(), config=ScanConfig()) == ("é", "x", "")


class TestThreadIsolation:
    def test_threads_do_not_share_config(self) -> None:
        seen: dict[str, str] = {}

        def worker(name: str, encoding: str) -> None:
            set_scan_config(ScanConfig(encoding=encoding))
            seen[name] = get_scan_config().encoding

        threads = [
            Thread(target=worker, args=("a", "latin-1")),
            Thread(target=worker, args=("b", "ascii")),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert seen == {"a": "latin-1", "b": "ascii"}
        assert get_scan_config().encoding == "utf-8"


class TestTrace:
    def test_trace_logs_state_changes(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tessera"):
            scan("a{{b}}", config=ScanConfig(trace=True))
        messages = [r.getMessage() for r in caplog.records]
        assert any("MARKUP -> MARKUP_SAW_OPEN_BRACE" in m for m in messages)
        assert any("CODE_SAW_CLOSE_BRACE -> MARKUP" in m for m in messages)

    def test_no_trace_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tessera"):
            scan("a{{b}}")
        messages = [r.getMessage() for r in caplog.records]
        assert not any("->" in m for m in messages)
        assert any("Scanned 6 bytes into 3 pieces" in m for m in messages)
