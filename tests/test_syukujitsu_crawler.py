"""Tests for the Cabinet Office CSV ingestion job."""

import pytest
import requests

from holidays_jp_api.services import syukujitsu_crawler
from holidays_jp_api.services.syukujitsu_crawler import (
    SyukujitsuCrawler,
    SyukujitsuDownloadError,
    SyukujitsuFormatError,
    format_date,
    main,
    parse_syukujitsu,
    render_holidays_module,
)


SAMPLE_CSV = (
    "国民の祝日・休日月日,国民の祝日・休日名称\r\n"
    "2024/1/1,元日\r\n"
    "2023/1/9,成人の日\r\n"
    "2023/1/2,休日\r\n"
    "2023/1/1,元日\r\n"
).encode("cp932")


class FakeResponse:
    def __init__(self, status_code, content=b""):
        self.status_code = status_code
        self.content = content


def _exec_module(source):
    namespace = {}
    exec(source, namespace)
    return namespace


class TestFormatDate:
    def test_pads_month_and_day(self):
        assert format_date("2021/1/1") == "2021-01-01"
        assert format_date("1955/11/23") == "1955-11-23"

    def test_rejects_other_formats(self):
        with pytest.raises(SyukujitsuFormatError):
            format_date("2021-01-01")

    def test_rejects_impossible_date(self):
        with pytest.raises(SyukujitsuFormatError):
            format_date("2023/2/30")


class TestParse:
    def test_sorted_and_normalized(self):
        assert parse_syukujitsu(SAMPLE_CSV) == [
            ("2023-01-01", "元日"),
            ("2023-01-02", "休日"),
            ("2023-01-09", "成人の日"),
            ("2024-01-01", "元日"),
        ]

    def test_skips_blank_lines(self):
        raw = SAMPLE_CSV + b"\r\n"
        assert len(parse_syukujitsu(raw)) == 4

    def test_decode_error(self):
        with pytest.raises(SyukujitsuFormatError):
            parse_syukujitsu(b"header\r\n2023/1/1,\x81")

    def test_missing_column(self):
        raw = "見出し,名称\r\n2023/1/1\r\n".encode("cp932")
        with pytest.raises(SyukujitsuFormatError):
            parse_syukujitsu(raw)

    def test_duplicate_date(self):
        raw = "見出し,名称\r\n2023/1/1,元日\r\n2023/1/1,元日\r\n".encode("cp932")
        with pytest.raises(SyukujitsuFormatError):
            parse_syukujitsu(raw)

    def test_empty(self):
        with pytest.raises(SyukujitsuFormatError):
            parse_syukujitsu("見出し,名称\r\n".encode("cp932"))


class TestRender:
    def test_generated_module_is_importable(self):
        source = render_holidays_module(parse_syukujitsu(SAMPLE_CSV))
        namespace = _exec_module(source)
        assert namespace["HOLIDAYS_START_YEAR"] == 2023
        assert namespace["HOLIDAYS_END_YEAR"] == 2024
        assert namespace["HOLIDAYS"][1] == ("2023-01-02", "休日")


class TestCrawler:
    def test_download_and_generate(self, monkeypatch, tmp_path):
        calls = []

        def fake_get(url, headers=None, timeout=None):
            calls.append(url)
            return FakeResponse(200, SAMPLE_CSV)

        monkeypatch.setattr(syukujitsu_crawler.requests, "get", fake_get)
        raw_file = tmp_path / "raw" / "syukujitsu.csv"
        output_file = tmp_path / "holidays_generated.py"
        crawler = SyukujitsuCrawler(
            url="https://example.invalid/syukujitsu.csv",
            raw_file=str(raw_file),
            output_file=str(output_file),
        )

        holidays = crawler.run()

        assert calls == ["https://example.invalid/syukujitsu.csv"]
        assert raw_file.read_bytes() == SAMPLE_CSV
        assert len(holidays) == 4
        namespace = _exec_module(output_file.read_text(encoding="utf-8"))
        assert namespace["HOLIDAYS"][0] == ("2023-01-01", "元日")

    def test_unexpected_status(self, monkeypatch, tmp_path):
        monkeypatch.setattr(syukujitsu_crawler.requests, "get", lambda *a, **kw: FakeResponse(503))
        crawler = SyukujitsuCrawler(raw_file=str(tmp_path / "raw.csv"), output_file=str(tmp_path / "out.py"))
        with pytest.raises(SyukujitsuDownloadError):
            crawler.download()
        assert not (tmp_path / "raw.csv").exists()

    def test_network_error(self, monkeypatch, tmp_path):
        def fail(*args, **kwargs):
            raise requests.ConnectionError("boom")

        monkeypatch.setattr(syukujitsu_crawler.requests, "get", fail)
        crawler = SyukujitsuCrawler(raw_file=str(tmp_path / "raw.csv"), output_file=str(tmp_path / "out.py"))
        with pytest.raises(SyukujitsuDownloadError):
            crawler.download()


class TestMain:
    def test_local_input(self, tmp_path):
        source = tmp_path / "syukujitsu.csv"
        source.write_bytes(SAMPLE_CSV)
        output = tmp_path / "out.py"

        assert main(["--input", str(source), "--output", str(output)]) == 0
        assert "HOLIDAYS_END_YEAR = 2024" in output.read_text(encoding="utf-8")

    def test_failure_exit_code(self, tmp_path, capsys):
        source = tmp_path / "broken.csv"
        source.write_bytes("見出し,名称\r\nnot-a-date,元日\r\n".encode("cp932"))
        output = tmp_path / "out.py"

        assert main(["--input", str(source), "--output", str(output)]) == 1
        assert "更新失败" in capsys.readouterr().out
        assert not output.exists()
