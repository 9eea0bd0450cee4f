"""Tests for the gdtfkit command-line interface."""

from __future__ import annotations

import logging

import pytest

from gdtfkit.cli.main import build_arg_parser, main


def run_cli(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def squeeze(text: str) -> str:
    """Drop whitespace so assertions survive console line wrapping."""
    return "".join(text.split())


@pytest.fixture
def bracketed_description(tmp_path):
    path = tmp_path / "description.xml"
    path.write_text(
        '<GDTF DataVersion="1.1"><FixtureType Name="Spot [/bold] 1" ShortName="[i]S" '
        'LongName="Spot :fire: [link=x]" Manufacturer="Acme [red]" Description="d" '
        'FixtureTypeID="8F54E11C-4C91-11EC-81D3-0242AC130003"><AttributeDefinitions/>'
        '<Wheels><Wheel Name="[b]Gobo"><Slot Name="Open [shake]"/></Wheel></Wheels>'
        "</FixtureType></GDTF>"
    )
    return path


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging.getLogger().setLevel(logging.WARNING)


class TestArgParser:
    """Tests for build_arg_parser."""

    def test_validate_takes_many_files(self) -> None:
        args = build_arg_parser().parse_args(["validate", "a.gdtf", "b.gdtf"])
        assert args.cmd == "validate"
        assert args.files == ["a.gdtf", "b.gdtf"]

    def test_global_options(self) -> None:
        args = build_arg_parser().parse_args(["--log-level", "DEBUG", "--structured-logs", "inspect", "a.gdtf"])
        assert args.log_level == "DEBUG"
        assert args.structured_logs is True
        assert args.file == "a.gdtf"

    def test_subcommand_is_required(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args([])


class TestInspect:
    """Tests for the inspect subcommand."""

    def test_prints_summary(self, sample_archive, capsys) -> None:
        assert run_cli(["inspect", str(sample_archive)]) == 0

        out = capsys.readouterr().out
        assert "Acme Spot 300 Profile" in out
        assert "Standard" in out
        assert "Gobo Wheel" in out

    def test_reports_decode_error(self, tmp_path, capsys) -> None:
        path = tmp_path / "description.xml"
        path.write_text('<GDTF DataVersion="2.0"/>')

        assert run_cli(["inspect", str(path)]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_document_text_is_printed_literally(self, bracketed_description, capsys) -> None:
        assert run_cli(["inspect", str(bracketed_description)]) == 0

        out = squeeze(capsys.readouterr().out)
        for text in ["Spot[/bold]1", "[i]S", "Spot:fire:[link=x]", "Acme[red]", "[b]Gobo", "Open[shake]"]:
            assert text in out

    def test_error_text_is_printed_literally(self, tmp_path, capsys) -> None:
        path = tmp_path / "description.xml"
        path.write_text('<GDTF DataVersion="[/bold]"/>')

        assert run_cli(["inspect", str(path)]) == 1
        assert "'[/bold]'" in squeeze(capsys.readouterr().out)


class TestValidate:
    """Tests for the validate subcommand."""

    def test_all_ok(self, sample_archive, sample_description_path, capsys) -> None:
        assert run_cli(["validate", str(sample_archive), str(sample_description_path)]) == 0
        out = capsys.readouterr().out
        assert out.count("OK") == 2
        assert "2/2 files decoded" in out

    def test_failure_sets_exit_code(self, sample_archive, make_archive, capsys) -> None:
        broken = make_archive({"readme.txt": b"no description"}, name="broken.gdtf")

        assert run_cli(["validate", str(sample_archive), str(broken)]) == 1
        out = capsys.readouterr().out
        assert "FAIL" in out
        assert "1/2 files decoded" in out

    def test_failure_shows_decode_context(self, tmp_path, capsys) -> None:
        path = tmp_path / "description.xml"
        path.write_text(
            '<GDTF DataVersion="1.1"><FixtureType Name="X" ShortName="X" LongName="X" '
            'Manufacturer="Acme" Description="d" FixtureTypeID="1"><AttributeDefinitions/>'
            '<Wheels><Wheel Name="W"><Slot Color="red"/></Wheel></Wheels></FixtureType></GDTF>'
        )

        assert run_cli(["validate", str(path)]) == 1
        out = capsys.readouterr().out
        assert "ColorCIE" in out
        assert "while decoding <Slot> attribute Color" in out

    def test_failure_with_markup_in_message(self, tmp_path, capsys) -> None:
        path = tmp_path / "description.xml"
        path.write_text('<GDTF DataVersion="[/red]"/>')

        assert run_cli(["validate", str(path)]) == 1
        out = squeeze(capsys.readouterr().out)
        assert "FAIL" in out
        assert "InvalidDataVersion'[/red]'" in out
        assert "0/1filesdecoded" in out

    def test_ok_line_with_markup_in_names(self, bracketed_description, capsys) -> None:
        assert run_cli(["validate", str(bracketed_description)]) == 0
        assert "Acme[red]Spot[/bold]1" in squeeze(capsys.readouterr().out)


class TestConfig:
    """Tests for --config handling."""

    def test_config_file_is_applied(self, tmp_path, sample_archive) -> None:
        config = tmp_path / "gdtfkit.yaml"
        config.write_text("logging:\n  level: ERROR\n")

        assert run_cli(["--config", str(config), "validate", str(sample_archive)]) == 0
        assert logging.getLogger().level == logging.ERROR

    def test_log_level_flag_overrides_config(self, tmp_path, sample_archive) -> None:
        config = tmp_path / "gdtfkit.yaml"
        config.write_text("logging:\n  level: ERROR\n")

        assert run_cli(["--config", str(config), "--log-level", "INFO", "validate", str(sample_archive)]) == 0
        assert logging.getLogger().level == logging.INFO

    def test_missing_config(self, tmp_path, capsys) -> None:
        assert run_cli(["--config", str(tmp_path / "absent.yaml"), "validate", "x.gdtf"]) == 1
        assert "Could not load config" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path, capsys) -> None:
        config = tmp_path / "gdtfkit.json"
        config.write_text('{"parser": {"chunk_size": -1}}')
        assert run_cli(["--config", str(config), "validate", "x.gdtf"]) == 1
        assert "Could not load config" in capsys.readouterr().out
