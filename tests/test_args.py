import pytest

from videograb import __version__
from videograb.args import ArgumentError, ArgumentParser, CliError, GracefulStop


def test_no_args_raises_graceful_stop():
    with pytest.raises(GracefulStop):
        ArgumentParser().validate_and_normalize([])


@pytest.mark.parametrize(
    "argv, kind",
    [
        (["-u", "bob"], CliError.MISSING_REQUIRED_ARG),
        (["-V"], CliError.MISSING_REQUIRED_ARG),
        (["-V", "https://a", "-F", "list"], CliError.VIDEOURLS_ARG_CONFLICT),
        (["--videoUrls", "urls.txt"], CliError.FILE_INPUT_VIDEOURLS_ARG),
        (["--videoUrlsFile", "list"], CliError.INPUT_URLS_FILE_NOT_FOUND),
    ],
)
def test_validation_errors(workdir, argv, kind):
    with pytest.raises(ArgumentError) as exc_info:
        ArgumentParser().validate_and_normalize(argv)

    assert exc_info.value.kind is kind
    assert str(exc_info.value) == kind.message


def test_defaults():
    args = ArgumentParser().validate_and_normalize(["-V", "https://a"])

    assert args.video_urls == ["https://a"]
    assert args.username is None
    assert args.output_directory == "videos"
    assert args.no_thumbnails is False
    assert args.simulate is False
    assert args.verbose is False
    assert not hasattr(args, "video_urls_file")


def test_short_flags():
    args = ArgumentParser().validate_and_normalize(
        ["-V", "https://a", "https://b", "-u", "bob", "-o", "out", "-nthumb", "-s", "-v"]
    )

    assert args.video_urls == ["https://a", "https://b"]
    assert args.username == "bob"
    assert args.output_directory == "out"
    assert args.no_thumbnails is True
    assert args.simulate is True
    assert args.verbose is True


def test_file_option_normalized(workdir):
    (workdir / "list.txt").write_text("https://a\n")

    args = ArgumentParser().validate_and_normalize(["--videoUrlsFile", "list"])

    assert args.video_urls == ["list.txt"]
    assert not hasattr(args, "video_urls_file")


def test_output_directory_from_environment(monkeypatch):
    monkeypatch.setenv("VIDEOGRAB_OUTPUT_DIRECTORY", "downloads")

    args = ArgumentParser().validate_and_normalize(["-V", "https://a"])
    assert args.output_directory == "downloads"

    args = ArgumentParser().validate_and_normalize(["-V", "https://a", "-o", "here"])
    assert args.output_directory == "here"


def test_parse_args_no_args_prints_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        ArgumentParser().parse_args([])

    assert exc_info.value.code == 0
    assert "--videoUrlsFile" in capsys.readouterr().out


def test_parse_args_error_exits_non_zero(capsys):
    with pytest.raises(SystemExit) as exc_info:
        ArgumentParser().parse_args(["-u", "bob"])

    assert exc_info.value.code == 2
    assert "You must specify a URLs source." in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        ArgumentParser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_logging_config(monkeypatch):
    parser = ArgumentParser()
    args = parser.validate_and_normalize(["-V", "https://a"])
    assert parser.get_logging_config(args) == {"level": "default"}

    args = parser.validate_and_normalize(["-V", "https://a", "--verbose"])
    assert parser.get_logging_config(args) == {"level": "debug"}

    monkeypatch.setenv("VIDEOGRAB_VERBOSE", "true")
    args = parser.validate_and_normalize(["-V", "https://a"])
    assert parser.get_logging_config(args) == {"level": "debug"}


def test_repeated_url_flags_are_joined():
    args = ArgumentParser().validate_and_normalize(
        ["-V", "https://a", "--videoUrls", "https://b", "https://c"]
    )

    assert args.video_urls == ["https://a", "https://b", "https://c"]


def test_url_flag_without_values_is_empty_list():
    args = ArgumentParser().parser.parse_args(["-V"])

    assert args.video_urls == []


def test_file_flag_without_value():
    with pytest.raises(ArgumentError) as exc_info:
        ArgumentParser().validate_and_normalize(["-F"])

    assert exc_info.value.kind is CliError.MISSING_REQUIRED_ARG


def test_long_urls_file_name_reports_not_found():
    with pytest.raises(ArgumentError) as exc_info:
        ArgumentParser().validate_and_normalize(["-F", "x" * 300])

    assert exc_info.value.kind is CliError.INPUT_URLS_FILE_NOT_FOUND
