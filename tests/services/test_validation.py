import pytest

from etcdlauncher.errors import UsageError, ValidationError
from etcdlauncher.models import RunConfig
from etcdlauncher.services.validation import ValidationService


def test_empty_certificate_paths_are_allowed():
    ValidationService().ensure_certificate_files(RunConfig())


def test_existing_certificate_files_pass(tmp_path):
    for name in ("ca.crt", "client.crt", "client.key"):
        (tmp_path / name).write_text("x", encoding="utf-8")

    config = RunConfig(
        ca_file=str(tmp_path / "ca.crt"),
        cert_file=str(tmp_path / "client.crt"),
        key_file=str(tmp_path / "client.key"),
    )

    ValidationService().ensure_certificate_files(config)


def test_missing_key_file_is_rejected(tmp_path):
    config = RunConfig(key_file=str(tmp_path / "missing.key"))

    with pytest.raises(ValidationError, match="does not exist"):
        ValidationService().ensure_certificate_files(config)


def test_directory_is_not_a_certificate_file(tmp_path):
    config = RunConfig(ca_file=str(tmp_path))

    with pytest.raises(ValidationError, match="--ca="):
        ValidationService().ensure_certificate_files(config)


@pytest.mark.parametrize(
    "value,expected",
    [("1", True), ("65535", True), ("0", False), ("65536", False), ("", False), ("8o", False)],
)
def test_is_port(value, expected):
    assert ValidationService.is_port(value) is expected


def test_single_line_values_pass():
    ValidationService().ensure_single_line("etcd.example", "host")


def test_newline_is_rejected_with_option_name():
    with pytest.raises(UsageError, match="--host="):
        ValidationService().ensure_single_line("a\nb", "host")
