import pytest

from etcdlauncher.errors import UsageError
from etcdlauncher.models import ConfigOption, RunConfig
from etcdlauncher.services.options import OptionService


def test_parse_mode_flags():
    parsed = OptionService().parse(["-i", "-d", "--keep"])

    assert parsed.interactive is True
    assert parsed.foreground is True
    assert parsed.debug is True
    assert parsed.keep is True
    assert parsed.options == []


@pytest.mark.parametrize("flag", ["-h", "-help", "--help"])
def test_parse_help_flags(flag):
    assert OptionService().parse(["--port=1", flag]).show_help is True


def test_bare_token_is_name_suffix_and_forces_keep():
    parsed = OptionService().parse(["--rm", "local"])

    assert parsed.name_suffix == "local"
    assert parsed.container_name is None
    assert parsed.keep is True


def test_last_keep_flag_wins():
    parsed = OptionService().parse(["--name=foo", "--rm"])

    assert parsed.container_name == "foo"
    assert parsed.keep is False


def test_actions_and_options_keep_their_order():
    parsed = OptionService().parse(["--host=etcd.example", "-stop", "--port=8080", "--reset", "-x"])

    assert parsed.actions == ["stop", "reset"]
    assert parsed.options == [
        ConfigOption(raw="--host=etcd.example", field="host", value="etcd.example"),
        ConfigOption(raw="--port=8080", field="port", value="8080"),
        ConfigOption(raw="-x"),
    ]


def test_parse_ambient_logging_options():
    parsed = OptionService().parse(["--verbose", "--log-file=/tmp/launcher.log"])

    assert parsed.verbose is True
    assert parsed.log_file == "/tmp/launcher.log"
    assert parsed.options == []


def test_apply_sets_configuration_fields():
    service = OptionService()
    config = RunConfig()
    parsed = service.parse(
        [
            "--image=custom",
            "--user=admin",
            "--pass=secret",
            "--port=8080",
            "--etcd=2379",
            "--cert=/c.crt",
            "--key=/c.key",
            "--ca=/ca.crt",
            "-r",
        ]
    )

    service.apply(config, parsed.options)

    assert config.image_name == "custom"
    assert config.auth_user == "admin"
    assert config.auth_pass == "secret"
    assert config.port == "8080"
    assert config.etcd_port == "2379"
    assert config.cert_file == "/c.crt"
    assert config.key_file == "/c.key"
    assert config.ca_file == "/ca.crt"
    assert config.resolve is True


def test_apply_host_clears_resolved_address():
    service = OptionService()
    config = RunConfig(host="old.example", address="10.0.0.1")

    service.apply(config, service.parse(["--host=new.example"]).options)

    assert config.host == "new.example"
    assert config.address == ""


def test_apply_rejects_unrecognised_option():
    service = OptionService()

    with pytest.raises(UsageError, match="Unrecognised option: '--bogus'"):
        service.apply(RunConfig(), service.parse(["--bogus"]).options)


@pytest.mark.parametrize("value", ["http", "0", "70000", "-1"])
def test_apply_rejects_invalid_ports(value):
    service = OptionService()

    with pytest.raises(UsageError, match="Invalid web interface port"):
        service.apply(RunConfig(), service.parse([f"--port={value}"]).options)


def test_apply_allows_clearing_a_port():
    service = OptionService()
    config = RunConfig(port="8080")

    service.apply(config, service.parse(["--port="]).options)

    assert config.port == ""


@pytest.mark.parametrize("arg", ["--host=a\nb", "--user=ad\tmin", "--image=etcd\x00browser"])
def test_apply_rejects_control_characters(arg):
    service = OptionService()
    config = RunConfig()

    with pytest.raises(UsageError, match="control character"):
        service.apply(config, service.parse([arg]).options)

    assert config.host == ""
    assert config.auth_user == ""
