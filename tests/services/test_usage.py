from etcdlauncher.models import RunConfig
from etcdlauncher.services.usage import UsageService


def test_usage_shows_defaults_when_no_container():
    config = RunConfig(container_name="etcd-browser", address="etcd.example", ca_file="/ca.crt")

    text = UsageService(prog="etcd-browser").render(config)

    assert text.startswith("Usage:  etcd-browser <options>")
    assert "the web interface port (default: 8000)" in text
    assert "to view etcd host etcd.example:4001" in text
    assert "Certificate locations default to auto on this system:" in text
    assert "  CA file /ca.crt" in text
    assert "Saved settings" not in text


def test_usage_includes_saved_settings_and_container_env():
    config = RunConfig(container_name="etcd-browser-local", port="9000")

    text = UsageService().render(
        config,
        saved_settings='port="9000"\nhost="etcd.example"\n',
        container_env=["ETCD_HOST=etcd.example", "SERVER_PORT=9000"],
    )

    assert "Saved settings (for interactive use):\n  port=\"9000\"\n  host=\"etcd.example\"" in text
    assert "  Existing container etcd-browser-local" in text
    assert "    SERVER_PORT=9000" in text
    assert "provides web interface" not in text
    assert "(default: 9000)" in text


def test_usage_hides_certificate_style_when_none():
    config = RunConfig(cert_style="none")

    assert "Certificate locations default" not in UsageService().render(config)
