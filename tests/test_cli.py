import logging

from click.testing import CliRunner

import etcdlauncher.cli as cli_module


class FakeLauncher:
    captured = []
    exit_code = 0

    def run(self, arguments):
        self.captured.append(arguments)
        return self.exit_code


def test_cli_passes_launcher_style_flags_through(monkeypatch):
    FakeLauncher.captured = []
    monkeypatch.setattr(cli_module, "Launcher", FakeLauncher)

    runner = CliRunner()
    result = runner.invoke(
        cli_module.main,
        ["-stop", "-fg", "--rm", "local", "--host=etcd.example", "--help"],
    )

    assert result.exit_code == 0
    (parsed,) = FakeLauncher.captured
    assert parsed.actions == ["stop"]
    assert parsed.foreground is True
    assert parsed.name_suffix == "local"
    assert parsed.show_help is True
    assert parsed.options[0].field == "host"
    assert parsed.options[0].value == "etcd.example"


def test_cli_exits_with_launcher_status(monkeypatch):
    monkeypatch.setattr(cli_module, "Launcher", FakeLauncher)
    monkeypatch.setattr(FakeLauncher, "exit_code", 3)

    result = CliRunner().invoke(cli_module.main, ["-stop"])

    assert result.exit_code == 3


def test_cli_verbose_and_log_file_configure_logging(tmp_path, monkeypatch):
    monkeypatch.setattr(cli_module, "Launcher", FakeLauncher)
    log_file = tmp_path / "launcher.log"
    logger = logging.getLogger("etcdlauncher")

    try:
        result = CliRunner().invoke(cli_module.main, ["--verbose", f"--log-file={log_file}"])
        assert result.exit_code == 0
        assert logger.level == logging.DEBUG
        assert any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_file)
            for handler in logger.handlers
        )
    finally:
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)
        logging.getLogger().setLevel(logging.INFO)
